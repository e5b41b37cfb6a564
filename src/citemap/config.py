"""Writer configuration."""

from dataclasses import asdict, dataclass
from typing import Any

__all__ = ["WriterConfig"]


@dataclass
class WriterConfig:
    """Output formatting options for both document writers.

    Attributes
    ----------
    json_indent : int | None
        Indentation for CSL-JSON output; None writes a single line.
    yaml_indent : int
        Indentation for CFF output (PyYAML accepts 2-9).
    yaml_width : int
        Preferred line width before YAML scalars are folded.
    ensure_ascii : bool
        Escape non-ASCII characters in JSON output and YAML output.
    """

    json_indent: int | None = 2
    yaml_indent: int = 2
    yaml_width: int = 80
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        """Validate."""
        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError(f"json_indent must be >= 0 or None, got {self.json_indent}")

        if not 2 <= self.yaml_indent <= 9:
            raise ValueError(f"yaml_indent must be in [2, 9], got {self.yaml_indent}")

        if self.yaml_width < 20:
            raise ValueError(f"yaml_width must be >= 20, got {self.yaml_width}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
