"""Read-only passthrough buckets for frozen records."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

__all__ = ["freeze_extra"]


def freeze_extra(record: Any) -> None:
    """Replace ``record.extra`` with a read-only view of a private copy.

    Records are frozen dataclasses, so the bucket is swapped in with
    ``object.__setattr__``. The field is excluded from the generated hash;
    equality still compares its contents.

    Parameters
    ----------
    record : Any
        Frozen dataclass instance with an ``extra`` mapping field.
    """
    extra: Mapping[str, Any] = record.extra
    object.__setattr__(record, "extra", MappingProxyType(dict(extra)))
