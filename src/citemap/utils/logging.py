"""Logging setup for command-line use."""

import logging

__all__ = ["configure_logging"]


def configure_logging(*, level: int = logging.WARNING, force: bool = False) -> None:
    """Initialise the root logger once.

    Conversion warnings go to stderr at the default WARNING level. Pass
    ``force=True`` to reconfigure, e.g. in tests.
    """
    logging.basicConfig(
        level=level,
        format="%(levelname)s [%(name)s] %(message)s",
        force=force,
    )
