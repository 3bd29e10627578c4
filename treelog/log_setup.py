"""
Logging Configuration for Applications Using treelog

The treelog modules only create module loggers under the "treelog"
namespace and emit DEBUG records at structural events (branch, hoist,
fold stop, serialization, gather). Nothing is printed until an
application configures logging; the example scripts do it with:

    from treelog.log_setup import setup_logging

    setup_logging()                              # INFO, treelog quiet
    setup_logging(verbose=True)                  # DEBUG, treelog records shown
    setup_logging("WARNING", format_style="compact")
    setup_logging("INFO", library_level="DEBUG") # app at INFO, treelog at DEBUG
"""

import logging
from typing import Optional, Union


LIBRARY_LOGGER = "treelog"

FORMATS = {
    "default": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    "compact": "%(asctime)s | %(levelname)-8s | %(message)s",
}
DATE_FORMAT = "%H:%M:%S"

Level = Union[str, int]


def resolve_level(level: Level) -> int:
    """Turn "debug" / "INFO" / logging.WARNING into a numeric level."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def setup_logging(level: Optional[Level] = None,
                  verbose: bool = False,
                  format_style: str = "default",
                  library_level: Optional[Level] = None) -> logging.Logger:
    """
    Configure the root handler and the treelog logger.

    Args:
        level: Root level. Defaults to DEBUG when verbose, else INFO.
        verbose: Shorthand for DEBUG; an explicit `level` wins.
        format_style: One of FORMATS ("default" or "compact").
        library_level: Level of the "treelog" logger. Defaults to the
            root level when verbose, else WARNING, so structural DEBUG
            records only appear when asked for.

    Returns:
        The "treelog" logger.
    """
    if format_style not in FORMATS:
        raise ValueError(f"format_style must be one of {sorted(FORMATS)}, got {format_style!r}")

    root_level = resolve_level(level) if level is not None else (logging.DEBUG if verbose else logging.INFO)
    if library_level is not None:
        treelog_level = resolve_level(library_level)
    else:
        treelog_level = root_level if verbose else max(root_level, logging.WARNING)

    logging.basicConfig(
        level=root_level,
        format=FORMATS[format_style],
        datefmt=DATE_FORMAT,
        force=True,  # Replace handlers left by earlier configuration
    )
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.setLevel(treelog_level)
    return library_logger


__all__ = [
    'LIBRARY_LOGGER',
    'FORMATS',
    'resolve_level',
    'setup_logging',
]
