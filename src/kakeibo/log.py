"""
Logging setup for the kakeibo CLI.

Log records go to stderr through Rich so they never mix with table output
on stdout. The level is WARNING unless --verbose or KAKEIBO_LOG_LEVEL says
otherwise.
"""
from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from kakeibo.config import LOG_LEVEL_ENV

LOG_FORMAT = "%(message)s"


def resolve_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(verbose: bool = False) -> None:
    """Install a Rich handler on the root logger.

    Safe to call more than once: a previously installed Rich handler is
    replaced, other handlers are left alone.
    """
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(existing)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="[%X]"))
    root.addHandler(handler)
    root.setLevel(resolve_level(verbose))


__all__ = ["setup_logging", "resolve_level"]
