"""Logger interface for transfer statistics, plus stdlib/Rich logging setup.

The client only ever calls ``logger.notice(message)`` on the logger held in
its configuration.  :class:`StdlibNoticeLogger` bridges that to
:mod:`logging` at the custom :data:`NOTICE` level, and :class:`NullLogger`
discards everything.

Internal diagnostics (cache failures, timings) go through ordinary
module-level :func:`logging.getLogger` loggers under the
``contentful_core`` namespace.  :func:`configure_logging` attaches a Rich
handler writing to stderr to that namespace.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Protocol, runtime_checkable

from rich.console import Console
from rich.logging import RichHandler

NOTICE = 25
"""Log level between INFO and WARNING used for transfer statistics."""

logging.addLevelName(NOTICE, "NOTICE")

_ROOT_LOGGER_NAME = "contentful_core"


@runtime_checkable
class NoticeLogger(Protocol):
    """Single-severity sink.  Implementations must not block indefinitely."""

    def notice(self, message: str) -> None:
        ...


class NullLogger:
    """A :class:`NoticeLogger` that drops every message."""

    def notice(self, message: str) -> None:
        pass


class StdlibNoticeLogger:
    """Forward notices to a :class:`logging.Logger` at level :data:`NOTICE`.

    Args:
        logger: Target logger.  Defaults to ``contentful_core.transfer``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(f"{_ROOT_LOGGER_NAME}.transfer")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def notice(self, message: str) -> None:
        self._logger.log(NOTICE, message)


def configure_logging(level: int | str = logging.WARNING, rich: bool = True) -> logging.Logger:
    """Attach a stderr handler to the ``contentful_core`` logger.

    Calling this more than once replaces the previously installed handler
    rather than stacking another one.

    Args:
        level: Threshold for the package logger (``"NOTICE"`` is accepted).
        rich: Use :class:`rich.logging.RichHandler`; when ``False`` a plain
            :class:`logging.StreamHandler` is used instead.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    for existing in list(logger.handlers):
        if getattr(existing, "_contentful_core", False):
            logger.removeHandler(existing)

    handler: logging.Handler
    if rich:
        handler = RichHandler(
            console=Console(file=sys.stderr, stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    handler._contentful_core = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
