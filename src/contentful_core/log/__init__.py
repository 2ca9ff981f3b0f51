"""Timing and logging helpers for contentful_core.

- :class:`StandardTimer` -- start/stop wall-clock timer.
- :class:`NoticeLogger`, :class:`NullLogger`, :class:`StdlibNoticeLogger` --
  the single-method logger the client writes transfer records to.
- :class:`TransferStats`, :class:`StatsHandler`, :class:`LoggingStatsHandler`
  -- per-send instrumentation.
- :func:`configure_logging` -- Rich stderr handler for the package logger.
"""

from contentful_core.log.logger import (
    NOTICE,
    NoticeLogger,
    NullLogger,
    StdlibNoticeLogger,
    configure_logging,
)
from contentful_core.log.stats import LoggingStatsHandler, StatsHandler, TransferStats
from contentful_core.log.timer import StandardTimer

__all__ = [
    "NOTICE",
    "LoggingStatsHandler",
    "NoticeLogger",
    "NullLogger",
    "StandardTimer",
    "StatsHandler",
    "StdlibNoticeLogger",
    "TransferStats",
    "configure_logging",
]
