# Fan-out adapter.

from __future__ import annotations
import logging
from datetime import datetime
from typing import Optional

from .adapter import Adapter, Severity
from .fields import Fields

_log = logging.getLogger("ctxlog.multi")


class MultiAdapter:
    """Write every record to each child adapter, in order.

    A child raising ``Exception`` is reported on the ``ctxlog.multi`` stdlib
    logger and the remaining children are still written to.
    """

    def __init__(self, *adapters: Adapter) -> None:
        self._adapters = tuple(adapters)

    @property
    def adapters(self) -> tuple[Adapter, ...]:
        return self._adapters

    def write(self, clock: datetime, severity: Severity, msg: str, fields: Optional[Fields]) -> None:
        for adapter in self._adapters:
            try:
                adapter.write(clock, severity, msg, fields)
            except Exception:
                _log.exception("adapter %r failed to write record", adapter)

    def flush(self) -> None:
        for adapter in self._adapters:
            flush = getattr(adapter, "flush", None)
            if callable(flush):
                flush()
