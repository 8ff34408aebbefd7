# Output boundary: the Adapter contract plus the stream-backed adapters.

from __future__ import annotations
import json, sys, threading
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Protocol, TextIO

from .fields import Fields

_TS_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class Severity(int):
    """Open integer severity scale with two reserved names."""

    def __str__(self) -> str:
        return _SEVERITY_NAMES.get(int(self), f"level({int(self)})")

    def __repr__(self) -> str:
        return f"Severity({int(self)})"


INFO = Severity(20)
ERROR = Severity(40)

_SEVERITY_NAMES = {20: "info", 40: "error"}


class Adapter(Protocol):
    def write(self, clock: datetime, severity: Severity, msg: str, fields: Optional[Fields]) -> None: ...


class AdapterFunc:
    """Use a plain ``fn(clock, severity, msg, fields)`` as an Adapter."""

    def __init__(self, fn: Callable[[datetime, Severity, str, Optional[Fields]], None]) -> None:
        self._fn = fn

    def write(self, clock: datetime, severity: Severity, msg: str, fields: Optional[Fields]) -> None:
        self._fn(clock, severity, msg, fields)


def _timestamp(clock: datetime) -> str:
    return clock.astimezone(timezone.utc).strftime(_TS_FORMAT)

def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


class _StreamAdapter:
    # name of the sys stream used when none is given; looked up per write
    _fallback = "stderr"

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def _target(self) -> TextIO:
        return self._stream if self._stream is not None else getattr(sys, self._fallback)

    def _emit(self, line: str) -> None:
        with self._lock:
            out = self._target()
            out.write(line + "\n")
            out.flush()

    def flush(self) -> None:
        with self._lock:
            self._target().flush()


class StdlibAdapter(_StreamAdapter):
    """Plain text lines on stderr: ``<ts> <msg> key="value" ...``.

    Fields are appended in sorted key order. Every severity is written.
    """

    _fallback = "stderr"

    def write(self, clock: datetime, severity: Severity, msg: str, fields: Optional[Fields]) -> None:
        line = msg
        if fields:
            for key in sorted(fields):
                line += f" {key}={_format_value(fields[key])}"
        self._emit(f"{_timestamp(clock)} {line}")


class JSONAdapter(_StreamAdapter):
    """One compact JSON object per record on stdout."""

    _fallback = "stdout"

    def write(self, clock: datetime, severity: Severity, msg: str, fields: Optional[Fields]) -> None:
        rec: dict[str, Any] = {"ts": _timestamp(clock), "level": str(severity), "message": msg}
        if fields:
            for key, value in fields.items():
                rec.setdefault(key, value)
        self._emit(json.dumps(rec, separators=(",", ":"), ensure_ascii=False, default=str))
