# Severity-leveled logging facade over an Adapter.

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Optional, Protocol

from .adapter import ERROR, INFO, Adapter, Severity
from .fields import Fields, merge_fields


class VLogger(Protocol):
    def log(self, msg: str, **kv: Any) -> None: ...
    def logf(self, fmt: str, *args: Any, **kv: Any) -> None: ...


class Logger(Protocol):
    def info(self, msg: str, **kv: Any) -> None: ...
    def infof(self, fmt: str, *args: Any, **kv: Any) -> None: ...
    def error(self, msg: str, **kv: Any) -> None: ...
    def errorf(self, fmt: str, *args: Any, **kv: Any) -> None: ...
    def v(self, severity: int) -> VLogger: ...
    def with_fields(self, fields: Optional[Fields] = None, **kv: Any) -> "Logger": ...


def _sprintf(fmt: str, args: tuple[Any, ...]) -> str:
    """printf-style interpolation that never raises.

    A format/argument mismatch yields the format string followed by an
    inline ``%!(BADFORMAT ...)`` diagnostic.
    """
    try:
        return fmt % args
    except Exception as exc:
        return f"{fmt} %!(BADFORMAT {_safe_repr(exc)}: {_safe_args(args)})"


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return f"<{type(value).__name__}>"


def _safe_args(args: tuple[Any, ...]) -> str:
    return "(" + ", ".join(_safe_repr(a) for a in args) + ")"


class _Logger:
    __slots__ = ("_adapter", "_fields")

    def __init__(self, adapter: Adapter, fields: Optional[Fields] = None) -> None:
        self._adapter = adapter
        self._fields = fields

    @property
    def adapter(self) -> Adapter:
        return self._adapter

    @property
    def fields(self) -> Optional[Fields]:
        return self._fields

    def _write(self, severity: Severity, msg: str, kv: dict[str, Any]) -> None:
        fields = merge_fields(self._fields, kv) if kv else self._fields
        self._adapter.write(datetime.now(timezone.utc), severity, msg, fields)

    def info(self, msg: str, **kv: Any) -> None: self._write(INFO, msg, kv)
    def infof(self, fmt: str, *args: Any, **kv: Any) -> None: self._write(INFO, _sprintf(fmt, args), kv)
    def error(self, msg: str, **kv: Any) -> None: self._write(ERROR, msg, kv)
    def errorf(self, fmt: str, *args: Any, **kv: Any) -> None: self._write(ERROR, _sprintf(fmt, args), kv)

    def v(self, severity: int) -> VLogger:
        return _VLogger(self, Severity(severity))

    def with_fields(self, fields: Optional[Fields] = None, **kv: Any) -> Logger:
        if kv:
            fields = merge_fields(fields, kv)
        return _Logger(self._adapter, merge_fields(self._fields, fields))

    def __repr__(self) -> str:
        return f"<Logger adapter={self._adapter!r} fields={self._fields!r}>"


class _VLogger:
    __slots__ = ("_logger", "_severity")

    def __init__(self, logger: _Logger, severity: Severity) -> None:
        self._logger = logger
        self._severity = severity

    def log(self, msg: str, **kv: Any) -> None:
        self._logger._write(self._severity, msg, kv)

    def logf(self, fmt: str, *args: Any, **kv: Any) -> None:
        self._logger._write(self._severity, _sprintf(fmt, args), kv)


class _NopVLogger:
    def log(self, msg: str, **kv: Any) -> None: pass
    def logf(self, fmt: str, *args: Any, **kv: Any) -> None: pass


class NopLogger:
    """Logger that discards everything; handy as a test double."""

    def info(self, msg: str, **kv: Any) -> None: pass
    def infof(self, fmt: str, *args: Any, **kv: Any) -> None: pass
    def error(self, msg: str, **kv: Any) -> None: pass
    def errorf(self, fmt: str, *args: Any, **kv: Any) -> None: pass
    def v(self, severity: int) -> VLogger: return _NopVLogger()
    def with_fields(self, fields: Optional[Fields] = None, **kv: Any) -> Logger: return self


def new(adapter: Adapter) -> Logger:
    """Build a Logger without fields that writes to ``adapter``."""
    return _Logger(adapter)
