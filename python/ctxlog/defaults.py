# Process-wide default Adapter and Logger, each initialized exactly once.

from __future__ import annotations
import threading
from typing import Callable, Optional, cast

from .adapter import Adapter, StdlibAdapter
from .logging import Logger, _Logger


class _Once:
    """Run a callable at most once across all threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def do(self, fn: Callable[[], None]) -> None:
        if self._done:
            return
        with self._lock:
            if not self._done:
                fn()
                self._done = True


_default_adapter: Optional[Adapter] = None
_adapter_once = _Once()
_default_logger: Optional[Logger] = None
_logger_once = _Once()


def set_default_adapter(adapter: Adapter) -> None:
    """Install ``adapter`` as the default.

    Only the first call wins, and only if the default has not been read
    yet; anything later is silently ignored. ``None`` is ignored as well
    and leaves the slot open.
    """
    if adapter is None:
        return
    def _set() -> None:
        global _default_adapter
        _default_adapter = adapter
    _adapter_once.do(_set)


def default_adapter() -> Adapter:
    def _init() -> None:
        global _default_adapter
        _default_adapter = StdlibAdapter()
    _adapter_once.do(_init)
    return cast(Adapter, _default_adapter)


def default_logger() -> Logger:
    def _init() -> None:
        global _default_logger
        _default_logger = _Logger(default_adapter())
    _logger_once.do(_init)
    return cast(Logger, _default_logger)


def _initialized_adapter() -> Optional[Adapter]:
    return _default_adapter if _adapter_once.done else None


def _reset_defaults() -> None:
    # tests only
    global _default_adapter, _adapter_once, _default_logger, _logger_once
    _default_adapter = None
    _adapter_once = _Once()
    _default_logger = None
    _logger_once = _Once()
