# Process startup/teardown for the default logging pipeline.
from typing import Optional, Dict, Any, TextIO
from .adapter import Adapter, JSONAdapter, StdlibAdapter
from .multi import MultiAdapter
from .defaults import set_default_adapter, _initialized_adapter

_global_cfg: Dict[str, Any] = {}

def init(
    *adapters: Adapter,
    json_logs: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Install the process-wide default adapter.

    With no adapters a JSONAdapter (``json_logs``) or StdlibAdapter is built
    on ``stream``; several adapters are fanned out through a MultiAdapter.
    Call early: once the default has been read, this has no effect.
    """
    global _global_cfg
    if not adapters:
        adapter: Adapter = JSONAdapter(stream) if json_logs else StdlibAdapter(stream)
    elif len(adapters) == 1:
        adapter = adapters[0]
    else:
        adapter = MultiAdapter(*adapters)
    set_default_adapter(adapter)
    if _initialized_adapter() is not adapter:
        return
    _global_cfg = {
        "adapter": adapter,
        "json_logs": json_logs,
        "stream": stream,
    }

def shutdown() -> None:
    """Flush the default adapter if one is in use."""
    adapter = _initialized_adapter()
    flush = getattr(adapter, "flush", None)
    if callable(flush):
        flush()
