__all__ = [
    "init", "shutdown",
    "Fields", "merge_fields",
    "Severity", "INFO", "ERROR",
    "Adapter", "AdapterFunc", "StdlibAdapter", "JSONAdapter", "MultiAdapter",
    "Logger", "VLogger", "NopLogger", "new",
    "set_default_adapter", "default_adapter", "default_logger",
    "from_context", "with_logger", "context_fields", "with_fields",
    "infof", "errorf", "fatalf",
]
__version__ = "0.1.0"

from .fields import Fields, merge_fields
from .adapter import Severity, INFO, ERROR, Adapter, AdapterFunc, StdlibAdapter, JSONAdapter
from .multi import MultiAdapter
from .logging import Logger, VLogger, NopLogger, new
from .defaults import set_default_adapter, default_adapter, default_logger
from .context import from_context, with_logger, context_fields, with_fields, infof, errorf, fatalf
from .bootstrap import init, shutdown
