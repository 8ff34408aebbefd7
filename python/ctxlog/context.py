# Propagation of a Logger and Fields through an immutable execution context.
#
# The carrier is an OpenTelemetry ``Context``; ``ctx=None`` stands for the
# current one. Only the two private keys below are ever read or written.

from __future__ import annotations
import sys
from typing import Any, NoReturn, Optional

from opentelemetry import context as otel_context
from opentelemetry.context import Context

from .defaults import default_logger
from .fields import Fields, merge_fields
from .logging import Logger

_LOGGER_KEY = otel_context.create_key("ctxlog-logger")
_FIELDS_KEY = otel_context.create_key("ctxlog-fields")


def from_context(ctx: Optional[Context]) -> Logger:
    """Return the Logger attached to ``ctx``, or the default Logger."""
    logger = otel_context.get_value(_LOGGER_KEY, ctx)
    if logger is None:
        return default_logger()
    return logger


def with_logger(ctx: Optional[Context], logger: Logger) -> Context:
    return otel_context.set_value(_LOGGER_KEY, logger, ctx)


def context_fields(ctx: Optional[Context]) -> Optional[Fields]:
    return otel_context.get_value(_FIELDS_KEY, ctx)


def with_fields(ctx: Optional[Context], fields: Optional[Fields] = None, **kv: Any) -> Context:
    """Derive a context whose fields are the current ones merged with ``fields``."""
    if kv:
        fields = merge_fields(fields, kv)
    return otel_context.set_value(_FIELDS_KEY, merge_fields(context_fields(ctx), fields), ctx)


def infof(ctx: Optional[Context], fmt: str, *args: Any) -> None:
    from_context(ctx).with_fields(context_fields(ctx)).infof(fmt, *args)


def errorf(ctx: Optional[Context], fmt: str, *args: Any) -> None:
    from_context(ctx).with_fields(context_fields(ctx)).errorf(fmt, *args)


def fatalf(ctx: Optional[Context], fmt: str, *args: Any) -> NoReturn:
    """Like errorf, then exit the process with status 1."""
    errorf(ctx, fmt, *args)
    sys.exit(1)
