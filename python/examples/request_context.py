import sys
from uuid import uuid4
from opentelemetry.context import Context

import ctxlog

def handle(ctx: Context, path: str) -> None:
    ctx = ctxlog.with_fields(ctx, path=path)
    ctxlog.infof(ctx, "handling request")
    lookup(ctx, "AAPL")

def lookup(ctx: Context, symbol: str) -> None:
    ctx = ctxlog.with_fields(ctx, symbol=symbol)
    ctxlog.errorf(ctx, "no quote for %s", symbol)

def main():
    ctxlog.init(ctxlog.StdlibAdapter(), ctxlog.JSONAdapter(sys.stdout))

    ctx = ctxlog.with_logger(Context(), ctxlog.default_logger().with_fields(service="py-quotes"))
    for _ in range(2):
        handle(ctxlog.with_fields(ctx, request_id=str(uuid4())), "/quotes")

    ctxlog.shutdown()

if __name__ == "__main__":
    main()
