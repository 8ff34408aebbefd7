import ctxlog

def main():
    ctxlog.init(ctxlog.StdlibAdapter())

    ctxlog.default_logger().infof("Some log message")

    field_logger = ctxlog.default_logger().with_fields({"name": "main", "user": "demo"})
    field_logger.error("another log message")
    field_logger.with_fields(session="test").infof("once more")
    field_logger.v(10).logf("debug-ish detail %d", 42)

    ctxlog.shutdown()

if __name__ == "__main__":
    main()
