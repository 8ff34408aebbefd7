import io
import json
from datetime import datetime, timezone

import pytest

from ctxlog import ERROR, INFO, AdapterFunc, JSONAdapter, MultiAdapter, Severity, StdlibAdapter
from conftest import RecordingAdapter

CLOCK = datetime(2024, 5, 1, 12, 30, 45, tzinfo=timezone.utc)


def test_stdlib_adapter_line():
    out = io.StringIO()
    StdlibAdapter(out).write(CLOCK, INFO, "hello", {"user": "demo", "n": 2})
    assert out.getvalue() == '2024-05-01T12:30:45Z hello n=2 user="demo"\n'


def test_stdlib_adapter_does_not_filter_or_mutate():
    out = io.StringIO()
    fields = {"a": "x"}
    adapter = StdlibAdapter(out)
    adapter.write(CLOCK, ERROR, "bad", fields)
    adapter.write(CLOCK, Severity(1), "quiet", None)
    assert out.getvalue().splitlines() == [
        '2024-05-01T12:30:45Z bad a="x"',
        "2024-05-01T12:30:45Z quiet",
    ]
    assert fields == {"a": "x"}


def test_stdlib_adapter_defaults_to_stderr(capsys):
    StdlibAdapter().write(CLOCK, INFO, "to stderr", None)
    captured = capsys.readouterr()
    assert captured.err == "2024-05-01T12:30:45Z to stderr\n"
    assert captured.out == ""


def test_json_adapter_record():
    out = io.StringIO()
    JSONAdapter(out).write(CLOCK, ERROR, "failed", {"code": 7, "message": "shadowed", "when": CLOCK})
    rec = json.loads(out.getvalue())
    assert rec["ts"] == "2024-05-01T12:30:45Z"
    assert rec["level"] == "error"
    assert rec["message"] == "failed"
    assert rec["code"] == 7
    assert rec["when"] == str(CLOCK)


def test_adapter_func():
    seen = []
    AdapterFunc(lambda *args: seen.append(args)).write(CLOCK, INFO, "m", None)
    assert seen == [(CLOCK, INFO, "m", None)]


def test_multi_adapter_fans_out_in_order():
    order = []
    children = []
    for name in ("a1", "a2", "a3"):
        rec = RecordingAdapter(name)
        children.append(rec)
        order_rec = AdapterFunc(lambda *args, name=name: order.append(name))
        children.append(order_rec)
    fields = {"k": "v"}
    MultiAdapter(*children).write(CLOCK, INFO, "msg", fields)

    assert order == ["a1", "a2", "a3"]
    for rec in children[::2]:
        assert len(rec.records) == 1
        assert rec.records[0] == (CLOCK, INFO, "msg", fields)
        assert rec.records[0][3] is fields


def test_multi_adapter_continues_after_failure(caplog):
    def broken(*args):
        raise RuntimeError("sink down")

    before, after = RecordingAdapter("before"), RecordingAdapter("after")
    MultiAdapter(before, AdapterFunc(broken), after).write(CLOCK, ERROR, "msg", None)

    assert len(before.records) == 1
    assert len(after.records) == 1
    assert any(r.name == "ctxlog.multi" and r.exc_info for r in caplog.records)


def test_multi_adapter_propagates_system_exit():
    def exiting(*args):
        raise SystemExit(3)

    after = RecordingAdapter()
    with pytest.raises(SystemExit):
        MultiAdapter(AdapterFunc(exiting), after).write(CLOCK, INFO, "msg", None)
    assert after.records == []


def test_multi_adapter_empty_and_flush():
    MultiAdapter().write(CLOCK, INFO, "nobody", None)
    MultiAdapter().flush()

    flushed = []

    class Flushing(RecordingAdapter):
        def flush(self):
            flushed.append(self.name)

    multi = MultiAdapter(Flushing("a"), RecordingAdapter("plain"), Flushing("b"))
    multi.flush()
    assert flushed == ["a", "b"]
    assert len(multi.adapters) == 3


def test_json_adapter_defaults_to_stdout(capsys):
    JSONAdapter().write(CLOCK, INFO, "to stdout", None)
    captured = capsys.readouterr()
    assert json.loads(captured.out)["message"] == "to stdout"
    assert captured.err == ""
