import threading

import pytest

from ctxlog import bootstrap, defaults


class RecordingAdapter:
    def __init__(self, name=""):
        self.name = name
        self.records = []
        self._lock = threading.Lock()

    def write(self, clock, severity, msg, fields):
        with self._lock:
            self.records.append((clock, severity, msg, fields))

    def __repr__(self):
        return f"<RecordingAdapter {self.name}>"


@pytest.fixture(autouse=True)
def fresh_defaults(monkeypatch):
    defaults._reset_defaults()
    monkeypatch.setattr(bootstrap, "_global_cfg", {})
    yield
    defaults._reset_defaults()


@pytest.fixture
def recorder():
    return RecordingAdapter()
