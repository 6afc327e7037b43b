# io/recorder.py
import json
import logging
import sys
from typing import Protocol

log = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, rec: dict) -> None: ...


class JsonlSink:
    def __init__(self, fp=None):
        self.fp = fp if fp is not None else sys.stdout

    def write(self, rec: dict) -> None:
        self.fp.write(json.dumps(rec, ensure_ascii=False) + "\n")


class MemorySink:
    def __init__(self):
        self.records: list[dict] = []

    def write(self, rec: dict) -> None:
        self.records.append(rec)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, snap, *, run_id: str, seq: int) -> None:
        rec = {"run_id": run_id, "seq": seq, **snap.to_dict()}
        for s in self.sinks:
            try:
                s.write(rec)
            except Exception:
                # a broken sink must not abort the search
                log.warning("sink %s failed", type(s).__name__, exc_info=True)
