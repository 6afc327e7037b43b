# io/search_logging.py
import json
import logging
import sys

from flight_trace.io.recorder import Recorder
from flight_trace.search.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str, ensure_ascii=False)


def _default_json_logger(name="flight_trace", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stderr)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for search runs, plus optional snapshot recording.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}})

    def run_start(self, *, algorithm, start, destination):
        self._emit("INFO", "run_start", algorithm=algorithm, start=start, destination=destination)

    def step(self, snap, *, seq: int):
        if self.recorder:
            self.recorder.emit(snap, run_id=self.run_id, seq=seq)
        if self.debug and (seq % self.sample_every == 0 or snap.is_terminal):
            self._emit(
                "DEBUG",
                "step",
                seq=seq,
                kind=snap.kind.value,
                frontier=len(snap.frontier),
                visited=len(snap.visited),
                description=snap.description,
            )

    def run_end(self, *, algorithm, found, steps, path, cost, wall_ms):
        self._emit(
            "INFO",
            "run_end",
            algorithm=algorithm,
            found=found,
            steps=steps,
            path=path,
            cost=cost,
            wall_ms=round(wall_ms, 3),
        )

    def error(self, *, reason: str, **kw):
        self._emit("ERROR", "search_error", reason=reason, **kw)
