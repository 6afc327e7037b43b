# main.py
import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from flight_trace.app.build import build
from flight_trace.domain.graph import VertexNotFound
from flight_trace.io.recorder import JsonlSink

DATA_DIR = Path(__file__).parent / "data"


def scenario_from_args(ns: argparse.Namespace) -> dict:
    if ns.config:
        cfg = json.loads(Path(ns.config).read_text(encoding="utf-8"))
        for key in ("start", "destination"):
            if getattr(ns, key):
                cfg[key] = getattr(ns, key)
        return cfg
    search = {"kind": ns.algo}
    if ns.algo == "ucs":
        search["weight"] = ns.weight
    return {
        "name": "cli",
        "run_id": "cli",
        "network": {"by": "path", "airports": ns.airports, "routes": ns.routes},
        "search": search,
        "start": ns.start,
        "destination": ns.destination,
        "log": {"level": ns.log_level, "debug": ns.log_level == "DEBUG"},
    }


def run(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Trace BFS/UCS over a flight network.")
    p.add_argument("--config", help="scenario JSON file")
    p.add_argument("--airports", default=str(DATA_DIR / "airports.csv"))
    p.add_argument("--routes", default=str(DATA_DIR / "routes.csv"))
    p.add_argument("--start")
    p.add_argument("--dest", dest="destination")
    p.add_argument("--algo", choices=["bfs", "ucs"], default="bfs")
    p.add_argument("--weight", choices=["time", "price"], default="price")
    p.add_argument("--jsonl", action="store_true", help="stream snapshots as JSON lines")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ns = p.parse_args(argv)

    if not ns.config and not (ns.start and ns.destination):
        p.error("--start and --dest are required without --config")

    try:
        app = build(scenario_from_args(ns), sinks=[JsonlSink()] if ns.jsonl else None)
    except (ValidationError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        res = app.run()
    except VertexNotFound as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    # keep stdout pure JSON lines when streaming
    out = sys.stderr if ns.jsonl else sys.stdout
    if not ns.jsonl:
        for i, snap in enumerate(res, start=1):
            print(f"{i}/{len(res)} {snap.description}", file=out)

    m = res.metrics()
    if m is None:
        print(f"no route from {app.model.start} to {app.model.destination}", file=out)
        return 1
    print(f"path:  {m.path_string}", file=out)
    print(f"time:  {m.time}", file=out)
    print(f"price: {m.price}", file=out)
    print(f"stops: {m.stops}", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(run())
