# io/inputs.py
from pathlib import Path

from flight_trace.domain.graph import Graph, Route, build_graph


def parse_airports(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_routes(text: str) -> list[Route]:
    """`from,to,time,price` per line.

    Blank lines and rows without exactly four fields are skipped. A first
    row that is not numeric is taken as a header and skipped; anywhere else a
    four-field row with a non-integer field is an error.
    """
    routes: list[Route] = []
    first = True
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        header, first = first, False
        parts = line.split(",")
        if len(parts) != 4:
            continue
        try:
            a, b, t, p = (int(x) for x in parts)
        except ValueError:
            if header:
                continue
            raise ValueError(f"routes line {lineno}: expected 4 integers, got {line!r}") from None
        routes.append(Route(a, b, t, p))
    return routes


def load_network(airports_path: str | Path, routes_path: str | Path) -> Graph:
    airports = parse_airports(Path(airports_path).read_text(encoding="utf-8"))
    routes = parse_routes(Path(routes_path).read_text(encoding="utf-8"))
    return build_graph(airports, routes)
