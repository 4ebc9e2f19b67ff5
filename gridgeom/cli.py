"""Command line entry point: rasterize lines, circles and steps."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence

from gridgeom.core.circles import circle
from gridgeom.core.direction import Direction
from gridgeom.core.errors import GridGeomError
from gridgeom.core.point import Point
from gridgeom.core.serialization import dumps, point_to_payload, points_to_payload
from gridgeom.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def render_points(points: Iterable[Point], marks: dict[Point, str] | None = None) -> str:
    """Render points as ``#`` cells on the smallest enclosing ASCII grid.

    ``marks`` overrides the glyph of individual cells.
    """
    cells = {point: "#" for point in points}
    cells.update(marks or {})
    if not cells:
        return ""
    min_x = min(point.x for point in cells)
    max_x = max(point.x for point in cells)
    min_y = min(point.y for point in cells)
    max_y = max(point.y for point in cells)
    rows = []
    for y in range(min_y, max_y + 1):
        rows.append("".join(cells.get(Point(x, y), ".") for x in range(min_x, max_x + 1)))
    return "\n".join(rows)


def _direction(value: str) -> Direction:
    try:
        return Direction(value.strip().upper().replace("-", "_"))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"unknown direction: {value}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridgeom", description="Grid geometry helpers.")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of ASCII.")
    sub = parser.add_subparsers(dest="command", required=True)

    line = sub.add_parser("line", help="Bresenham line between two points.")
    for name in ("x0", "y0", "x1", "y1"):
        line.add_argument(name, type=int)

    circ = sub.add_parser("circle", help="Circle outline around a center.")
    circ.add_argument("cx", type=int)
    circ.add_argument("cy", type=int)
    circ.add_argument("radius", type=int)

    step = sub.add_parser("step", help="Move one cell in a direction.")
    step.add_argument("x", type=int)
    step.add_argument("y", type=int)
    step.add_argument("direction", type=_direction)
    return parser


def _run(args: argparse.Namespace) -> tuple[object, str]:
    if args.command == "line":
        start = Point(args.x0, args.y0)
        end = Point(args.x1, args.y1)
        points = start.line_to(end)
        logger.debug("line start=%s end=%s cells=%d", start, end, len(points))
        return points_to_payload(points), render_points(points)
    if args.command == "circle":
        center = Point(args.cx, args.cy)
        points = circle(center, args.radius)
        logger.debug("circle center=%s radius=%d cells=%d", center, args.radius, len(points))
        return points_to_payload(points), render_points(points, {center: "+"})
    origin = Point(args.x, args.y)
    target = origin + args.direction
    return point_to_payload(target), render_points([], {origin: "o", target: "@"})


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        payload, rendered = _run(args)
    except GridGeomError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if args.json:
        print(dumps(payload).decode("utf-8"))
    else:
        print(rendered)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
