import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from hypcanvas import (
    HypCanvas,
    MatplotlibSurface,
    PolygonGeometry,
    ScreenXY,
    TikzSurface,
    TraversalConfig,
    regular_tiling_map,
)
from hypcanvas.errors import InvalidTiling

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_pan(value: str) -> Tuple[ScreenXY, ScreenXY]:
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if len(parts) != 4:
        raise argparse.ArgumentTypeError("pan gesture needs four numbers: X0,Y0,X1,Y1")
    try:
        x0, y0, x1, y1 = (float(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid pan gesture {value!r}: {exc}") from None
    return ScreenXY(x0, y0), ScreenXY(x1, y1)


def _make_surface(fmt: str, size: int):
    if fmt == "tikz":
        return TikzSurface(size, size)
    return MatplotlibSurface(size, size)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Render a regular hyperbolic tiling on the Poincaré disk")
    parser.add_argument("sides", type=int, help="Number of sides of each tile")
    parser.add_argument("order", type=int, help="Number of tiles meeting at each vertex")
    parser.add_argument(
        "--size",
        type=int,
        default=500,
        help="Surface width and height in pixels (default: 500)",
    )
    parser.add_argument(
        "--format",
        choices=["tikz", "png", "svg"],
        default="tikz",
        help="Output format (default: tikz)",
    )
    parser.add_argument(
        "--output",
        help="Output path (default: tiling-SIDES-ORDER.<ext>)",
    )
    parser.add_argument(
        "--pan",
        action="append",
        type=_parse_pan,
        default=[],
        metavar="X0,Y0,X1,Y1",
        help="Screen-space drag gesture applied before rendering; may be repeated",
    )
    parser.add_argument(
        "--visibility-radius",
        type=float,
        default=0.95,
        help="Disk radius beyond which tiles are not drawn (default: 0.95)",
    )
    parser.add_argument(
        "--search-radius",
        type=float,
        default=0.2,
        help="Hyperbolic radius used to detect duplicate tiles (default: 0.2)",
    )
    parser.add_argument(
        "--fill",
        default="#fff",
        help="Tile fill colour (default: #fff)",
    )
    parser.add_argument(
        "--stroke",
        default="#000",
        help="Tile outline colour (default: #000)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        geometry = PolygonGeometry(args.sides, args.order)
    except InvalidTiling as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    logger.info(
        "Tiling {%d, %d}: edge length %.6f, vertex radius %.6f, apothem %.6f",
        geometry.sides,
        geometry.order,
        geometry.edge_length,
        geometry.vertex_radius,
        geometry.edge_radius,
    )

    canvas = HypCanvas(
        args.size,
        traversal_config=TraversalConfig(
            visibility_radius=args.visibility_radius,
            search_radius=args.search_radius,
        ),
    )
    world = regular_tiling_map(geometry, fill_style=args.fill, stroke_style=args.stroke)
    canvas.set_map(world, "tile")

    gestures: List[Tuple[ScreenXY, ScreenXY]] = args.pan
    for idx, (start, end) in enumerate(gestures):
        # each gesture re-renders so the focused anchor follows the view
        if not canvas.screen_move(start, end):
            logger.warning("Pan gesture %d was discarded", idx)
        canvas.draw(_make_surface(args.format, args.size))

    surface = _make_surface(args.format, args.size)
    result = canvas.draw(surface)
    drawn = len(result.drawn) if result is not None else 0
    logger.info("Drew %d tile(s), focused on anchor %r", drawn, canvas.anchor_id)

    extension = "tex" if args.format == "tikz" else args.format
    output_path = Path(args.output or f"tiling-{args.sides}-{args.order}.{extension}")
    if args.format == "tikz":
        written = surface.save(output_path)
    else:
        written = surface.save(output_path, format=args.format)
    print(f"Tiles drawn: {drawn}")
    print(f"Output written to {written}")


if __name__ == "__main__":
    main(sys.argv[1:])
