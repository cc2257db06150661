"""Command-line entry point for greeble texture generation."""

import argparse
import logging
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from .config import ScatterOptions, Settings, load_settings
from .core.greeble_generator import InvalidParameterError, generate
from .export import export_images

logger = structlog.get_logger()


def configure_logging(level: str = "INFO", fmt: str = "plain") -> None:
    """Route structlog through stdlib logging with plain or JSON output."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level.upper())

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def build_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    if settings is None:
        settings = Settings()
    parser = argparse.ArgumentParser(
        prog="py-greebler",
        description="Generate a greebled height map and normal map",
    )
    parser.add_argument("--dim", type=int, default=settings.dim, help="Texture size in pixels")
    parser.add_argument("--limit", type=int, default=settings.limit, help="Smallest subdivided size")
    parser.add_argument("--seed", type=int, default=settings.seed, help="PRNG seed")
    parser.add_argument("--heightmap", default=settings.heightmap_path, help="Height map output path")
    parser.add_argument("--normalmap", default=settings.normalmap_path, help="Normal map output path")
    parser.add_argument("--height-min", type=float, default=settings.height_min,
                        help="Height mapped to black")
    parser.add_argument("--height-max", type=float, default=settings.height_max,
                        help="Height mapped to white")
    parser.add_argument("--grooves", type=int, default=settings.scatter_grooves,
                        help="Random grooves scattered after partitioning")
    parser.add_argument("--rectangles", type=int, default=settings.scatter_rectangles,
                        help="Random rectangles scattered after partitioning")
    parser.add_argument("--circles", type=int, default=settings.scatter_circles,
                        help="Random circles scattered after partitioning")
    parser.add_argument("--rows", type=int, default=settings.scatter_rows,
                        help="Random primitive rows scattered after partitioning")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument("--log-format", choices=["plain", "json"], default=settings.log_format,
                        help="Logging format")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
    except ValidationError as e:
        configure_logging()
        logger.error("Invalid GREEBLER_* settings", error=str(e))
        return 2

    args = build_parser(settings).parse_args(argv)
    configure_logging(args.log_level, args.log_format)

    counts = (args.grooves, args.rectangles, args.circles, args.rows)
    if any(c < 0 for c in counts):
        logger.error("Scatter counts must not be negative", counts=counts)
        return 2

    scatter = ScatterOptions(
        grooves=args.grooves, rectangles=args.rectangles, circles=args.circles, rows=args.rows
    )
    try:
        height_field, normal_map = generate(args.dim, args.limit, args.seed, scatter=scatter)
    except InvalidParameterError as e:
        logger.error("Invalid generation parameters", error=str(e))
        return 2

    try:
        export_images(
            height_field, normal_map, args.heightmap, args.normalmap,
            args.height_min, args.height_max,
        )
    except (OSError, ValueError) as e:
        logger.error("Export failed", error=str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
