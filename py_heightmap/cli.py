"""
Command line entry point.

    py-heightmap [--width W] [--height H] [--seed N] [--preset NAME]
                 [--octave FREQ:WEIGHT ...] [--output PATH]

Generates one terrain image and prints the observed height range.
"""

import argparse
import secrets
import sys
from typing import List, Optional, Tuple

import structlog
from pydantic import ValidationError

from .config import Settings, get_preset, list_presets
from .core.octaves import make_octave_spec
from .core.raster import RasterAssembler
from .errors import HeightmapError
from .export import export_heights, export_image
from .utils.logging import configure_logging

logger = structlog.get_logger()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_octave(value: str) -> Tuple[float, float]:
    """Parse a FREQ:WEIGHT pair."""
    try:
        frequency, weight = value.split(":")
        return float(frequency), float(weight)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid octave '{value}', expected FREQUENCY:WEIGHT"
        ) from None


def parse_seed(value: str) -> int:
    """Parse a non-negative integer seed."""
    try:
        seed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed '{value}', expected an integer") from None
    if seed < 0:
        raise argparse.ArgumentTypeError(f"invalid seed {seed}, must be non-negative")
    return seed


def random_seed() -> int:
    """63-bit seed from system entropy."""
    return secrets.randbits(63)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-heightmap",
        description="Generate a coloured terrain heightmap from layered simplex noise",
    )
    parser.add_argument("--width", type=int, default=settings.width, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=settings.height, help="Image height in pixels")
    parser.add_argument(
        "--seed", type=parse_seed, default=settings.seed, help="Noise seed (random when omitted)"
    )
    parser.add_argument(
        "--preset",
        default=settings.preset,
        choices=list_presets(),
        help="Octave preset",
    )
    parser.add_argument(
        "--octave",
        dest="octaves",
        action="append",
        type=parse_octave,
        metavar="FREQ:WEIGHT",
        help="Custom octave, may be repeated; overrides --preset",
    )
    parser.add_argument(
        "--output", "-o", default=settings.output_path, help="Colour image destination"
    )
    parser.add_argument(
        "--heights-output",
        default=settings.heights_output_path,
        help="Also write the raw height field as a greyscale image",
    )
    parser.add_argument(
        "--per-cell",
        action="store_true",
        default=not settings.vectorized,
        help="Compose and classify cell by cell instead of with NumPy",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )
    parser.add_argument(
        "--log-format", default=settings.log_format, choices=["plain", "json"], help="Log output format"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the generator; returns the process exit status."""
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"py-heightmap: invalid settings: {e}", file=sys.stderr)
        return 2
    args = build_parser(settings).parse_args(argv)

    configure_logging(args.log_level, args.log_format)

    seed = args.seed if args.seed is not None else random_seed()

    try:
        if args.octaves:
            octaves = make_octave_spec(args.octaves)
        else:
            octaves = get_preset(args.preset)

        result = RasterAssembler().generate(
            args.width,
            args.height,
            octaves,
            seed,
            vectorized=not args.per_cell,
        )
        export_image(result.pixels, args.output)
        if args.heights_output:
            export_heights(result.heights, args.heights_output)
    except HeightmapError as e:
        logger.error("Heightmap generation failed", error=str(e), seed=seed)
        return 1

    print("min", result.height_range.minimum, "max", result.height_range.maximum)
    return 0


if __name__ == "__main__":
    sys.exit(main())
