"""Command-line entry point for RotSprite.

This tool loads an indexed sprite, optionally rotates it, optionally
up-scales it with the Scale2x/Scale3x pixel-art filters, and saves the
result with its original palette.

All processing occurs on NumPy arrays of palette indices; Pillow is used
only for loading and saving.

Usage example:
    python -m rotsprite.main -i sprite.png -o out.png --rotate 30 --scale 3
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .rotation import rotate
from .scalers import EDGE_MODES, apply_scale
from .utils.loader import load_indexed, save_indexed

# Composite factors are chains of 2x and 3x passes.
SCALE_CHAINS = {
    1: (),
    2: (2,),
    3: (3,),
    4: (2, 2),
    6: (2, 3),
    8: (2, 2, 2),
    9: (3, 3),
}


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="rotsprite",
        description=(
            "Rotate and up-scale indexed pixel-art sprites without blending "
            "colours, using supersampled rotation and Scale2x/Scale3x."
        ),
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", required=True, help="Path to output image file")

    parser.add_argument(
        "--rotate",
        type=float,
        default=0.0,
        help="Rotation in degrees, clockwise. Applied before scaling.",
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=1,
        choices=sorted(SCALE_CHAINS),
        help="Final up-scale factor, built from Scale2x and Scale3x passes.",
    )
    parser.add_argument(
        "--edge",
        type=str,
        default="edge",
        choices=list(EDGE_MODES),
        help=(
            "How the scalers read past the image border: edge (replicate "
            "border pixels) | background (transparent index)."
        ),
    )
    parser.add_argument(
        "--opaque",
        action="store_true",
        help="Do not mark the background index as transparent in the output.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")
    if Path(ns.input).resolve() == Path(ns.output).resolve():
        raise ValueError("--output must differ from --input")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    # 1) Load (Pillow -> NumPy palette indices)
    img, palette = load_indexed(args.input)

    # 2) Rotate around the sprite centre
    work = rotate(img, args.rotate)

    # 3) Pixel-art up-scale
    for factor in SCALE_CHAINS[args.scale]:
        work = apply_scale(work, factor, edge=args.edge)

    # 4) Save (NumPy -> Pillow)
    save_indexed(work, args.output, palette=palette, transparent=not args.opaque)
    print(f"Wrote image: {args.output} ({work.shape[1]}x{work.shape[0]})")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
