"""Render a rotation sweep of a sprite into a PNG frame sequence.

The sprite is registered once with a :class:`RotationRegistry` and then
turned by a fixed step per frame, the way a game loop would call
``change_rotation`` on every tick. Frames are written as
``frame_000000.png``, ``frame_000001.png``, ... into the output directory.

With ``--double`` a second sprite holding the Scale2x-doubled image is
rotated alongside and written as ``frame_000000_x2.png``, ...
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterator, Optional

from .rotation import RotationRegistry
from .scalers import EDGE_MODES, scale2x
from .sprite import Sprite
from .utils.loader import load_indexed, save_indexed


def sweep_angles(start: float, end: float, step: float) -> Iterator[float]:
    """Yield angles from ``start`` to ``end`` inclusive, ``step`` apart.

    A negative ``step`` sweeps counter-clockwise; ``end`` must then be
    below ``start``.
    """
    if step == 0:
        raise ValueError("step must be non-zero")
    angle = start
    while (step > 0 and angle <= end) or (step < 0 and angle >= end):
        yield angle
        angle += step


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
    p = argparse.ArgumentParser(description="Render a sprite rotation sweep to PNG frames")
    p.add_argument("-i", "--input", required=True, help="Input sprite image path")
    p.add_argument("-o", "--outdir", required=True, help="Output directory for PNG frames")
    p.add_argument("--start", type=float, default=0.0, help="First angle in degrees (default 0)")
    p.add_argument("--end", type=float, default=360.0, help="Last angle in degrees, inclusive (default 360)")
    p.add_argument("--step", type=float, default=10.0, help="Degrees turned per frame (default 10)")
    p.add_argument("--double", action="store_true", help="Also rotate a Scale2x-doubled copy")
    p.add_argument("--edge", type=str, default="edge", choices=list(EDGE_MODES))
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")
    if ns.step == 0:
        raise ValueError("--step must be non-zero")
    if (ns.step > 0 and ns.end < ns.start) or (ns.step < 0 and ns.end > ns.start):
        raise ValueError("--step points away from --end")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the frame renderer.

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

    img, palette = load_indexed(args.input)
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    registry = RotationRegistry()
    sprites = [("", Sprite(img, palette=palette))]
    if args.double:
        sprites.append(("_x2", Sprite(scale2x(img, edge=args.edge), palette=palette)))

    written = 0
    for idx, angle in enumerate(sweep_angles(args.start, args.end, args.step)):
        for suffix, sprite in sprites:
            if idx == 0:
                registry.rotate_to(sprite, angle)
            else:
                registry.change_rotation(sprite, args.step)
            png_path = outdir / f"frame_{idx:06d}{suffix}.png"
            save_indexed(sprite.image, png_path, palette=sprite.palette)
            written += 1

    print(f"Wrote {written} frames to {outdir}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
