"""
Render an animated scene to PNG snapshots.

Usage:
    python main.py car --frames 120 --every 10 --out frames
    python main.py flower --frames 45 --dump

Each simulated frame steps the animation once; every K-th frame is written
as <out>/<scene>_<index>.png.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from wren.graphics.debug.dump import dump_frame
from wren.graphics.export.image import export_frame
from wren.graphics.settings import ExportSettings, ResolutionSettings
from wren.scenes import SCENES, simulate

_LOG = logging.getLogger("wren.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("scene", choices=sorted(SCENES))
    parser.add_argument("--frames", type=int, default=60)
    parser.add_argument(
        "--every", type=int, default=1, help="write every K-th frame"
    )
    parser.add_argument("--out", type=Path, default=Path("frames"))
    parser.add_argument(
        "--size", type=int, nargs=2, metavar=("W", "H"), default=(500, 500)
    )
    parser.add_argument(
        "--dump", action="store_true", help="print each written frame"
    )
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entrypoint for the snapshot renderer."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.frames < 0:
        parser.error("--frames must be >= 0")
    if args.every <= 0:
        parser.error("--every must be positive")

    try:
        settings = ExportSettings(
            resolution=ResolutionSettings(*args.size),
            output_dir=args.out,
        )
    except ValueError as exc:
        parser.error(str(exc))

    scene = SCENES[args.scene]
    written = 0
    for state, frame in simulate(scene, args.frames):
        if frame.frame_index % args.every:
            continue
        path = settings.output_dir / f"{scene.name}_{frame.frame_index:04d}.png"
        export_frame(frame, path, settings)
        written += 1
        if args.dump:
            dump_frame(frame, header=f"{scene.name.upper()} theta={state.theta:.1f}")

    _LOG.info(
        "%s: simulated %d frames, wrote %d to %s",
        scene.name,
        args.frames,
        written,
        settings.output_dir,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
