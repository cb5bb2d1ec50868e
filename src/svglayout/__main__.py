from __future__ import annotations
import argparse
import logging
import sys

from .core import Dimensions
from .demo import build_demo
from .layout import MODES, ORIGINS, Layout


log = logging.getLogger("svglayout")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="svglayout",
        description="Writes the demo page to an SVG file.",
    )
    parser.add_argument("output", nargs="?", default="my_svg.svg")
    parser.add_argument("--origin", choices=ORIGINS, default="bottomleft")
    parser.add_argument("--mode", choices=MODES, default="wrapper")
    parser.add_argument("--size", type=float, default=100, help="canvas side in px")
    parser.add_argument("--scale", type=float, default=1.0)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    layout = Layout(
        Dimensions.square(args.size),
        origin=args.origin,
        scale=args.scale,
        mode=args.mode,
    )

    if not build_demo(args.output, layout).persist():
        log.error("Could not write %s", args.output)
        return 1

    log.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
