import argparse
import logging
import sys
from pathlib import Path

from .errors import TimelineError
from .parser import generate_from_config

logger = logging.getLogger(__name__)


def _build_parser():
    parser = argparse.ArgumentParser(
        "svgtimeline",
        description="Generate an SVG timeline from a config file.",
        epilog="example: svgtimeline -i timeline.cfg -s style.css -o timeline.svg")
    parser.add_argument("-i", "--input", required=True, help="input config file")
    parser.add_argument("-s", "--style", default=None, help="CSS stylesheet replacing the default style")
    parser.add_argument("-o", "--output", default=None, help="output SVG file (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug messages")
    return parser


def main(argv=None):
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s: %(message)s")

    try:
        svg = generate_from_config(args.input, args.style)
    except (OSError, TimelineError) as e:
        logger.error("%s: %s", args.input, e)
        raise SystemExit(1)

    if args.output is None:
        sys.stdout.write(svg)
        return

    try:
        Path(args.output).write_text(svg, encoding="utf-8")
    except OSError as e:
        logger.error("error writing output file: %s", e)
        raise SystemExit(1)
    logger.info("Timeline written to %s", args.output)


if __name__ == "__main__":
    main(sys.argv[1:])
