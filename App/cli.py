#!/usr/bin/env python3
"""Command line front end: image in, pattern JSON or PNG out."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from config_manager import ConfigManager
from embroidery import PatternProcessor
from errors import PatternError
from models import CONFIG_FILE, PALETTE_METHODS

logger = logging.getLogger("pixify")

NO_REDUCTION = "none"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixify",
        description="Turn an image into a cross-stitch pattern with DMC threads.",
    )
    parser.add_argument("image", help="Image file to convert")
    parser.add_argument(
        "--cells", "-c",
        type=int,
        help="Number of cells across the pattern (default from config)",
    )
    parser.add_argument(
        "--colors", "-k",
        type=int,
        help="Maximum number of thread colors (default from config)",
    )
    parser.add_argument(
        "--method", "-m",
        choices=PALETTE_METHODS + (NO_REDUCTION,),
        help="Palette extraction method; 'none' matches every pixel directly",
    )
    parser.add_argument(
        "--export", "-e",
        metavar="DIR",
        help="Write the rendered pattern PNG into this directory",
    )
    parser.add_argument(
        "--json", "-j",
        metavar="FILE",
        help="Write the pattern JSON to FILE instead of stdout",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        default=str(CONFIG_FILE),
        help="Defaults file (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    app_config = ConfigManager(Path(args.config)).load()
    processor = PatternProcessor(app_config=app_config)

    try:
        pattern = processor.process(
            args.image,
            cells_in_width=args.cells,
            color_count=args.colors,
            palette_method=None if args.method == NO_REDUCTION else args.method,
            reduce_colors=args.method != NO_REDUCTION,
        )
    except PatternError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.export:
        try:
            path = processor.save_export(pattern, args.export)
        except OSError as e:
            print(f"Error: Could not export pattern: {e}", file=sys.stderr)
            return 1
        print(f"Exported {path}", file=sys.stderr)

    if args.json:
        Path(args.json).write_text(json.dumps(pattern.to_dict(), indent=2))
        logger.info("Wrote pattern JSON to %s", args.json)
    elif not args.export:
        json.dump(pattern.to_dict(), sys.stdout)
        sys.stdout.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
