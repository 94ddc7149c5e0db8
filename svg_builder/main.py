#!/usr/bin/env python3
"""
SVG Builder - Command Line
==========================
Renders a demonstration drawing with the document builder and writes it
to a file or to standard output.
"""

import sys
import argparse
import logging
from typing import List, Optional

from svg_builder.core import CONFIG, configure
from svg_builder.models.document import Document
from svg_builder.models.transform import Transform
from svg_builder.utils.io import load_config
from svg_builder.utils.logger import log_exception, setup_logger
from svg_builder.validation.svg_validator import SVGValidator

logger = logging.getLogger(__name__)

STAR_POINTS = [(350, 75), (379, 161), (469, 161), (397, 215),
               (423, 301), (350, 250), (277, 301), (303, 215),
               (231, 161), (321, 161)]

SHAPE_STYLE = "fill=red stroke=blue stroke-width=10"


def build_demo_document(width: int = 12, height: int = 12, standalone: bool = False) -> Document:
    """
    Build the demonstration drawing.

    Two nested groups share a translated transform and inherited fill and
    stroke attributes; inside them sit a circle, a rectangle, a rounded
    rectangle and a star polygon.

    Args:
        width: Canvas width
        height: Canvas height
        standalone: Value of the standalone flag

    Returns:
        Document ready to be finalized
    """
    document = Document(width, height)
    document.standalone(standalone)
    document.view_box(0, 0, 1200, 400)

    transform = Transform().translate(100, 200).translate(10, 32)
    group_attribs = {"fill": "green", "stroke": "orange", "stroke-width": "2"}

    with document.group("First_Group", transform, group_attribs):
        with document.group("Second_Group", transform, group_attribs):
            document.circle(600, 200, 100, "id=jojo " + SHAPE_STYLE)
            document.rect(700, 200, 200, 200, SHAPE_STYLE)
            document.rounded_rect(800, 600, 200, 200, 60, 30, SHAPE_STYLE)
            document.polygon(STAR_POINTS, SHAPE_STYLE)

    document.title("Svg library test Main !")
    document.desc("A simple main test for the svg generation library")
    return document


def write_document(document: Document, output: str) -> None:
    """Finalize the document into ``output`` (``-`` for standard output)."""
    if output == "-":
        document.finalize(sys.stdout)
        return
    document.check_ready()
    with open(output, "w", encoding="utf-8") as f:
        document.finalize(f)
    logger.info(f"SVG saved to {output}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Render the SVG builder demonstration drawing")
    parser.add_argument("--output", "-o", default="output.svg",
                        help="Path of the SVG file to write ('-' for stdout)")
    parser.add_argument("--width", type=int, default=12, help="Canvas width")
    parser.add_argument("--height", type=int, default=12, help="Canvas height")
    parser.add_argument("--standalone", action="store_true",
                        help="Mark the document as standalone in the XML declaration")
    parser.add_argument("--config", "-c", help="Path to JSON configuration file")
    parser.add_argument("--log-level", "-l", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (defaults to config setting)")
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("--log-json", action="store_true",
                        help="Write log records as JSON lines")
    parser.add_argument("--validate", action="store_true",
                        help="Check that the output is well-formed before writing it")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)

    try:
        if args.config:
            configure(load_config(args.config))
    except (OSError, ValueError, KeyError) as e:
        setup_logger(args.log_level or CONFIG["log_level"],
                     log_file=args.log_file, use_json=args.log_json)
        logger.error(f"Failed to load configuration: {e}")
        return 1

    setup_logger(args.log_level or CONFIG["log_level"],
                 log_file=args.log_file, use_json=args.log_json)

    try:
        document = build_demo_document(args.width, args.height, args.standalone)

        if args.validate:
            is_valid, error = SVGValidator().validate(document.to_svg_string())
            if not is_valid:
                logger.error(f"Generated SVG is invalid: {error}")
                return 1

        write_document(document, args.output)
        return 0

    except Exception as e:
        log_exception(logger, e, context={"output": args.output})
        return 1


if __name__ == "__main__":
    sys.exit(main())
