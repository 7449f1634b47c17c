#!/usr/bin/env python3
"""
glyphsheet render:

Render every character a font supports to a PDF reference sheet, 300
characters per page on 20 lines of 15.

Usage:

$ glyphsheet render path/to/MyFont-Regular.ttf -o MyFont-Regular.pdf

Layout options can also be kept in a YAML file:

$ glyphsheet render MyFont-Regular.ttf -c sheet.yaml

Options given on the command line override the config file.
"""
from collections import namedtuple
import logging

from glyphsheet.argparse import GlyphsheetArgumentParser
from glyphsheet.config import PAGE_SIZES, SheetConfig, load_config
from glyphsheet.errors import Error
from glyphsheet.logging import setup_logging
from glyphsheet.sheet import generate_sheet

log = logging.getLogger("glyphsheet.render")

RenderOutcome = namedtuple("RenderOutcome", ["ok", "summary", "error"])


def build_config(args):
    config = SheetConfig()
    if args.config:
        config = load_config(args.config, config)
    return config.updated(
        page_words=args.page_words,
        line_words=args.line_words,
        page_size=args.page_size,
        font_number=args.font_number,
        compress=False if args.no_compression else None,
    )


def render(args):
    """Run the sheet pipeline and report failures instead of raising them."""
    try:
        config = build_config(args)
        summary = generate_sheet(args.font, args.output, config)
    except Error as e:
        log.error(str(e), exc_info=args.show_tracebacks)
        return RenderOutcome(False, None, e)
    except Exception as e:
        log.error(
            "Unexpected error while rendering %s: %s",
            args.font,
            e,
            exc_info=args.show_tracebacks,
        )
        return RenderOutcome(False, None, e)
    return RenderOutcome(True, summary, None)


def main(args=None):
    parser = GlyphsheetArgumentParser(
        prog="glyphsheet render",
        description="Render a PDF sheet of every character in a font",
    )
    parser.add_argument("font", help="Path to a TTF, OTF or TTC font")
    parser.add_argument(
        "-o", "--output", default="output.pdf", help="PDF to write (default: output.pdf)"
    )
    parser.add_argument("-c", "--config", help="YAML file with layout options")
    parser.add_argument(
        "--page-words", type=int, help="Characters per page (default: 300)"
    )
    parser.add_argument(
        "--line-words", type=int, help="Characters per line (default: 15)"
    )
    parser.add_argument(
        "--page-size", choices=sorted(PAGE_SIZES), help="Page size (default: A4)"
    )
    parser.add_argument(
        "--font-number", type=int, help="Face index inside a font collection"
    )
    parser.add_argument(
        "--no-compression",
        action="store_true",
        help="Write uncompressed page streams",
    )
    args = parser.parse_args(args)
    setup_logging("glyphsheet.render", args, __name__)
    return render(args)


if __name__ == "__main__":
    main()
