#!/usr/bin/env python3
# Copyright 2026 The glyphsheet Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS-IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""Utility to dump codepoints in a font.

Prints codepoints supported by the font, one per line, in hex (0xXXXX),
in the order they appear on the character sheet.

"""
import unicodedata

from glyphsheet.argparse import GlyphsheetArgumentParser
from glyphsheet.charset import collect_codepoints
from glyphsheet.logging import setup_logging


parser = GlyphsheetArgumentParser(
    prog="glyphsheet dump-codepoints", description="Dump codepoints in a font"
)
parser.add_argument(
    "--show-char", action="store_true", help="Print the actual character and its name"
)
parser.add_argument(
    "--font-number", type=int, default=0, help="Face index inside a font collection"
)
parser.add_argument("font", metavar="FONT", help="font file")


def format_codepoint(cp, show_char=False):
    show = ""
    if show_char:
        show = " " + chr(cp).strip() + " " + unicodedata.name(chr(cp), "")
    return "0x%04X%s" % (cp, show)


def main(args=None):
    args = parser.parse_args(args)
    setup_logging("glyphsheet.dump_codepoints", args, __name__)

    for cp in collect_codepoints(args.font, args.font_number):
        print(format_codepoint(cp, args.show_char))


if __name__ == "__main__":
    main()
