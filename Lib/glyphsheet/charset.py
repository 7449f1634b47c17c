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
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""Collect the characters a font declares support for.

Every Unicode cmap subtable of the font is walked in ascending codepoint
order. Codepoints mapped to glyph index 0 (.notdef) are not supported
characters and are skipped.
"""
from contextlib import contextmanager
import logging

from fontTools.ttLib import TTFont, TTLibError

from glyphsheet.encoding import encode_codepoint
from glyphsheet.errors import FontInitError, FontLoadError

log = logging.getLogger(__name__)


class CharacterSet:
    """Distinct encoded characters of a font, sorted by their UTF-8 bytes.

    UTF-8 preserves codepoint order under bytewise comparison, so the
    characters are also in codepoint order.
    """

    def __init__(self, characters=()):
        self._characters = tuple(sorted(set(characters)))

    def __len__(self):
        return len(self._characters)

    def __iter__(self):
        return iter(self._characters)

    def __getitem__(self, index):
        return self._characters[index]

    def __contains__(self, character):
        return character in self._characters

    def __repr__(self):
        return f"<CharacterSet: {len(self)} characters>"


@contextmanager
def open_font(font_path, font_number=0):
    """Open a font with fontTools and close it on exit."""
    try:
        font = TTFont(font_path, fontNumber=font_number, lazy=True)
    except OSError as e:
        raise FontLoadError(f"Cannot read font {font_path}: {e}") from e
    except TTLibError as e:
        raise FontLoadError(f"Cannot parse font {font_path}: {e}") from e
    try:
        yield font
    finally:
        font.close()


def _unicode_cmap_tables(font):
    if "cmap" not in font:
        return []
    try:
        # format 14 holds variation sequences, not a character map
        return [
            table
            for table in font["cmap"].tables
            if table.isUnicode() and table.format != 14
        ]
    except TTLibError as e:
        raise FontLoadError(f"Cannot parse cmap table: {e}") from e


def iter_codepoints(font):
    """Yield (codepoint, glyph name) pairs from every Unicode cmap subtable.

    Unlike a renderer, which picks a single charmap, this walks the union
    of all Unicode subtables (format 4 and format 12, platforms 0 and 3),
    so the result is a superset of any one charmap. A codepoint present in
    more than one subtable is yielded once per subtable.

    Raises:
      FontInitError: if the font has no Unicode character map.
    """
    tables = _unicode_cmap_tables(font)
    if not tables:
        raise FontInitError("Font has no Unicode character map")
    for table in tables:
        log.debug(
            "Reading cmap subtable format %d (%d, %d)",
            table.format,
            table.platformID,
            table.platEncID,
        )
        for codepoint in sorted(table.cmap):
            glyph_name = table.cmap[codepoint]
            if font.getGlyphID(glyph_name) == 0:
                continue
            yield codepoint, glyph_name


def collect_codepoints(font_path, font_number=0):
    """Return the sorted distinct codepoints a font supports."""
    with open_font(font_path, font_number) as font:
        codepoints = sorted({cp for cp, _ in iter_codepoints(font)})
    log.debug("Collected %d codepoints from %s", len(codepoints), font_path)
    return codepoints


def collect_characters(font_path, font_number=0):
    """Return the CharacterSet of every character a font supports.

    Raises:
      FontLoadError: if the font cannot be read or parsed.
      FontInitError: if the font has no Unicode character map.
    """
    with open_font(font_path, font_number) as font:
        characters = CharacterSet(
            encode_codepoint(codepoint) for codepoint, _ in iter_codepoints(font)
        )
    log.info("Found %d characters in %s", len(characters), font_path)
    return characters
