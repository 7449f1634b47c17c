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
"""Write a character sheet PDF with reportlab.

The font is read twice: once by fontTools to collect its characters and
once by reportlab to embed it. The two never share a font object.
"""
from collections import namedtuple
from contextlib import contextmanager
from pathlib import Path
import logging
import re
import struct

from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas

from glyphsheet import __version__
from glyphsheet.charset import collect_characters
from glyphsheet.config import SheetConfig
from glyphsheet.errors import DocumentCreateError, FontEmbedError
from glyphsheet.layout import paginate

log = logging.getLogger(__name__)

SheetSummary = namedtuple("SheetSummary", ["output", "characters", "pages"])


@contextmanager
def create_document(output_path, page_size=A4, compress=True):
    """Yield a reportlab canvas and save it when the block succeeds.

    Nothing is written to output_path if the block raises.
    """
    output_path = Path(output_path)
    if not output_path.parent.is_dir():
        raise DocumentCreateError(
            f"Cannot create {output_path}: {output_path.parent} is not a directory"
        )
    try:
        doc = canvas.Canvas(
            str(output_path), pagesize=page_size, pageCompression=int(compress)
        )
    except (TypeError, ValueError) as e:
        raise DocumentCreateError(f"Cannot create document: {e}") from e
    doc.setCreator(f"glyphsheet {__version__}")
    yield doc
    try:
        doc.save()
    except OSError as e:
        raise DocumentCreateError(f"Cannot write {output_path}: {e}") from e


def _font_name(font_path, font_number):
    stem = re.sub(r"[^A-Za-z0-9_-]", "", Path(font_path).stem) or "font"
    return f"glyphsheet-{stem}-{font_number}"


def embed_font(font_path, font_number=0):
    """Register a TrueType font with reportlab and return its name."""
    name = _font_name(font_path, font_number)
    try:
        font = TTFont(name, str(font_path), subfontIndex=font_number)
    except TTFError as e:
        raise FontEmbedError(f"Cannot embed {font_path}: {e}") from e
    except OSError as e:
        raise FontEmbedError(f"Cannot read {font_path}: {e}") from e
    except (struct.error, ValueError, KeyError) as e:
        raise FontEmbedError(f"Malformed font data in {font_path}: {e}") from e
    pdfmetrics.registerFont(font)
    log.debug("Registered %s as %s", font_path, name)
    return name


def write_pages(doc, font_name, pages):
    for page in pages:
        text = doc.beginText()
        text.setFont(font_name, page.font_size)
        for line in page.lines:
            text.setTextOrigin(line.x, line.y)
            text.textOut(line.decoded())
        doc.drawText(text)
        doc.showPage()
        log.debug(
            "Page %d: %d characters on %d lines", page.number, page.count, len(page.lines)
        )


def generate_sheet(font_path, output_path, config=None):
    """Render every character of font_path to a PDF at output_path."""
    config = (config or SheetConfig()).validate()
    characters = collect_characters(font_path, config.font_number)
    if not characters:
        log.warning(
            "%s has no mapped characters; the sheet will be a single blank page",
            font_path,
        )

    width, height = config.page_dimensions
    pages = paginate(
        characters,
        height,
        page_words=config.page_words,
        line_words=config.line_words,
        x_position=config.x_position,
        line_spacing=config.line_spacing,
    )
    font_name = embed_font(font_path, config.font_number)
    with create_document(output_path, (width, height), config.compress) as doc:
        doc.setTitle(f"{Path(font_path).name} character sheet")
        write_pages(doc, font_name, pages)
    # reportlab always writes at least one page
    written = len(pages) or 1
    log.info("Wrote %d pages to %s", written, output_path)
    return SheetSummary(str(output_path), len(characters), written)
