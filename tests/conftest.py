from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
import pytest


def _square_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 500))
    pen.lineTo((450, 500))
    pen.lineTo((450, 0))
    pen.closePath()
    return pen.glyph()


def build_font(path, codepoints, extra_cmap=None, with_cmap=True):
    """Save a TrueType font with one square glyph per codepoint."""
    glyph_order = [".notdef"] + ["cp%04X" % cp for cp in codepoints]
    cmap = {cp: "cp%04X" % cp for cp in codepoints}
    cmap.update(extra_cmap or {})

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf({name: _square_glyph() for name in glyph_order})
    fb.setupHorizontalMetrics({name: (500, 50) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {
            "familyName": "Sheet Test",
            "styleName": "Regular",
            "psName": "SheetTest-Regular",
        }
    )
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200, fsType=0)
    fb.setupPost()
    if not with_cmap:
        del fb.font["cmap"]
        del fb.font["OS/2"]
    fb.save(str(path))
    return path


@pytest.fixture
def make_font(tmp_path):
    def _make_font(codepoints, name="SheetTest-Regular.ttf", **kwargs):
        return build_font(tmp_path / name, codepoints, **kwargs)

    return _make_font


@pytest.fixture
def latin_font(make_font):
    return make_font(range(0x41, 0x41 + 301))
