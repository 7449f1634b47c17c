import math

import pytest
from reportlab.lib.pagesizes import A4

from glyphsheet.encoding import encode_codepoint
from glyphsheet.errors import ConfigError
from glyphsheet.layout import font_size_for, paginate, partition

PAGE_HEIGHT = A4[1]


def chars(n, start=0x4E00):
    return [encode_codepoint(cp) for cp in range(start, start + n)]


def test_partition():
    assert partition([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert partition([], 3) == []


@pytest.mark.parametrize("n", [1, 14, 15, 16, 299, 300, 301, 600, 601, 1234])
def test_pagination_is_complete(n):
    pages = paginate(chars(n), PAGE_HEIGHT)

    assert len(pages) == math.ceil(n / 300)
    assert sum(page.count for page in pages) == n
    lines = [line for page in pages for line in page.lines]
    assert all(line.count <= 15 for line in lines)
    assert all(line.count == 15 for line in lines[:-1])
    assert all(page.count == 300 for page in pages[:-1])
    assert [page.number for page in pages] == list(range(1, len(pages) + 1))


def test_lines_concatenate_characters_in_order():
    characters = chars(400)
    pages = paginate(characters, PAGE_HEIGHT)
    assert b"".join(line.text for page in pages for line in page.lines) == b"".join(
        characters
    )
    assert pages[0].lines[0].decoded() == "".join(
        chr(cp) for cp in range(0x4E00, 0x4E00 + 15)
    )


@pytest.mark.parametrize("n", [300, 600, 900])
def test_no_empty_trailing_page(n):
    pages = paginate(chars(n), PAGE_HEIGHT)
    assert len(pages) == n // 300
    assert pages[-1].count == 300


def test_empty_input_has_no_pages():
    assert paginate([], PAGE_HEIGHT) == []


def test_three_hundred_and_one_characters():
    pages = paginate(chars(301, start=0x41), PAGE_HEIGHT)

    assert len(pages) == 2
    assert len(pages[0].lines) == 20
    assert all(line.count == 15 for line in pages[0].lines)
    assert len(pages[1].lines) == 1
    assert pages[1].lines[0].count == 1


def test_line_positions():
    pages = paginate(chars(300), PAGE_HEIGHT)
    page = pages[0]
    font_size = PAGE_HEIGHT / (20 * 1.5)

    assert page.font_size == pytest.approx(font_size)
    assert page.font_size == pytest.approx(font_size_for(PAGE_HEIGHT, 20))
    assert page.lines[0].y == pytest.approx(PAGE_HEIGHT - font_size)
    for upper, lower in zip(page.lines, page.lines[1:]):
        assert upper.y - lower.y == pytest.approx(font_size * 1.5)
    assert all(line.x == 50 for line in page.lines)
    assert page.lines[-1].y > 0


def test_custom_grid():
    pages = paginate(chars(25), 1000, page_words=10, line_words=4, x_position=20)

    assert len(pages) == 3
    assert [len(page.lines) for page in pages] == [3, 3, 2]
    assert [line.count for line in pages[0].lines] == [4, 4, 2]
    # page_lines uses integer division: 10 // 4 == 2
    assert pages[0].font_size == pytest.approx(1000 / (2 * 1.5))
    assert pages[0].lines[0].x == 20


@pytest.mark.parametrize(
    """page_words,line_words""",
    [
        (300, 0),
        (10, 15),
    ],
)
def test_invalid_grid(page_words, line_words):
    with pytest.raises(ConfigError):
        paginate(chars(5), PAGE_HEIGHT, page_words=page_words, line_words=line_words)
