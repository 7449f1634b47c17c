"""Split a character sequence into fixed-size pages and lines.

Pages hold page_words characters, lines hold line_words characters. The
font size is chosen so that page_words // line_words lines fill the page
height at the given line spacing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from glyphsheet.errors import ConfigError


@dataclass(frozen=True)
class Line:
    text: bytes
    count: int
    x: float
    y: float

    def decoded(self):
        return self.text.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Page:
    number: int
    font_size: float
    lines: Tuple[Line, ...]

    @property
    def count(self):
        return sum(line.count for line in self.lines)


def partition(items, size):
    """partition([1,2,3,4,5,6], 2) --> [[1,2],[3,4],[5,6]]"""
    return [items[i : i + size] for i in range(0, len(items), size)]


def font_size_for(page_height: float, page_lines: int, line_spacing: float = 1.5):
    return page_height / (page_lines * line_spacing)


def paginate(
    characters: Sequence[bytes],
    page_height: float,
    page_words: int = 300,
    line_words: int = 15,
    x_position: float = 50,
    line_spacing: float = 1.5,
) -> List[Page]:
    """Lay characters out on pages.

    Args:
      characters: encoded characters, in output order.
      page_height: height of each page in points.
    Returns:
      A list of Pages. Empty input gives no pages and a page is never
      emitted without characters.
    """
    if line_words < 1:
        raise ConfigError(f"line_words must be at least 1, got {line_words}")
    if page_words < line_words:
        raise ConfigError(
            f"page_words ({page_words}) must be at least line_words ({line_words})"
        )
    characters = tuple(characters)
    page_lines = page_words // line_words

    pages = []
    for page_start in range(0, len(characters), page_words):
        page_end = min(page_start + page_words, len(characters))
        font_size = font_size_for(page_height, page_lines, line_spacing)
        y = page_height - font_size
        lines = []
        for row in partition(characters[page_start:page_end], line_words):
            lines.append(Line(b"".join(row), len(row), x_position, y))
            y -= font_size * line_spacing
        pages.append(Page(len(pages) + 1, font_size, tuple(lines)))
        if page_end >= len(characters):
            break
    return pages
