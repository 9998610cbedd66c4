"""Bitmap-font text layout: measure strings and emit glyph blits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence, Union

LINE_HEIGHT = 20


@dataclass
class Rect:
    """An axis-aligned rectangle in pixels."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


Blit = Callable[[Rect, Rect, Optional[Rect]], None]


def _code(symbol: Union[int, str]) -> int:
    return ord(symbol) if isinstance(symbol, str) else symbol


class Printer:
    """Lays out text with a font sheet of one glyph rectangle per symbol.

    ``glyphs`` holds the sheet rectangles of the symbols ``first_symbol``
    through ``last_symbol``; characters outside that range take no space.
    ``blit(dest, source, clip)`` draws one glyph. A NUL character ends the text.
    """

    def __init__(
        self,
        glyphs: Sequence[Union[Rect, Sequence[int]]],
        first_symbol: Union[int, str],
        last_symbol: Union[int, str],
        blit: Blit,
    ) -> None:
        self._first = _code(first_symbol)
        self._last = _code(last_symbol)
        self._glyphs = [g if isinstance(g, Rect) else Rect(*g) for g in glyphs]
        if len(self._glyphs) < self._last - self._first + 1:
            raise ValueError("glyph table is shorter than the symbol range")
        self._blit = blit

    def _glyph(self, char: str) -> Optional[Rect]:
        code = ord(char)
        if self._first <= code <= self._last:
            return self._glyphs[code - self._first]
        return None

    def _width(self, char: str) -> int:
        glyph = self._glyph(char)
        return glyph.width if glyph is not None else 0

    @staticmethod
    def _visible(text: str) -> str:
        return text.partition("\0")[0]

    def _glyphs_of(self, text: str) -> Iterator[Rect]:
        for char in self._visible(text):
            glyph = self._glyph(char)
            if glyph is not None:
                yield glyph

    def text_x(self, text: str, index: int) -> int:
        """Horizontal offset of the character at ``index``."""
        return sum(self._width(char) for char in self._visible(text)[:max(index, 0)])

    def text_index(self, text: str, x: int) -> int:
        """Index of the character covering horizontal offset ``x``."""
        total = 0
        visible = self._visible(text)
        for index, char in enumerate(visible):
            total += self._width(char)
            if x <= total:
                return index
        return len(visible)

    def text_width(self, text: str) -> int:
        return sum(glyph.width for glyph in self._glyphs_of(text))

    def text_height(self, text: str) -> int:
        return max((glyph.height for glyph in self._glyphs_of(text)), default=0)

    def max_height(self) -> int:
        """Tallest glyph of the whole symbol range."""
        count = self._last - self._first + 1
        return max((glyph.height for glyph in self._glyphs[:count]), default=0)

    def draw_text(self, text: str, x: int, y: int, clip: Optional[Rect] = None) -> None:
        """Blit ``text`` with its top-left corner at (x, y); '\\n' starts a new line."""
        origin_x = x
        for char in self._visible(text):
            if char == "\n":
                x = origin_x
                y += LINE_HEIGHT
                continue
            glyph = self._glyph(char)
            if glyph is None:
                continue
            source = Rect(glyph.x, glyph.y, glyph.width, glyph.height)
            dest = Rect(x, y, glyph.width, glyph.height)
            self._blit(dest, source, clip)
            x += glyph.width