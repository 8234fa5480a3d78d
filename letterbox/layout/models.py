from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GlyphBox:
    character: str
    origin_x: int  # left edge, px
    origin_y: int  # bottom edge, px from image bottom


@dataclass(frozen=True)
class RenderChar:
    glyph: str  # one character plus absorbed trailing spaces
    origin_x: int
    origin_y: int


@dataclass(frozen=True)
class RenderLine:
    chars: Tuple[RenderChar, ...] = ()

    @property
    def text(self) -> str:
        return "".join(c.glyph for c in self.chars)


@dataclass(frozen=True)
class CharacterMismatch:
    """A text character dropped because its box entry disagreed."""

    line_index: int
    column: int
    text_char: str
    box_char: str
    box_index: int


@dataclass(frozen=True)
class Document:
    engine_version: str
    image_name: str
    full_text: str
    lines: Tuple[RenderLine, ...]
    mismatches: Tuple[CharacterMismatch, ...] = ()

    @property
    def char_count(self) -> int:
        return sum(len(ln.chars) for ln in self.lines)

    def text_of_line(self, index: int) -> str:
        return self.lines[index].text
