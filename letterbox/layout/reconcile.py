from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Sequence

from .errors import BoxStreamExhausted
from .models import CharacterMismatch, Document, GlyphBox, RenderChar, RenderLine

logger = logging.getLogger("letterbox")


def reconcile(
    full_text: str,
    box_glyphs: Sequence[GlyphBox],
    *,
    engine_version: str = "",
    image_name: str = "",
) -> Document:
    """
    Align the recognized text with the glyph-box stream.

    The box stream has no line or space markers, so alignment is purely
    positional: one shared cursor, advanced once per non-space character.
    Spaces are glued onto the previous character of the line (or dropped at
    the start of a line). A character whose box entry disagrees is dropped
    and reported; running out of box entries raises BoxStreamExhausted.
    """
    cursor = 0
    lines: List[RenderLine] = []
    mismatches: List[CharacterMismatch] = []

    for line_index, segment in enumerate(full_text.split("\n")):
        chars: List[RenderChar] = []
        for column, c in enumerate(segment):
            if c == " ":
                if chars:
                    chars[-1] = replace(chars[-1], glyph=chars[-1].glyph + " ")
                continue

            if cursor >= len(box_glyphs):
                raise BoxStreamExhausted(line_index, column, cursor)
            box = box_glyphs[cursor]
            box_index = cursor
            cursor += 1

            if c != box.character:
                logger.warning(
                    "Character mismatch. Omitting character. %r != %r (line %d, column %d)",
                    c, box.character, line_index, column,
                )
                mismatches.append(CharacterMismatch(line_index, column, c, box.character, box_index))
                continue

            chars.append(RenderChar(glyph=c, origin_x=box.origin_x, origin_y=box.origin_y))

        lines.append(RenderLine(chars=tuple(chars)))

    if cursor < len(box_glyphs):
        logger.debug("%d glyph boxes left unused after reconciliation", len(box_glyphs) - cursor)

    return Document(
        engine_version=engine_version,
        image_name=image_name,
        full_text=full_text,
        lines=tuple(lines),
        mismatches=tuple(mismatches),
    )
