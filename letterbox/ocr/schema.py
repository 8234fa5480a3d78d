from dataclasses import dataclass, field
from typing import List

from ..layout.models import GlyphBox


@dataclass
class OcrPage:
    engine_version: str   # e.g. "5.3.0"
    text: str             # text pass: "\n" between lines, " " between words
    glyphs: List[GlyphBox] = field(default_factory=list)  # box pass, no whitespace entries
