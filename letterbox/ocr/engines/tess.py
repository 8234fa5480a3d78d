from __future__ import annotations

import logging
from typing import Any, Dict, List

import pytesseract
from pytesseract import Output  # type: ignore
from PIL import Image

from ...layout.models import GlyphBox
from ..schema import OcrPage
from .itxt import IGlyphEngine

logger = logging.getLogger("letterbox")

# image_to_string terminates each page with a form feed.
PAGE_SEPARATOR = "\x0c"


def _cfg(psm: int, tessdata_dir: str = "") -> str:
    cfg = f"--psm {psm}"
    if tessdata_dir:
        cfg += f' --tessdata-dir "{tessdata_dir}"'
    return cfg


def _strip_page_separator(text: str) -> str:
    # only the separator goes; the newlines before it are part of the text
    return text.rstrip(PAGE_SEPARATOR)


def _glyphs_from_boxes(data: Dict[str, List[Any]]) -> List[GlyphBox]:
    """
    Convert image_to_boxes dict output into GlyphBox records.
    Box coordinates are bottom-left based, so (left, bottom) is the origin.
    """
    chars = data.get("char", [])
    lefts = data.get("left", [])
    bottoms = data.get("bottom", [])

    out: List[GlyphBox] = []
    for i, ch in enumerate(chars):
        ch = str(ch)
        if not ch.strip():
            continue
        out.append(GlyphBox(character=ch, origin_x=int(lefts[i]), origin_y=int(bottoms[i])))
    return out


class TesseractEngine(IGlyphEngine):
    """
    Two-pass Tesseract engine.

    The text pass and the box pass are separate Tesseract invocations, so
    their outputs are not guaranteed to agree character for character.
    """

    def __init__(self, lang: str = "eng", tessdata_dir: str = "", psm: int = 3, tesseract_cmd: str = ""):
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self.lang = lang
        self.config = _cfg(psm, tessdata_dir)

    def version(self) -> str:
        return str(pytesseract.get_tesseract_version())

    def recognize(self, img: Image.Image) -> OcrPage:
        text = pytesseract.image_to_string(img, lang=self.lang, config=self.config)
        boxes = pytesseract.image_to_boxes(img, lang=self.lang, config=self.config, output_type=Output.DICT)
        glyphs = _glyphs_from_boxes(boxes)
        logger.debug("tesseract: %d text chars, %d glyph boxes", len(text), len(glyphs))
        return OcrPage(engine_version=self.version(), text=_strip_page_separator(text), glyphs=glyphs)
