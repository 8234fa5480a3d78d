from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from PIL import Image

from .engines import IGlyphEngine
from .preprocess import preprocess_for_ocr
from .schema import OcrPage

logger = logging.getLogger("letterbox")


@contextmanager
def open_page_image(path: Union[str, Path], preprocess: bool = False) -> Iterator[Image.Image]:
    """
    Open the source image for one recognition pass.
    The file handle (and any preprocessed copy) is closed on every exit path.
    """
    img = Image.open(path)
    work = img
    try:
        img.load()
        if preprocess:
            work = preprocess_for_ocr(img)
        yield work
    finally:
        if work is not img:
            work.close()
        img.close()


def read_page(path: Union[str, Path], engine: IGlyphEngine, preprocess: bool = False) -> OcrPage:
    """
    High-level OCR entry point used by the API.
    Returns the text pass and the box pass of one image, unreconciled.
    """
    with open_page_image(path, preprocess=preprocess) as img:
        page = engine.recognize(img)
    logger.info("OCR %s: %d lines, %d glyph boxes", Path(path).name, page.text.count("\n") + 1, len(page.glyphs))
    return page
