from typing import List

import pytest
from PIL import Image

from letterbox.layout import GlyphBox
from letterbox.ocr import IGlyphEngine, OcrPage


class FakeEngine(IGlyphEngine):
    """Returns a canned OcrPage and remembers the images it saw."""

    def __init__(self, text: str = "", glyphs: List[GlyphBox] = None, error: Exception = None):
        self.text = text
        self.glyphs = list(glyphs or [])
        self.error = error
        self.seen = []

    def version(self) -> str:
        return "fake-1.0"

    def recognize(self, img):
        self.seen.append(img.size)
        if self.error is not None:
            raise self.error
        return OcrPage(engine_version=self.version(), text=self.text, glyphs=list(self.glyphs))


@pytest.fixture
def page_png(tmp_path):
    """A small white PNG inside its own files directory."""
    files_dir = tmp_path / "files"
    files_dir.mkdir()
    path = files_dir / "page.png"
    Image.new("RGB", (64, 32), "white").save(path)
    return path
