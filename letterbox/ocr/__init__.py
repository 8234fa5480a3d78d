from .engines import IGlyphEngine, TesseractEngine, make_engine
from .router import open_page_image, read_page
from .schema import OcrPage

__all__ = [
    "IGlyphEngine",
    "OcrPage",
    "TesseractEngine",
    "make_engine",
    "open_page_image",
    "read_page",
]
