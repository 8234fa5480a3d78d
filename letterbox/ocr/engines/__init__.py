from typing import Optional

from .itxt import IGlyphEngine
from .tess import TesseractEngine


def make_engine(name: Optional[str], settings=None) -> IGlyphEngine:
    """
    Factory. Supported names:
      - 'tesseract' (default)
    """
    n = (name or "tesseract").strip().lower()
    if n != "tesseract":
        raise RuntimeError(f"OCR engine not available: {n}")
    if settings is None:
        return TesseractEngine()
    return TesseractEngine(
        lang=settings.ocr_lang,
        tessdata_dir=settings.tessdata_dir,
        psm=settings.ocr_psm,
        tesseract_cmd=settings.tesseract_cmd,
    )


__all__ = [
    "IGlyphEngine",
    "TesseractEngine",
    "make_engine",
]
