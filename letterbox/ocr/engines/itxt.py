from abc import ABC, abstractmethod

from PIL import Image

from ..schema import OcrPage


class IGlyphEngine(ABC):
    """Interface for OCR engines that return full text plus per-character boxes."""

    @abstractmethod
    def version(self) -> str:
        ...

    @abstractmethod
    def recognize(self, img: Image.Image) -> OcrPage:
        """Run the text pass and the box pass over one image."""
        ...
