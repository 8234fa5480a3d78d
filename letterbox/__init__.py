"""Letterbox: overlay OCR characters on their source image."""

__version__ = "0.1.0"
