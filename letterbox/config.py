from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_str(name: str, default: str) -> str:
    return (os.getenv(name) or default).strip() or default


@dataclass(frozen=True)
class Settings:
    # Source image, served under /files/
    image_name: str
    files_dir: str

    # OCR
    ocr_engine: str  # only "tesseract" for now
    ocr_lang: str
    ocr_psm: int
    tessdata_dir: str
    tesseract_cmd: str
    preprocess: bool

    # General
    log_level: str
    environment: str
    port: int

    @property
    def image_path(self) -> Path:
        return Path(self.files_dir) / self.image_name

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            image_name=_get_str("LETTERBOX_IMAGE_NAME", "pkiTaskforce.png"),
            files_dir=_get_str("LETTERBOX_FILES_DIR", "./files"),
            ocr_engine=_get_str("OCR_ENGINE", "tesseract").lower(),
            ocr_lang=_get_str("OCR_LANG", "nld"),
            ocr_psm=_get_int("OCR_PSM", 3),
            tessdata_dir=(os.getenv("TESSDATA_DIR") or "").strip(),
            tesseract_cmd=(os.getenv("TESSERACT_PATH") or "").strip(),
            preprocess=_get_bool("LETTERBOX_PREPROCESS", False),
            log_level=_get_str("LETTERBOX_LOG_LEVEL", "INFO").upper(),
            environment=(os.getenv("ENVIRONMENT") or os.getenv("ENV") or "dev").strip() or "dev",
            port=_get_int("PORT", 1234),
        )
