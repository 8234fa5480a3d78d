# api_main.py
# FastAPI service for letterbox
# - GET /            HTML overlay of the recognized characters on the image
# - GET /api/layout  the same layout as JSON
# - /files/...       static source images

from __future__ import annotations

import logging
from typing import Callable, List, Optional
from urllib.parse import quote

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from .config import Settings
from .layout import BoxStreamExhausted, Document, reconcile
from .ocr import IGlyphEngine, make_engine, read_page
from .render import PageRenderer

logger = logging.getLogger("letterbox")

EngineFactory = Callable[[Settings], IGlyphEngine]


# ---------- models ----------
class CharOut(BaseModel):
    glyph: str
    origin_x: int
    origin_y: int


class LineOut(BaseModel):
    chars: List[CharOut]


class MismatchOut(BaseModel):
    line_index: int
    column: int
    text_char: str
    box_char: str
    box_index: int


class LayoutResponse(BaseModel):
    engine_version: str
    image_name: str
    image_url: str
    full_text: str
    lines: List[LineOut]
    mismatches: List[MismatchOut]


# ---------- utils ----------
def _default_engine_factory(settings: Settings) -> IGlyphEngine:
    return make_engine(settings.ocr_engine, settings)


def _image_url(settings: Settings) -> str:
    return "/files/" + quote(settings.image_name)


def _build_document(request: Request) -> Document:
    settings: Settings = request.app.state.settings
    path = settings.image_path
    if not path.is_file():
        raise HTTPException(status_code=404, detail=f"Image not found: {settings.image_name}")

    engine = request.app.state.engine_factory(settings)
    page = read_page(path, engine, preprocess=settings.preprocess)
    return reconcile(
        page.text,
        page.glyphs,
        engine_version=page.engine_version,
        image_name=settings.image_name,
    )


def _document_or_error(request: Request) -> Document:
    try:
        return _build_document(request)
    except HTTPException:
        raise
    except BoxStreamExhausted as e:
        logger.error("Reconciliation aborted: %s", e)
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.exception("OCR pipeline failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


def _layout_response(doc: Document, image_url: str) -> LayoutResponse:
    return LayoutResponse(
        engine_version=doc.engine_version,
        image_name=doc.image_name,
        image_url=image_url,
        full_text=doc.full_text,
        lines=[
            LineOut(chars=[CharOut(glyph=c.glyph, origin_x=c.origin_x, origin_y=c.origin_y) for c in ln.chars])
            for ln in doc.lines
        ],
        mismatches=[
            MismatchOut(
                line_index=m.line_index,
                column=m.column,
                text_char=m.text_char,
                box_char=m.box_char,
                box_index=m.box_index,
            )
            for m in doc.mismatches
        ],
    )


# ---------- app ----------
def create_app(
    settings: Optional[Settings] = None,
    engine_factory: Optional[EngineFactory] = None,
    renderer: Optional[PageRenderer] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="letterbox", version="0.1.0")
    app.state.settings = settings
    app.state.engine_factory = engine_factory or _default_engine_factory
    app.state.renderer = renderer or PageRenderer.from_package()

    app.mount("/files", StaticFiles(directory=settings.files_dir, check_dir=False), name="files")

    # ---------- routes ----------
    @app.get("/healthz")
    async def healthz():
        return {"ok": True, "env": settings.environment}

    # OCR routes are sync so FastAPI runs them in its threadpool
    @app.get("/", response_class=HTMLResponse)
    def overlay_page(request: Request):
        doc = _document_or_error(request)
        html = request.app.state.renderer.render(doc, image_url=_image_url(settings))
        return HTMLResponse(content=html)

    @app.get("/api/layout", response_model=LayoutResponse)
    def layout_json(request: Request):
        doc = _document_or_error(request)
        return _layout_response(doc, _image_url(settings))

    return app


app = create_app()


# ---------- uvicorn entry ----------
if __name__ == "__main__":
    import uvicorn

    _settings = app.state.settings
    logging.basicConfig(
        level=_settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run("letterbox.api_main:app", host="0.0.0.0", port=_settings.port, reload=False)
