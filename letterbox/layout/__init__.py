from .errors import BoxStreamExhausted, ReconcileError
from .models import CharacterMismatch, Document, GlyphBox, RenderChar, RenderLine
from .reconcile import reconcile

__all__ = [
    "BoxStreamExhausted",
    "CharacterMismatch",
    "Document",
    "GlyphBox",
    "ReconcileError",
    "RenderChar",
    "RenderLine",
    "reconcile",
]
