from __future__ import annotations


class ReconcileError(Exception):
    """Base class for failures that abort a whole reconciliation."""


class BoxStreamExhausted(ReconcileError):
    """The glyph-box stream ran out before the text did."""

    def __init__(self, line_index: int, column: int, consumed: int):
        self.line_index = line_index
        self.column = column
        self.consumed = consumed
        super().__init__(
            f"glyph box stream exhausted after {consumed} entries "
            f"(line {line_index}, column {column})"
        )
