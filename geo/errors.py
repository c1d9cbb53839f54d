from __future__ import annotations


class ParseError(ValueError):
    """Raised when a text fragment is not a valid number, zoom level or date."""

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text
