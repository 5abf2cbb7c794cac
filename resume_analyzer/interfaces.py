"""Service interfaces shared by the live AWS gateways and the in-memory fakes."""

from pathlib import Path
from typing import Protocol


class OCRService(Protocol):
    """Optical character recognition over PDF documents."""

    def extract_text(self, document: bytes) -> str:
        """Return the recognized lines of one document, newline-terminated."""
        ...

    def extract_text_from_pdf(self, pdf_path: str | Path) -> str:
        """Return the recognized lines of every page of a PDF file."""
        ...


class LLMService(Protocol):
    """Single-turn text generation."""

    def generate_text(self, prompt: str) -> str:
        """Return the model's reply to ``prompt``."""
        ...
