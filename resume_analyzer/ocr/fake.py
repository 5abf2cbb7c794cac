"""In-memory OCR service for tests and dry runs."""

import time
from pathlib import Path


class FakeOCRService:
    """
    OCR service returning canned text without touching AWS.

    Responses and errors are keyed by PDF file name (for
    ``extract_text_from_pdf``) or by the raw bytes (for ``extract_text``).
    Unknown inputs get a default response.

    Usage:
        ocr = FakeOCRService()
        ocr.set_response("alice.pdf", "Alice Smith\\n")
        ocr.set_error("broken.pdf", OCRError("boom"))
    """

    def __init__(self, delay: float = 0.0):
        self.responses: dict[str | bytes, str] = {}
        self.errors: dict[str | bytes, Exception] = {}
        self.delay = delay
        self.calls: list[str | bytes] = []

    def set_response(self, key: str | bytes, text: str) -> None:
        self.responses[key] = text

    def set_error(self, key: str | bytes, error: Exception) -> None:
        self.errors[key] = error

    def set_delay(self, seconds: float) -> None:
        self.delay = seconds

    def _lookup(self, key: str | bytes, default: str) -> str:
        self.calls.append(key)
        if self.delay > 0:
            time.sleep(self.delay)
        if key in self.errors:
            raise self.errors[key]
        return self.responses.get(key, default)

    def extract_text(self, document: bytes) -> str:
        return self._lookup(document, f"Mock text for {len(document)} bytes\n")

    def extract_text_from_pdf(self, pdf_path: str | Path) -> str:
        name = Path(pdf_path).name
        return self._lookup(name, f"Mock text for: {name}\n")
