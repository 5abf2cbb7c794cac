"""OCR gateways: AWS Textract and an in-memory fake."""

from .textract import TextractService
from .fake import FakeOCRService

__all__ = ["TextractService", "FakeOCRService"]
