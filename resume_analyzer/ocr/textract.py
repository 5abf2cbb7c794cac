"""
OCR gateway backed by AWS Textract.

Wraps ``DetectDocumentText`` to provide:
  - extract_text(): one document (or page) of bytes -> recognized lines
  - extract_text_from_pdf(): a PDF file on disk, optionally split per page

Only ``LINE`` blocks are kept; each line is written followed by a newline,
in the order Textract returns them. Errors are raised as ``OCRError`` and
are never retried.
"""

import logging
from pathlib import Path
from typing import Any

from ..config import OCRConfig
from ..errors import DocumentTooLargeError, OCRError
from .pdf_splitter import split_pdf_pages

logger = logging.getLogger(__name__)


def lines_from_blocks(blocks: list[dict[str, Any]]) -> str:
    """Join the text of every LINE block, one per line."""
    parts = []
    for block in blocks:
        if block.get("BlockType") == "LINE" and block.get("Text") is not None:
            parts.append(block["Text"] + "\n")
    return "".join(parts)


class TextractService:
    """
    OCR service using AWS Textract's synchronous text detection.

    Usage:
        ocr = TextractService(OCRConfig(region="us-east-1"))
        text = ocr.extract_text_from_pdf("resumes/alice.pdf")
    """

    def __init__(self, config: OCRConfig | None = None, client=None):
        """
        Initialize the OCR service.

        Args:
            config: OCR settings (region, page splitting, size limit).
            client: Pre-built boto3 Textract client. Created lazily from
                ``config.region`` when omitted.
        """
        self.config = config or OCRConfig()
        self._client = client

    @property
    def client(self):
        """The boto3 Textract client, created on first use."""
        if self._client is None:
            import boto3

            self._client = boto3.client("textract", region_name=self.config.region)
            logger.debug(f"Textract client initialized: region={self.config.region}")
        return self._client

    def extract_text(self, document: bytes) -> str:
        """
        Detect text in a single document.

        Args:
            document: Raw PDF/image bytes (single page for PDFs).

        Returns:
            Recognized lines, each terminated by a newline.

        Raises:
            DocumentTooLargeError: If the payload exceeds the size limit.
            OCRError: If the Textract call fails.
        """
        from botocore.exceptions import BotoCoreError, ClientError

        limit = self.config.max_document_bytes
        if len(document) > limit:
            raise DocumentTooLargeError(len(document), limit)

        try:
            response = self.client.detect_document_text(Document={"Bytes": document})
        except (BotoCoreError, ClientError) as e:
            raise OCRError(f"textract request failed: {e}") from e

        return lines_from_blocks(response.get("Blocks", []))

    def extract_text_from_pdf(self, pdf_path: str | Path) -> str:
        """
        Detect text in every page of a PDF file.

        With ``split_pages`` enabled each page is sent as its own request;
        a failure on any page aborts the whole file.

        Args:
            pdf_path: Path to the PDF.

        Returns:
            Concatenated recognized lines of all pages, in page order.
        """
        pdf_path = Path(pdf_path)

        if not self.config.split_pages:
            try:
                document = pdf_path.read_bytes()
            except OSError as e:
                raise OCRError(f"failed to read {pdf_path.name}: {e}") from e
            return self.extract_text(document)

        pages = split_pdf_pages(pdf_path)
        text_parts = []
        for i, page in enumerate(pages, 1):
            try:
                text_parts.append(self.extract_text(page))
            except OCRError as e:
                raise OCRError(f"page {i} of {pdf_path.name}: {e}") from e
            logger.debug(f"Page {i}/{len(pages)} of {pdf_path.name} done")

        return "".join(text_parts)
