"""
PDF page splitting.

Textract's synchronous API only accepts single-page PDFs, so multi-page
resumes are split into one in-memory PDF per page with pypdf before OCR.
"""

import io
import logging
from pathlib import Path

from ..errors import OCRError

logger = logging.getLogger(__name__)


def split_pdf_pages(file_path: str | Path) -> list[bytes]:
    """
    Split a PDF into single-page PDF documents.

    Args:
        file_path: Path to the PDF file.

    Returns:
        One PDF byte string per page, in page order.

    Raises:
        OCRError: If the file cannot be read or parsed as a PDF.
    """
    from pypdf import PdfReader, PdfWriter

    file_path = Path(file_path)
    try:
        reader = PdfReader(str(file_path))
        pages = []
        for page in reader.pages:
            writer = PdfWriter()
            writer.add_page(page)
            buffer = io.BytesIO()
            writer.write(buffer)
            pages.append(buffer.getvalue())
    except Exception as e:
        raise OCRError(f"failed to split PDF {file_path.name}: {e}") from e

    logger.debug(f"Split {file_path.name} into {len(pages)} pages")
    return pages
