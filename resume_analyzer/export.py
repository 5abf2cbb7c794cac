"""
CSV export of consolidated applicant records.

Fields containing a comma, double quote, CR or LF are wrapped in double
quotes with inner quotes doubled; all other fields are written as-is.
"""

import csv
import io
import logging
from pathlib import Path

from .models.applicant import ApplicantInfo, CSV_COLUMNS

logger = logging.getLogger(__name__)


def _format_row(row: list[str]) -> str:
    # QUOTE_MINIMAL only quotes line-break characters found in the terminator,
    # so write with CRLF and swap it for LF afterwards.
    buffer = io.StringIO()
    csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n").writerow(row)
    return buffer.getvalue()[: -len("\r\n")] + "\n"


def format_applicants_csv(applicants: list[ApplicantInfo]) -> str:
    """Render the header and one row per applicant as CSV text."""
    lines = [_format_row(CSV_COLUMNS)]
    lines.extend(_format_row(a.to_row()) for a in applicants)
    return "".join(lines)


def write_applicants_csv(applicants: list[ApplicantInfo], output_file: str | Path) -> Path:
    """
    Write applicants to a CSV file, overwriting it.

    The header is always written, even with no applicants.

    Returns:
        The path written.
    """
    output_file = Path(output_file)
    with open(output_file, "w", newline="", encoding="utf-8") as f:
        f.write(format_applicants_csv(applicants))
    logger.info(f"Wrote {len(applicants)} applicants to {output_file}")
    return output_file
