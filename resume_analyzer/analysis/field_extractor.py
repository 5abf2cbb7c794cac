"""
Field Extractor.

Pulls the ten applicant fields out of the LLM's extraction reply. The reply
is *expected* to be a JSON object with one key per line, but models wrap it
in prose or code fences often enough that it is scanned rather than parsed:

    1. find the quoted key (case-insensitive)
    2. take everything after the next ':' up to the end of that line
    3. strip whitespace, then any surrounding '"' and ',' characters

The scan has no notion of nesting or escaping. A value containing a newline
is truncated at the newline, and a key-like substring inside an earlier
value is matched first. A missing key or colon yields "N/A"; nothing here
ever raises.
"""

import logging
import re

from ..models.applicant import ApplicantInfo, NOT_AVAILABLE

logger = logging.getLogger(__name__)

SUMMARY_SUFFIX = "_summary.txt"


def extract_field(response: str, field_name: str) -> str:
    """
    Extract one field's value from a JSON-like LLM reply.

    Args:
        response: Raw reply text.
        field_name: Key to look for (matched case-insensitively, in quotes).

    Returns:
        The value with whitespace, quotes and commas trimmed; may be "".
        "N/A" if the key or a following colon is missing.
    """
    match = re.search(re.escape(f'"{field_name}"'), response, re.IGNORECASE)
    if match is None:
        return NOT_AVAILABLE

    colon = response.find(":", match.start())
    if colon == -1:
        return NOT_AVAILABLE

    value_start = colon + 1
    value_end = response.find("\n", value_start)
    if value_end == -1:
        value_end = len(response)

    return response[value_start:value_end].strip().strip('",')


def applicant_name_from_filename(filename: str) -> str:
    """'bob_summary.txt' -> 'bob'."""
    if filename.endswith(SUMMARY_SUFFIX):
        return filename[: -len(SUMMARY_SUFFIX)]
    return filename


def extract_applicant_info(response: str, filename: str) -> ApplicantInfo:
    """
    Build an ApplicantInfo from an extraction reply.

    Every field falls back to "N/A". If no usable name was found, the
    summary file's name (minus ``_summary.txt``) is used instead.

    Args:
        response: Raw LLM reply to the extraction prompt.
        filename: Name of the summary file the reply was generated from.
    """
    values = {
        name: extract_field(response, name) for name in ApplicantInfo.field_names()
    }
    applicant = ApplicantInfo(**values)

    if applicant.name in (NOT_AVAILABLE, ""):
        applicant.name = applicant_name_from_filename(filename)
        logger.debug(f"No name in reply for {filename}, using '{applicant.name}'")

    return applicant
