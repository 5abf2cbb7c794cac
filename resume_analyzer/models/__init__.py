"""Data models for the resume analyzer."""

from .applicant import ApplicantInfo, CSV_COLUMNS, NOT_AVAILABLE
from .document import BatchReport, ProcessedFile

__all__ = [
    "ApplicantInfo",
    "CSV_COLUMNS",
    "NOT_AVAILABLE",
    "BatchReport",
    "ProcessedFile",
]
