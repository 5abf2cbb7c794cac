"""
Exception types raised by the resume analyzer.

Gateways wrap third-party (boto3/botocore/pypdf) failures in these so the
pipeline driver can skip a single file without knowing which SDK failed.
"""


class ResumeAnalyzerError(Exception):
    """Base class for all resume analyzer errors."""


class ConfigError(ResumeAnalyzerError):
    """The configuration file could not be read or is invalid."""


class OCRError(ResumeAnalyzerError):
    """Text detection failed for a document."""


class DocumentTooLargeError(OCRError):
    """A document (or page) exceeds the OCR service request size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"document is too large: {size} bytes (max {limit // (1024 * 1024)}MB)"
        )


class LLMError(ResumeAnalyzerError):
    """Text generation failed or returned an unusable response."""


class NoInputFilesError(ResumeAnalyzerError):
    """A command found no eligible input files."""
