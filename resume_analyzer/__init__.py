"""Resume Analyzer: PDF resumes -> Textract text -> Bedrock summaries -> CSV."""

__version__ = "0.1.0"
