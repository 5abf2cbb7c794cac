"""Analysis: prompt templates and field extraction from LLM replies."""

from .field_extractor import extract_applicant_info, extract_field
from .prompts import build_combined_prompt, get_extraction_prompt, get_summary_prompt

__all__ = [
    "extract_field",
    "extract_applicant_info",
    "get_summary_prompt",
    "get_extraction_prompt",
    "build_combined_prompt",
]
