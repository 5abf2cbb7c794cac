"""
Applicant data model.

Fixed-shape record of one candidate, populated from the LLM's extraction
reply by the field extractor and flattened into one CSV row.
"""

from dataclasses import dataclass, fields

NOT_AVAILABLE = "N/A"

# CSV header, in the same order as the ApplicantInfo fields
CSV_COLUMNS = [
    "Applicant",
    "Role",
    "Seniority",
    "Status",
    "Current Position",
    "Current Company",
    "Years of Exp",
    "CV Link",
    "Skillset",
    "Remarks",
]


@dataclass
class ApplicantInfo:
    """Structured summary of one applicant, one CSV row."""
    name: str = NOT_AVAILABLE
    role: str = NOT_AVAILABLE
    seniority: str = NOT_AVAILABLE
    status: str = NOT_AVAILABLE
    current_position: str = NOT_AVAILABLE
    current_company: str = NOT_AVAILABLE
    years_of_exp: str = NOT_AVAILABLE
    cv_link: str = NOT_AVAILABLE
    skillset: str = NOT_AVAILABLE
    remarks: str = NOT_AVAILABLE

    @classmethod
    def field_names(cls) -> list[str]:
        """JSON keys requested from the LLM, in CSV column order."""
        return [f.name for f in fields(cls)]

    def to_row(self) -> list[str]:
        return [getattr(self, name) for name in self.field_names()]
