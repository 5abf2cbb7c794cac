"""
LLM Prompt Templates.

All prompts sent to the generation gateway. Centralized here for easy
tuning. Templates are module-level constants with ``.format()`` targets;
the ``get_*()`` / ``build_*()`` helpers fill them in.

Organization:
  SUMMARIZE_RESUME       : Freeform recruitment summary of one resume
  EXTRACT_APPLICANT_INFO : Second pass: summary -> fixed-key JSON object
  QUERY_*                : Ad-hoc question over many resumes at once

The summary prompt asks for prose; the extraction prompt then asks for a
JSON object from that prose, which the field extractor scans line by line.
"""


# ════════════════════════════════════════════════════════════════════════════
# SUMMARIZATION
# ════════════════════════════════════════════════════════════════════════════

SUMMARIZE_RESUME = """Please provide a comprehensive summary of the following resume. Focus on extracting key information for recruitment purposes:

**Key Information to Extract:**
1. **Name**: Full name of the applicant
2. **Current Role/Position**: Current job title
3. **Current Company**: Current employer
4. **Years of Experience**: Total years of professional experience
5. **Seniority Level**: Assess as Junior/Mid/Senior/Lead/Manager/Director/VP/C-Level based on:
   - Years of experience
   - Scope of responsibilities
   - Team size managed
   - Technical complexity handled
   - Leadership indicators

**Technical Skills Assessment:**
Please specifically identify and highlight these skills if present:
- **Frontend**: TypeScript, JavaScript, React, Vue, Angular, Next.js
- **Backend**: Python, Golang
- **AI/ML**: AI, LLM, Machine Learning
- **Cloud**: AWS, GCP, Azure, Alibaba Cloud
- **DevOps**: Terraform, CI/CD, Docker, Kubernetes

**Additional Information:**
- **Status**: Active/Passive/Open to opportunities
- **Key Achievements**: Notable accomplishments
- **Education**: Relevant education background
- **Remarks**: Any special notes or observations

**Resume Content:**
{resume_text}

Please provide a structured summary that captures all the above information clearly."""


# ════════════════════════════════════════════════════════════════════════════
# STRUCTURED EXTRACTION
# ════════════════════════════════════════════════════════════════════════════

EXTRACT_APPLICANT_INFO = """Extract the following information from this resume summary and return ONLY a JSON object with these exact keys (use "N/A" if not found):

{{
  "name": "Full Name",
  "role": "Job Role/Title",
  "seniority": "Junior/Mid/Senior/Lead/Manager/Director/VP/C-Level",
  "status": "Active/Passive/Open to opportunities",
  "current_position": "Current Job Title",
  "current_company": "Current Company Name",
  "years_of_exp": "X years",
  "cv_link": "N/A",
  "skillset": "Key skills separated by commas",
  "remarks": "Brief notes or observations"
}}

Resume Summary:
{summary}

JSON:"""


# ════════════════════════════════════════════════════════════════════════════
# AD-HOC QUERY OVER ALL RESUMES
# ════════════════════════════════════════════════════════════════════════════

QUERY_HEADER = """You are analyzing multiple resumes. Below are the extracted texts from {count} resume files.

User Question: {question}

Resume Texts:
"""

QUERY_RESUME_BLOCK = """--- Resume {index}: {file_name} ---
{text}

"""

QUERY_FOOTER = """Please provide a comprehensive answer to the user's question based on the resume texts above. If the question requires comparing candidates, please provide detailed analysis and comparisons. If the question asks for specific information, please extract and present it clearly.

Answer:"""

SEPARATOR = "=" * 50


def get_summary_prompt(text: str) -> str:
    """Recruitment summary prompt with the resume text appended verbatim."""
    return SUMMARIZE_RESUME.format(resume_text=text)


def get_extraction_prompt(summary: str) -> str:
    """Fixed-key JSON extraction prompt with the summary appended verbatim."""
    return EXTRACT_APPLICANT_INFO.format(summary=summary)


def build_combined_prompt(
    question: str, texts: list[str], file_names: list[str]
) -> str:
    """
    Combine a user question with every resume text into one prompt.

    Args:
        question: The user's question about the resumes.
        texts: Extracted resume texts.
        file_names: File name of each text, same order as ``texts``.

    Returns:
        A single prompt listing every resume, numbered from 1.
    """
    if len(texts) != len(file_names):
        raise ValueError("texts and file_names must have the same length")

    parts = [
        QUERY_HEADER.format(count=len(texts), question=question),
        SEPARATOR + "\n\n",
    ]
    for i, (text, file_name) in enumerate(zip(texts, file_names), 1):
        parts.append(QUERY_RESUME_BLOCK.format(index=i, file_name=file_name, text=text))
    parts.append(SEPARATOR + "\n\n")
    parts.append(QUERY_FOOTER)
    return "".join(parts)
