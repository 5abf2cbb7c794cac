"""
Batch pipeline: PDF -> TXT -> summary -> CSV.

Each stage lists one input directory, processes every eligible file in name
order with one blocking gateway call per file, and writes the result to the
output location. A file that fails to read, to process or to write is logged
and skipped; the rest of the batch still runs. Reruns reprocess everything
and overwrite existing outputs.

Stages:
  convert_pdfs()         : *.pdf  -> <stem>.txt           (OCR)
  summarize_texts()      : *.txt  -> <stem>_summary.txt   (LLM)
  consolidate_summaries(): *_summary.txt -> one CSV       (LLM + field scan)
  query_texts()          : all *.txt + a question -> one answer (LLM)
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from .analysis.field_extractor import SUMMARY_SUFFIX, extract_applicant_info
from .analysis.prompts import build_combined_prompt, get_extraction_prompt, get_summary_prompt
from .errors import NoInputFilesError
from .export import write_applicants_csv
from .interfaces import LLMService, OCRService
from .models.applicant import ApplicantInfo
from .models.document import BatchReport, ProcessedFile

logger = logging.getLogger(__name__)

# Called with the file name just before it is processed (CLI progress output)
ProgressCallback = Callable[[str], None]


def list_input_files(input_dir: str | Path, suffix: str) -> list[Path]:
    """
    Find regular files in a directory whose name ends with ``suffix``.

    Non-recursive, case-sensitive, sorted by name.

    Raises:
        OSError: If the directory cannot be listed.
    """
    input_dir = Path(input_dir)
    files = []
    for f in sorted(input_dir.iterdir()):
        if f.is_dir() or not f.name.endswith(suffix):
            continue
        files.append(f)
    logger.debug(f"Found {len(files)} '{suffix}' files in {input_dir}")
    return files


def _notify(progress: Optional[ProgressCallback], name: str) -> None:
    if progress is not None:
        progress(name)


def _fail(report: BatchReport, source: Path, action: str, error: Exception) -> None:
    logger.error(f"{action} failed for {source.name}: {error}")
    report.record(ProcessedFile(source=source, error=str(error)))


# ════════════════════════════════════════════════════════════════════════════
# STAGE 1: OCR
# ════════════════════════════════════════════════════════════════════════════

def convert_pdfs(
    input_dir: str | Path,
    output_dir: str | Path,
    ocr: OCRService,
    progress: Optional[ProgressCallback] = None,
) -> BatchReport:
    """
    OCR every PDF in ``input_dir`` into ``output_dir/<stem>.txt``.

    Args:
        input_dir: Folder containing PDFs.
        output_dir: Folder for extracted text (created if missing).
        ocr: OCR gateway.
        progress: Optional per-file callback.

    Returns:
        BatchReport with one entry per PDF.
    """
    output_dir = Path(output_dir)
    report = BatchReport(stage="convert-pdfs")
    pdfs = list_input_files(input_dir, ".pdf")
    output_dir.mkdir(parents=True, exist_ok=True)

    for pdf_path in pdfs:
        _notify(progress, pdf_path.name)
        output_path = output_dir / (pdf_path.name[: -len(".pdf")] + ".txt")

        try:
            text = ocr.extract_text_from_pdf(pdf_path)
        except Exception as e:
            _fail(report, pdf_path, "Textract", e)
            continue

        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            _fail(report, pdf_path, "Writing output", e)
            continue

        logger.info(f"Extracted {len(text)} chars from {pdf_path.name}")
        report.record(ProcessedFile(source=pdf_path, output=output_path))

    return report


# ════════════════════════════════════════════════════════════════════════════
# STAGE 2: SUMMARIZATION
# ════════════════════════════════════════════════════════════════════════════

def summarize_texts(
    input_dir: str | Path,
    output_dir: str | Path,
    llm: LLMService,
    progress: Optional[ProgressCallback] = None,
) -> BatchReport:
    """
    Summarize every ``.txt`` file into ``output_dir/<stem>_summary.txt``.

    Args:
        input_dir: Folder containing extracted resume text.
        output_dir: Folder for summaries (created if missing).
        llm: Generation gateway.
        progress: Optional per-file callback.

    Returns:
        BatchReport with one entry per text file.
    """
    output_dir = Path(output_dir)
    report = BatchReport(stage="summarize")
    texts = list_input_files(input_dir, ".txt")
    output_dir.mkdir(parents=True, exist_ok=True)

    for text_path in texts:
        _notify(progress, text_path.name)
        output_path = output_dir / (text_path.name[: -len(".txt")] + SUMMARY_SUFFIX)

        try:
            content = text_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            _fail(report, text_path, "Reading", e)
            continue

        try:
            summary = llm.generate_text(get_summary_prompt(content))
        except Exception as e:
            _fail(report, text_path, "Bedrock", e)
            continue

        try:
            output_path.write_text(summary, encoding="utf-8")
        except OSError as e:
            _fail(report, text_path, "Writing summary", e)
            continue

        logger.info(f"Summary saved to {output_path}")
        report.record(ProcessedFile(source=text_path, output=output_path))

    return report


# ════════════════════════════════════════════════════════════════════════════
# STAGE 3: CONSOLIDATION
# ════════════════════════════════════════════════════════════════════════════

def consolidate_summaries(
    input_dir: str | Path,
    output_file: str | Path,
    llm: LLMService,
    progress: Optional[ProgressCallback] = None,
) -> tuple[BatchReport, list[ApplicantInfo]]:
    """
    Turn every ``*_summary.txt`` into one CSV row.

    Each summary goes through the extraction prompt; the reply is scanned
    by the field extractor. Failed files contribute no row.

    Args:
        input_dir: Folder containing summary files.
        output_file: CSV path (overwritten).
        llm: Generation gateway.
        progress: Optional per-file callback.

    Returns:
        Tuple of (BatchReport, applicants in row order).

    Raises:
        OSError: If the CSV cannot be written.
    """
    output_file = Path(output_file)
    report = BatchReport(stage="consolidate")
    applicants: list[ApplicantInfo] = []

    for summary_path in list_input_files(input_dir, SUMMARY_SUFFIX):
        _notify(progress, summary_path.name)

        try:
            summary = summary_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            _fail(report, summary_path, "Reading", e)
            continue

        try:
            response = llm.generate_text(get_extraction_prompt(summary))
        except Exception as e:
            _fail(report, summary_path, "Extracting info", e)
            continue

        applicants.append(extract_applicant_info(response, summary_path.name))
        report.record(ProcessedFile(source=summary_path, output=output_file))

    write_applicants_csv(applicants, output_file)
    return report, applicants


# ════════════════════════════════════════════════════════════════════════════
# AD-HOC QUERY
# ════════════════════════════════════════════════════════════════════════════

def query_texts(
    question: str,
    input_dir: str | Path,
    llm: LLMService,
    progress: Optional[ProgressCallback] = None,
) -> str:
    """
    Ask one question about all resumes in ``input_dir`` in a single call.

    Unreadable files are logged and left out of the prompt.

    Raises:
        NoInputFilesError: If no ``.txt`` file could be read.
        LLMError: If the generation call fails.
    """
    texts: list[str] = []
    file_names: list[str] = []

    for text_path in list_input_files(input_dir, ".txt"):
        _notify(progress, text_path.name)
        try:
            texts.append(text_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Reading failed for {text_path.name}: {e}")
            continue
        file_names.append(text_path.name)

    if not texts:
        raise NoInputFilesError(f"No .txt files found in {input_dir}")

    logger.info(f"Sending query with {len(texts)} resume files")
    return llm.generate_text(build_combined_prompt(question, texts, file_names))
