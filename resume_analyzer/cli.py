"""
Command-Line Interface for the Resume Analyzer.

This module provides the CLI commands using Click:
- convert-pdfs: OCR a folder of PDF resumes with AWS Textract
- summarize: Summarize extracted resume text with AWS Bedrock
- consolidate: Build one CSV table from all summaries
- query: Ask one question across all extracted resumes

Usage:
    resume-analyzer <command> [options]
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import Config, load_config
from .errors import ConfigError, NoInputFilesError, ResumeAnalyzerError
from .interfaces import LLMService, OCRService
from .models.document import BatchReport
from .pipeline import consolidate_summaries, convert_pdfs, query_texts, summarize_texts

logger = logging.getLogger(__name__)

# Rich console for progress output (stdout); errors go through logging (stderr)
console = Console()


# ── Logging Setup ──
def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    # boto3/botocore are chatty at DEBUG
    for name in ("boto3", "botocore", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)


@dataclass
class AppContext:
    """
    Shared state for one CLI invocation.

    Services left as None are built from the configuration on first use;
    tests pass fakes in through ``CliRunner.invoke(..., obj=AppContext(...))``.
    """
    config_path: Optional[Path] = None
    config: Optional[Config] = None
    llm: Optional[LLMService] = None
    ocr: Optional[OCRService] = None

    def get_config(self) -> Config:
        if self.config is None:
            try:
                self.config = load_config(self.config_path)
            except ConfigError as e:
                raise click.ClickException(str(e)) from e
        return self.config

    def get_llm(self) -> LLMService:
        if self.llm is None:
            from .llm.client import BedrockService
            self.llm = BedrockService(self.get_config().llm)
        return self.llm

    def get_ocr(self) -> OCRService:
        if self.ocr is None:
            from .ocr.textract import TextractService
            self.ocr = TextractService(self.get_config().ocr)
        return self.ocr


pass_app = click.make_pass_decorator(AppContext, ensure=True)


def _progress(verb: str):
    def callback(name: str) -> None:
        console.print(f"{verb} {escape(name)}...")
    return callback


def _print_report(report: BatchReport, done_message: str) -> None:
    ok = len(report.succeeded)
    failed = len(report.failed)
    if failed:
        console.print(f"[yellow]{done_message}[/] {ok} succeeded, [red]{failed} failed[/]")
        for item in report.failed:
            console.print(f"  [red]✗[/] {escape(item.source.name)}: {escape(str(item.error))}")
    else:
        console.print(f"[bold green]{done_message}[/] {ok} files processed")


def _list_error(input_dir: Path, e: OSError) -> click.ClickException:
    if e.filename is not None and Path(e.filename) != input_dir:
        return click.ClickException(f"Failed to prepare output: {e}")
    return click.ClickException(f"Failed to read input directory {input_dir}: {e}")


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default is $HOME/.resume-analyzer.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose logging")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """
    Resume Analyzer - OCR, summarize and tabulate PDF resumes with AWS.

    Typical run:

        resume-analyzer convert-pdfs -i resumes/ -o text/
        resume-analyzer summarize -i text/ -o summaries/
        resume-analyzer consolidate -i summaries/ -o applicants.csv
    """
    setup_logging(verbose)
    app = ctx.ensure_object(AppContext)
    if config_path is not None:
        app.config_path = config_path


@main.command("convert-pdfs")
@click.option("--input", "-i", "input_dir", required=True,
              type=click.Path(path_type=Path), help="Input folder containing PDFs")
@click.option("--output", "-o", "output_dir", required=True,
              type=click.Path(file_okay=False, path_type=Path),
              help="Output folder for extracted text")
@pass_app
def convert_pdfs_command(app: AppContext, input_dir: Path, output_dir: Path):
    """
    Convert PDFs in a folder to text using AWS Textract.

    Example:
        resume-analyzer convert-pdfs -i resumes/ -o text/
    """
    ocr = app.get_ocr()
    try:
        report = convert_pdfs(input_dir, output_dir, ocr, progress=_progress("Processing"))
    except OSError as e:
        raise _list_error(input_dir, e) from e
    _print_report(report, "Processing complete.")


@main.command("summarize")
@click.option("--input", "-i", "input_dir", required=True,
              type=click.Path(path_type=Path), help="Input folder containing .txt files")
@click.option("--output", "-o", "output_dir", required=True,
              type=click.Path(file_okay=False, path_type=Path),
              help="Output folder for summaries")
@pass_app
def summarize_command(app: AppContext, input_dir: Path, output_dir: Path):
    """
    Generate summaries of extracted text documents using AWS Bedrock.

    Example:
        resume-analyzer summarize -i text/ -o summaries/
    """
    llm = app.get_llm()
    try:
        report = summarize_texts(input_dir, output_dir, llm, progress=_progress("Summarizing"))
    except OSError as e:
        raise _list_error(input_dir, e) from e
    _print_report(report, "Summarization complete.")


@main.command("consolidate")
@click.option("--input", "-i", "input_dir", required=True,
              type=click.Path(path_type=Path), help="Input folder containing summary files")
@click.option("--output", "-o", "output_file", required=True,
              type=click.Path(dir_okay=False, path_type=Path),
              help="Output file for consolidated table")
@pass_app
def consolidate_command(app: AppContext, input_dir: Path, output_file: Path):
    """
    Consolidate all summaries into a single CSV table.

    Example:
        resume-analyzer consolidate -i summaries/ -o applicants.csv
    """
    llm = app.get_llm()
    try:
        report, applicants = consolidate_summaries(
            input_dir, output_file, llm, progress=_progress("Processing")
        )
    except OSError as e:
        if e.filename is not None and Path(e.filename) == output_file:
            raise click.ClickException(f"Failed to write consolidated table: {e}") from e
        raise _list_error(input_dir, e) from e

    _print_report(report, "Consolidation complete.")
    console.print(f"Consolidated table saved to {escape(str(output_file))} ({len(applicants)} applicants)")


@main.command("query")
@click.option("--prompt", "-p", "question", required=True,
              help="The question or prompt to ask about the resumes")
@click.option("--input", "-i", "input_dir", required=True,
              type=click.Path(path_type=Path), help="Input folder containing .txt files")
@click.option("--output", "-o", "output_file", default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help="Output file for the response (prints to stdout if not specified)")
@pass_app
def query_command(app: AppContext, question: str, input_dir: Path, output_file: Optional[Path]):
    """
    Query all resume texts with a custom prompt using AWS Bedrock.

    Example:
        resume-analyzer query -i text/ -p "Who has the most Kubernetes experience?"
    """
    llm = app.get_llm()
    try:
        response = query_texts(question, input_dir, llm, progress=_progress("Reading"))
    except NoInputFilesError as e:
        raise click.ClickException(str(e)) from e
    except ResumeAnalyzerError as e:
        raise click.ClickException(f"Bedrock query failed: {e}") from e
    except OSError as e:
        raise _list_error(input_dir, e) from e

    if output_file is not None:
        try:
            output_file.write_text(response, encoding="utf-8")
        except OSError as e:
            raise click.ClickException(f"Failed to write response to file: {e}") from e
        console.print(f"Response saved to {escape(str(output_file))}")
        return

    rule = "=" * 80
    click.echo("\n" + rule)
    click.echo("BEDROCK RESPONSE")
    click.echo(rule)
    click.echo(response)
    click.echo(rule)


if __name__ == "__main__":
    main()
