"""
Tests for the command-line interface.

Fakes are injected through the click context object, so no AWS calls are
made.

Run with: pytest tests/test_cli.py
"""

import logging

import pytest
from click.testing import CliRunner

from resume_analyzer import config as config_module
from resume_analyzer.analysis.prompts import get_summary_prompt
from resume_analyzer.cli import AppContext, main
from resume_analyzer.config import Config
from resume_analyzer.errors import LLMError
from resume_analyzer.llm import BedrockService, FakeLLMService
from resume_analyzer.ocr import FakeOCRService, TextractService


@pytest.fixture(autouse=True)
def no_home_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "missing.yaml")


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, args, **services):
    return runner.invoke(main, args, obj=AppContext(config=Config(), **services))


class TestConvertPDFsCommand:

    def test_end_to_end(self, runner, tmp_path):
        in_dir, out_dir = tmp_path / "pdfs", tmp_path / "text"
        in_dir.mkdir()
        (in_dir / "resumeA.pdf").write_bytes(b"%PDF")
        ocr = FakeOCRService()
        ocr.set_response("resumeA.pdf", "Name: A\n")

        result = invoke(runner, ["convert-pdfs", "-i", str(in_dir), "-o", str(out_dir)], ocr=ocr)

        assert result.exit_code == 0, result.output
        assert "Processing resumeA.pdf..." in result.output
        assert "Processing complete." in result.output
        assert (out_dir / "resumeA.txt").read_text() == "Name: A\n"

    def test_partial_failure_exits_zero(self, runner, tmp_path, caplog):
        in_dir, out_dir = tmp_path / "pdfs", tmp_path / "text"
        in_dir.mkdir()
        (in_dir / "a.pdf").write_bytes(b"")
        (in_dir / "b.pdf").write_bytes(b"")
        ocr = FakeOCRService()
        ocr.set_error("a.pdf", OSError("disk on fire"))

        result = invoke(runner, ["convert-pdfs", "-i", str(in_dir), "-o", str(out_dir)], ocr=ocr)

        assert result.exit_code == 0
        assert (out_dir / "b.txt").exists()
        assert "1 failed" in result.output
        assert any(
            r.levelno == logging.ERROR and "a.pdf" in r.getMessage() for r in caplog.records
        )

    def test_missing_options_is_usage_error(self, runner):
        result = invoke(runner, ["convert-pdfs", "-i", "somewhere"], ocr=FakeOCRService())
        assert result.exit_code == 2
        assert "--output" in result.output

    def test_unreadable_input_directory_is_fatal(self, runner, tmp_path):
        result = invoke(
            runner,
            ["convert-pdfs", "-i", str(tmp_path / "nope"), "-o", str(tmp_path / "out")],
            ocr=FakeOCRService(),
        )
        assert result.exit_code == 1
        assert "Failed to read input directory" in result.output


class TestSummarizeCommand:

    def test_end_to_end(self, runner, tmp_path):
        in_dir, out_dir = tmp_path / "text", tmp_path / "summaries"
        in_dir.mkdir()
        (in_dir / "resumeA.txt").write_text("experienced engineer")
        llm = FakeLLMService()
        llm.set_response(get_summary_prompt("experienced engineer"), "Great summary")

        result = invoke(runner, ["summarize", "-i", str(in_dir), "-o", str(out_dir)], llm=llm)

        assert result.exit_code == 0, result.output
        assert "Summarizing resumeA.txt..." in result.output
        assert (out_dir / "resumeA_summary.txt").read_text() == "Great summary"

    def test_gateway_error_skips_file(self, runner, tmp_path, caplog):
        in_dir, out_dir = tmp_path / "text", tmp_path / "summaries"
        in_dir.mkdir()
        (in_dir / "a.txt").write_text("bad")
        (in_dir / "b.txt").write_text("good")
        llm = FakeLLMService(default="ok")
        llm.set_error(get_summary_prompt("bad"), LLMError("no content in response"))

        result = invoke(runner, ["summarize", "-i", str(in_dir), "-o", str(out_dir)], llm=llm)

        assert result.exit_code == 0
        assert not (out_dir / "a_summary.txt").exists()
        assert (out_dir / "b_summary.txt").read_text() == "ok"
        assert any("no content in response" in r.getMessage() for r in caplog.records)


class TestConsolidateCommand:

    def test_missing_name_uses_file_name(self, runner, tmp_path):
        in_dir = tmp_path / "summaries"
        in_dir.mkdir()
        (in_dir / "bob_summary.txt").write_text("Bob summary")
        out = tmp_path / "applicants.csv"
        llm = FakeLLMService(default='{\n  "role": "Engineer"\n}')

        result = invoke(runner, ["consolidate", "-i", str(in_dir), "-o", str(out)], llm=llm)

        assert result.exit_code == 0, result.output
        lines = out.read_text().splitlines()
        assert lines[0] == (
            "Applicant,Role,Seniority,Status,Current Position,"
            "Current Company,Years of Exp,CV Link,Skillset,Remarks"
        )
        assert lines[1] == "bob,Engineer,N/A,N/A,N/A,N/A,N/A,N/A,N/A,N/A"

    def test_unwritable_output_is_fatal(self, runner, tmp_path):
        in_dir = tmp_path / "summaries"
        in_dir.mkdir()
        out = tmp_path / "no_such_dir" / "applicants.csv"

        result = invoke(runner, ["consolidate", "-i", str(in_dir), "-o", str(out)], llm=FakeLLMService())

        assert result.exit_code == 1
        assert "Failed to write consolidated table" in result.output


class TestQueryCommand:

    def test_prints_framed_response(self, runner, tmp_path):
        (tmp_path / "a.txt").write_text("Alice")
        llm = FakeLLMService(default="Alice is the strongest candidate.")

        result = invoke(runner, ["query", "-p", "Who is best?", "-i", str(tmp_path)], llm=llm)

        assert result.exit_code == 0, result.output
        assert "BEDROCK RESPONSE" in result.output
        assert "Alice is the strongest candidate." in result.output
        assert "User Question: Who is best?" in llm.prompts[0]

    def test_writes_response_to_file(self, runner, tmp_path):
        in_dir = tmp_path / "text"
        in_dir.mkdir()
        (in_dir / "a.txt").write_text("Alice")
        out = tmp_path / "answer.md"

        result = invoke(
            runner,
            ["query", "-p", "q", "-i", str(in_dir), "-o", str(out)],
            llm=FakeLLMService(default="answer"),
        )

        assert result.exit_code == 0, result.output
        assert out.read_text() == "answer"
        assert "BEDROCK RESPONSE" not in result.output

    def test_no_text_files_is_fatal(self, runner, tmp_path):
        result = invoke(runner, ["query", "-p", "q", "-i", str(tmp_path)], llm=FakeLLMService())

        assert result.exit_code == 1
        assert "No .txt files found" in result.output

    def test_prompt_is_required(self, runner, tmp_path):
        result = invoke(runner, ["query", "-i", str(tmp_path)], llm=FakeLLMService())
        assert result.exit_code == 2

    def test_llm_failure_is_fatal(self, runner, tmp_path):
        (tmp_path / "a.txt").write_text("x")

        class Failing:
            def generate_text(self, prompt):
                raise LLMError("bedrock invoke failed: AccessDenied")

        result = invoke(runner, ["query", "-p", "q", "-i", str(tmp_path)], llm=Failing())

        assert result.exit_code == 1
        assert "Bedrock query failed" in result.output


class TestConfigOption:

    def test_missing_config_file_is_fatal(self, runner, tmp_path):
        in_dir = tmp_path / "text"
        in_dir.mkdir()

        result = runner.invoke(
            main,
            ["--config", str(tmp_path / "nope.yaml"), "summarize", "-i", str(in_dir), "-o", str(tmp_path)],
        )

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_live_services_built_from_config(self, tmp_path, monkeypatch):
        for var in ("BEDROCK_MODEL_ID", "TEXTRACT_REGION"):
            monkeypatch.delenv(var, raising=False)
        cfg = tmp_path / "cfg.yaml"
        cfg.write_text("bedrock_model_id: custom-model\ntextract_region: eu-west-1\n")
        app = AppContext(config_path=cfg)

        llm = app.get_llm()
        ocr = app.get_ocr()

        assert isinstance(llm, BedrockService)
        assert llm.model_id == "custom-model"
        assert isinstance(ocr, TextractService)
        assert ocr.config.region == "eu-west-1"


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
