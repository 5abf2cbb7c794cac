#!/usr/bin/env python3
"""
Resume Analyzer - Main Entry Point

Usage:
    python run.py convert-pdfs -i <pdf_dir> -o <text_dir>
    python run.py summarize -i <text_dir> -o <summary_dir>
    python run.py consolidate -i <summary_dir> -o <file.csv>
    python run.py query -i <text_dir> -p "<question>" [-o <file>]

Global options (before the command):
    --config FILE   YAML config (default: ~/.resume-analyzer.yaml)
    -v, --verbose   Debug logging

Examples:
    python run.py convert-pdfs -i resumes/ -o text/
    python run.py summarize -i text/ -o summaries/
    python run.py consolidate -i summaries/ -o applicants.csv
    python run.py query -i text/ -p "Which candidates know Terraform?"
    python run.py --config prod.yaml summarize -i text/ -o summaries/

AWS credentials come from the usual boto3 sources (environment variables,
~/.aws/credentials, SSO, instance profile).
"""

import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.cli import main


if __name__ == "__main__":
    main(prog_name="run.py")
