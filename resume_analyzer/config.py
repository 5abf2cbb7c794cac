"""
Configuration for the Resume Analyzer.

Central configuration for the OCR (AWS Textract) and LLM (AWS Bedrock)
gateways. Defaults live in the dataclasses below and can be overridden in
two ways:

1. **A YAML file**: ``~/.resume-analyzer.yaml`` is picked up automatically,
   or pass ``--config path/to/file.yaml`` on the CLI.  Both flat keys
   (``bedrock_model_id: ...``) and nested sections (``llm: {model_id: ...}``)
   are accepted.
2. **Environment variables**: ``BEDROCK_MODEL_ID``, ``ANTHROPIC_VERSION``,
   ``BEDROCK_REGION`` and ``TEXTRACT_REGION`` win over the file.

AWS credentials are never configured here; boto3's default credential chain
(environment, shared credentials file, instance profile, ...) is used as-is.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".resume-analyzer.yaml"

DEFAULT_MODEL_ID = "anthropic.claude-3-5-sonnet-20240620-v1:0"
DEFAULT_ANTHROPIC_VERSION = "bedrock-2023-05-31"

# Textract synchronous API rejects documents above 5 MB
MAX_DOCUMENT_BYTES = 5 * 1024 * 1024


@dataclass
class OCRConfig:
    """AWS Textract settings."""
    region: str = "us-east-1"

    # Split PDFs into single pages and send one request per page
    split_pages: bool = True
    max_document_bytes: int = MAX_DOCUMENT_BYTES


@dataclass
class LLMConfig:
    """AWS Bedrock model and generation settings."""
    region: str = "ap-southeast-1"
    model_id: str = DEFAULT_MODEL_ID
    anthropic_version: str = DEFAULT_ANTHROPIC_VERSION

    # Generation parameters
    max_tokens: int = 1000
    temperature: float = 0.3

    # botocore read timeout in seconds
    read_timeout: int = 300


@dataclass
class Config:
    """Master configuration combining all settings."""
    ocr: OCRConfig = field(default_factory=OCRConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)

    # Set when loaded from a file
    source: Optional[Path] = None


# ════════════════════════════════════════════════════════════════════════════
# YAML / ENVIRONMENT LOADER
# ════════════════════════════════════════════════════════════════════════════

# Flat keys (as written in ~/.resume-analyzer.yaml) -> (section, attribute)
FLAT_KEYS: dict[str, tuple[str, str]] = {
    "bedrock_model_id": ("llm", "model_id"),
    "anthropic_version": ("llm", "anthropic_version"),
    "bedrock_region": ("llm", "region"),
    "max_tokens": ("llm", "max_tokens"),
    "temperature": ("llm", "temperature"),
    "textract_region": ("ocr", "region"),
    "split_pages": ("ocr", "split_pages"),
}

ENV_KEYS: dict[str, tuple[str, str]] = {
    "BEDROCK_MODEL_ID": ("llm", "model_id"),
    "ANTHROPIC_VERSION": ("llm", "anthropic_version"),
    "BEDROCK_REGION": ("llm", "region"),
    "TEXTRACT_REGION": ("ocr", "region"),
}


def _set(config: Config, section: str, attr: str, value: Any) -> None:
    target = getattr(config, section)
    current = getattr(target, attr)
    # Coerce to the type of the default so YAML "0.3" / env strings behave
    if isinstance(current, bool):
        if isinstance(value, str):
            value = value.strip().lower() in ("1", "true", "yes", "on")
        else:
            value = bool(value)
    elif isinstance(current, (int, float)):
        try:
            value = type(current)(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value for {attr}: {value!r}") from e
    else:
        value = "" if value is None else str(value)
    setattr(target, attr, value)


def _apply_mapping(config: Config, data: Mapping[str, Any]) -> None:
    for key, value in data.items():
        if key in ("ocr", "llm"):
            if not isinstance(value, Mapping):
                raise ConfigError(f"Section '{key}' must be a mapping")
            section = getattr(config, key)
            for attr, sub_value in value.items():
                if not hasattr(section, attr):
                    logger.warning(f"Ignoring unknown config key: {key}.{attr}")
                    continue
                _set(config, key, attr, sub_value)
        elif key in FLAT_KEYS:
            _set(config, *FLAT_KEYS[key], value)
        else:
            logger.warning(f"Ignoring unknown config key: {key}")


def load_config(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Config:
    """
    Build the effective configuration.

    Args:
        path: Explicit YAML file. If None, ``~/.resume-analyzer.yaml`` is
            used when it exists, otherwise defaults apply.
        env: Environment mapping (defaults to ``os.environ``).

    Returns:
        A Config with file values and environment overrides applied.

    Raises:
        ConfigError: If an explicit file is missing, or any file is not
            valid YAML or not a mapping.
    """
    import yaml

    env = os.environ if env is None else env
    config = Config()

    if path is not None:
        path = Path(path).expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
    elif DEFAULT_CONFIG_PATH.is_file():
        path = DEFAULT_CONFIG_PATH

    if path is not None:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        _apply_mapping(config, data)
        config.source = path
        logger.info(f"Using config file: {path}")

    for var, (section, attr) in ENV_KEYS.items():
        value = env.get(var)
        if value:
            _set(config, section, attr, value)

    # Empty strings fall back to the built-in defaults
    if not config.llm.model_id:
        config.llm.model_id = DEFAULT_MODEL_ID
    if not config.llm.anthropic_version:
        config.llm.anthropic_version = DEFAULT_ANTHROPIC_VERSION

    return config
