"""
LLM client for Anthropic Claude models on AWS Bedrock.

Wraps ``bedrock-runtime`` ``InvokeModel`` to provide generate_text(): a
single-turn conversation with one user message carrying the whole prompt.

Request body (Anthropic messages format):

    {
      "anthropic_version": "bedrock-2023-05-31",
      "max_tokens": 1000,
      "temperature": 0.3,
      "messages": [{"role": "user", "content": "<prompt>"}]
    }

The reply's first ``content`` block text is returned. There are no retries;
a failed call raises ``LLMError`` and the caller decides what to skip.
"""

import json
import logging
from typing import Any

from ..config import DEFAULT_ANTHROPIC_VERSION, DEFAULT_MODEL_ID, LLMConfig
from ..errors import LLMError

logger = logging.getLogger(__name__)


class BedrockService:
    """
    Text generation through AWS Bedrock.

    Usage:
        llm = BedrockService(LLMConfig(model_id="anthropic.claude-3-haiku-20240307-v1:0"))
        summary = llm.generate_text(prompt)
    """

    def __init__(self, config: LLMConfig | None = None, client=None):
        """
        Initialize the LLM client.

        Args:
            config: Model id, protocol version, region and sampling settings.
            client: Pre-built boto3 ``bedrock-runtime`` client. Created
                lazily from ``config.region`` when omitted.
        """
        self.config = config or LLMConfig()
        self._client = client

    @property
    def model_id(self) -> str:
        return self.config.model_id or DEFAULT_MODEL_ID

    @property
    def anthropic_version(self) -> str:
        return self.config.anthropic_version or DEFAULT_ANTHROPIC_VERSION

    @property
    def client(self):
        """The boto3 bedrock-runtime client, created on first use."""
        if self._client is None:
            import boto3
            from botocore.config import Config as BotoConfig

            # Retries are disabled; a failed file is skipped, not retried
            self._client = boto3.client(
                "bedrock-runtime",
                region_name=self.config.region,
                config=BotoConfig(
                    read_timeout=self.config.read_timeout,
                    retries={"max_attempts": 1},
                ),
            )
            logger.info(
                f"Bedrock client initialized: region={self.config.region}, "
                f"model={self.model_id}"
            )
        return self._client

    def build_request(self, prompt: str) -> dict[str, Any]:
        """Build the Anthropic messages request body for ``prompt``."""
        return {
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
            "anthropic_version": self.anthropic_version,
        }

    def generate_text(self, prompt: str) -> str:
        """
        Send a prompt and return the generated text.

        Args:
            prompt: The full user prompt.

        Returns:
            Text of the first content block of the response.

        Raises:
            LLMError: On transport/service failure, an undecodable body,
                or a response without content.
        """
        from botocore.exceptions import BotoCoreError, ClientError

        body = json.dumps(self.build_request(prompt)).encode("utf-8")

        try:
            response = self.client.invoke_model(
                modelId=self.model_id,
                contentType="application/json",
                accept="application/json",
                body=body,
            )
            raw = response["body"].read()
        except (BotoCoreError, ClientError) as e:
            raise LLMError(f"bedrock invoke failed: {e}") from e

        return self._parse_response(raw)

    @staticmethod
    def _parse_response(raw: bytes | str) -> str:
        """
        Extract the text of the first content block.

        Raises:
            LLMError: If the body is not JSON or has no content blocks.
        """
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise LLMError(f"failed to unmarshal response: {e}") from e

        content = data.get("content") if isinstance(data, dict) else None
        if not content:
            raise LLMError("no content in response")

        first = content[0]
        if not isinstance(first, dict):
            raise LLMError("no content in response")

        usage = data.get("usage")
        if usage:
            logger.debug(f"Bedrock usage: {usage}")

        return first.get("text") or ""
