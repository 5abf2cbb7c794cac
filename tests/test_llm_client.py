"""
Tests for the Bedrock LLM client and the in-memory fake.

The live client is exercised against a stand-in boto3 client; nothing here
talks to AWS.

Run with: pytest tests/test_llm_client.py
"""

import io
import json
import time

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, ReadTimeoutError

from resume_analyzer.config import DEFAULT_ANTHROPIC_VERSION, DEFAULT_MODEL_ID, LLMConfig
from resume_analyzer.errors import LLMError
from resume_analyzer.interfaces import LLMService
from resume_analyzer.llm import BedrockService, FakeLLMService


class StubBedrockRuntime:
    """Records invoke_model calls and replays a canned body or error."""

    def __init__(self, body=None, error=None):
        self.body = body
        self.error = error
        self.calls = []

    def invoke_model(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        raw = self.body if isinstance(self.body, bytes) else json.dumps(self.body).encode()
        return {"body": io.BytesIO(raw), "contentType": "application/json"}


class FailingBody:
    """Response body whose read() fails mid-stream."""

    def __init__(self, error):
        self.error = error

    def read(self):
        raise self.error


def reply(*texts):
    return {"content": [{"type": "text", "text": t} for t in texts]}


class TestBedrockRequest:
    """Tests for request shaping."""

    def test_request_body(self):
        stub = StubBedrockRuntime(body=reply("ok"))
        BedrockService(LLMConfig(), client=stub).generate_text("Summarize this")

        call = stub.calls[0]
        assert call["modelId"] == DEFAULT_MODEL_ID
        assert call["contentType"] == "application/json"
        assert json.loads(call["body"]) == {
            "messages": [{"role": "user", "content": "Summarize this"}],
            "max_tokens": 1000,
            "temperature": 0.3,
            "anthropic_version": DEFAULT_ANTHROPIC_VERSION,
        }

    def test_configured_model_and_version(self):
        stub = StubBedrockRuntime(body=reply("ok"))
        config = LLMConfig(model_id="my-model", anthropic_version="bedrock-2099-01-01")
        BedrockService(config, client=stub).generate_text("hi")

        assert stub.calls[0]["modelId"] == "my-model"
        assert json.loads(stub.calls[0]["body"])["anthropic_version"] == "bedrock-2099-01-01"

    def test_empty_model_and_version_fall_back(self):
        service = BedrockService(LLMConfig(model_id="", anthropic_version=""))

        assert service.model_id == DEFAULT_MODEL_ID
        assert service.build_request("x")["anthropic_version"] == DEFAULT_ANTHROPIC_VERSION


class TestBedrockResponse:
    """Tests for response handling."""

    def test_returns_first_content_block(self):
        stub = StubBedrockRuntime(body=reply("first", "second"))
        assert BedrockService(client=stub).generate_text("p") == "first"

    def test_no_content_is_an_error(self):
        stub = StubBedrockRuntime(body={"content": []})
        with pytest.raises(LLMError, match="no content in response"):
            BedrockService(client=stub).generate_text("p")

    def test_missing_content_key_is_an_error(self):
        stub = StubBedrockRuntime(body={"id": "msg_1"})
        with pytest.raises(LLMError, match="no content in response"):
            BedrockService(client=stub).generate_text("p")

    def test_undecodable_body(self):
        stub = StubBedrockRuntime(body=b"<html>bad gateway</html>")
        with pytest.raises(LLMError, match="unmarshal"):
            BedrockService(client=stub).generate_text("p")

    def test_client_error_is_wrapped(self):
        error = ClientError(
            {"Error": {"Code": "ThrottlingException", "Message": "slow down"}},
            "InvokeModel",
        )
        stub = StubBedrockRuntime(error=error)

        with pytest.raises(LLMError, match="bedrock invoke failed") as exc_info:
            BedrockService(client=stub).generate_text("p")
        assert exc_info.value.__cause__ is error

    def test_connection_error_is_wrapped_and_not_retried(self):
        stub = StubBedrockRuntime(error=EndpointConnectionError(endpoint_url="https://bedrock"))

        with pytest.raises(LLMError):
            BedrockService(client=stub).generate_text("p")
        assert len(stub.calls) == 1

    def test_body_read_error_is_wrapped(self):
        error = ReadTimeoutError(endpoint_url="https://bedrock")
        stub = StubBedrockRuntime()
        stub.invoke_model = lambda **kwargs: {"body": FailingBody(error)}

        with pytest.raises(LLMError, match="bedrock invoke failed") as exc_info:
            BedrockService(client=stub).generate_text("p")
        assert exc_info.value.__cause__ is error

    def test_null_text_block_returns_empty_string(self):
        stub = StubBedrockRuntime(body={"content": [{"type": "text", "text": None}]})
        assert BedrockService(client=stub).generate_text("p") == ""


class TestFakeLLMService:
    """Tests for the configurable fake."""

    def test_implements_interface(self):
        service: LLMService = FakeLLMService()
        assert service.generate_text("test")

    def test_custom_responses(self):
        fake = FakeLLMService()
        fake.set_response("prompt1", "response1")
        fake.set_response("prompt2", "response2")

        assert fake.generate_text("prompt1") == "response1"
        assert fake.generate_text("prompt2") == "response2"
        assert fake.generate_text("unknown") == "Mock response for: unknown"

    def test_default_override(self):
        assert FakeLLMService(default="same").generate_text("anything") == "same"

    def test_custom_error(self):
        fake = FakeLLMService()
        fake.set_error("bad prompt", LLMError("custom error"))

        with pytest.raises(LLMError, match="custom error"):
            fake.generate_text("bad prompt")

    def test_delay(self):
        fake = FakeLLMService()
        fake.set_delay(0.01)

        start = time.monotonic()
        fake.generate_text("p")
        assert time.monotonic() - start >= 0.009

    def test_records_prompts(self):
        fake = FakeLLMService()
        fake.generate_text("a")
        fake.generate_text("b")
        assert fake.prompts == ["a", "b"]
