"""LLM gateways: AWS Bedrock and an in-memory fake."""

from .client import BedrockService
from .fake import FakeLLMService

__all__ = ["BedrockService", "FakeLLMService"]
