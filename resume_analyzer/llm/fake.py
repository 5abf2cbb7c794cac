"""In-memory LLM service for tests and dry runs."""

import time


class FakeLLMService:
    """
    LLM service returning canned replies without touching AWS.

    Replies and errors are keyed by the exact prompt. Prompts with no canned
    reply get ``"Mock response for: <prompt>"``, unless ``default`` is set.

    Usage:
        llm = FakeLLMService()
        llm.set_response(prompt, "Great summary")
        llm.set_error(other_prompt, LLMError("throttled"))
        llm.set_delay(0.01)
    """

    def __init__(self, default: str | None = None, delay: float = 0.0):
        self.responses: dict[str, str] = {}
        self.errors: dict[str, Exception] = {}
        self.default = default
        self.delay = delay
        self.prompts: list[str] = []

    def set_response(self, prompt: str, response: str) -> None:
        self.responses[prompt] = response

    def set_error(self, prompt: str, error: Exception) -> None:
        self.errors[prompt] = error

    def set_delay(self, seconds: float) -> None:
        self.delay = seconds

    def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.delay > 0:
            time.sleep(self.delay)
        if prompt in self.errors:
            raise self.errors[prompt]
        if prompt in self.responses:
            return self.responses[prompt]
        if self.default is not None:
            return self.default
        return "Mock response for: " + prompt
