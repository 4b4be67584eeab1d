# healthy_chat/errors.py


class LLMConfigurationError(Exception):
    """Raised when the language model cannot be called at all (e.g. no API key)."""


class LLMProviderError(Exception):
    """The provider answered with an error status or could not be reached."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"LLM provider error {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail
