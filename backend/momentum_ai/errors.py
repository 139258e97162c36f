from typing import Any


class AskAIError(Exception):
    """Base class for errors surfaced through the API envelope."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AuthenticationError(AskAIError):
    status_code = 401


class Forbidden(AskAIError):
    status_code = 403


class ValidationError(AskAIError):
    """Raised when the request body fails validation; carries per-field errors."""

    status_code = 400

    def __init__(self, errors: list[dict[str, Any]], message: str = "Invalid request") -> None:
        super().__init__(message)
        self.errors = errors


class ConfigurationError(AskAIError):
    status_code = 500


class UpstreamError(AskAIError):
    status_code = 500
