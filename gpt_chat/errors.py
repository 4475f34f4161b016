"""Exceptions raised while loading config or talking to the chat API."""

from __future__ import annotations


class ChatError(RuntimeError):
    pass


class ConfigLoadError(ChatError):
    def __init__(self, message: str = "Error loading .env file") -> None:
        super().__init__(message)


class MissingCredentialError(ChatError):
    def __init__(self, message: str = "OPEN_API_KEY not set in .env file") -> None:
        super().__init__(message)


class InvalidCredentialError(ChatError):
    def __init__(
        self,
        message: str = "OPEN_API_KEY contains non-ASCII characters; check for pasted quotes",
    ) -> None:
        super().__init__(message)


class QuotaExceededError(ChatError):
    def __init__(self) -> None:
        super().__init__(
            "you have exceeded your API quota, please check your plan and billing details"
        )


class UnexpectedStatusError(ChatError):
    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"unexpected status code: {status_code}, response: {body}")


class MalformedResponseError(ChatError):
    def __init__(self, body: str) -> None:
        self.body = body
        super().__init__(f"invalid response format: {body}")
