"""Custom exception hierarchy for the application."""


class AppError(Exception):
    """Base exception for the application."""

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class TransportError(AppError):
    """Raised when an upstream request fails before a response arrives."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="TRANSPORT_ERROR")


class HTTPStatusError(AppError):
    """Raised when an upstream service answers with a non-200 status."""

    def __init__(self, status_code: int, body: str, *, resource: str) -> None:
        super().__init__(
            f"Status Code {status_code} when fetching {resource}. Response: {body}",
            code="HTTP_STATUS_ERROR",
        )
        self.status_code = status_code
        self.body = body


class ParseError(AppError):
    """Raised when a successful response body cannot be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="PARSE_ERROR")
