"""
Translation Exceptions

Error kinds raised by the translation client. Retryable errors are handled
inside the client's retry loop; everything that escapes the client is terminal
for the whole run.
"""
from typing import Optional


class TranslationError(Exception):
    """Translation service error with optional code and details."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}


class RetryableError(TranslationError):
    """Failure that may go away on a later attempt."""


class TransportError(RetryableError):
    """The endpoint could not be reached or the response could not be read."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, code="transport_error", details={"cause": repr(cause)})
        self.cause = cause


class ServerFailure(RetryableError):
    """5xx or any other non-success, non-4xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"API request failed with status {status_code}: {body}",
            code="server_failure",
            details={"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body


class ClientError(TranslationError):
    """Non-retryable rejection: retrying the same request cannot succeed."""


class ClientRejection(ClientError):
    """The service answered with a 4xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"API request failed with client error status {status_code}",
            code="client_rejection",
            details={"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body


class DecodeError(ClientError):
    """A success response whose body does not contain a translated text."""

    def __init__(self, reason: str, body: str):
        super().__init__(
            f"Failed to parse JSON from API: {reason}",
            code="decode_error",
            details={"body": body},
        )
        self.body = body


class RetriesExhausted(TranslationError):
    """Every allowed attempt for one segment failed."""

    def __init__(self, attempts: int, last_error: Optional[Exception]):
        reason = str(last_error) if last_error else "no error recorded"
        super().__init__(
            f"Translation failed after {attempts} attempts: {reason}",
            code="retries_exhausted",
            details={"attempts": attempts},
        )
        self.attempts = attempts
        self.last_error = last_error
