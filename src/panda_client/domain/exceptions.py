"""Domain exceptions for the Panda client."""

from typing import Optional


class PandaClientError(Exception):
    """Base exception for all client errors."""
    pass


class PandaApiError(PandaClientError):
    """Raised when a request fails at the transport level.

    Covers non-2xx responses as well as connection errors. When the
    service answered with an error payload, ``error`` and ``message`` hold
    its fields.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        error: Optional[str] = None,
        api_message: Optional[str] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.error = error
        self.message = api_message


class UploadFileError(PandaClientError):
    """Raised when a local file to upload cannot be read."""
    pass


class ResponseDecodeError(PandaClientError):
    """Raised when a response body is not the expected JSON."""
    pass


class ConfigurationError(PandaClientError):
    """Raised when configuration is invalid."""
    pass
