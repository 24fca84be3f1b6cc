"""Public exceptions for the TonicPow SDK."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tonicpow.models.response import APIError, StandardResponse


class TonicPowError(Exception):
    """Base exception for all TonicPow SDK errors."""


class TonicPowConfigError(TonicPowError):
    """Configuration error (missing API key, invalid config)."""


class TonicPowValidationError(TonicPowError):
    """Invalid arguments for a request."""


class TonicPowRequestError(TonicPowError):
    """A request failed.

    ``response`` holds whatever part of the response envelope was built
    before the failure, or None if nothing was sent.
    """

    def __init__(self, message: str, response: "StandardResponse | None" = None) -> None:
        super().__init__(message)
        self.response = response


class TonicPowSerializationError(TonicPowRequestError):
    """The request payload could not be encoded as JSON."""


class TonicPowTransportError(TonicPowRequestError):
    """The HTTP transport failed (connection, timeout, DNS)."""


class TonicPowAPIError(TonicPowRequestError):
    """Response status differed from the expected one."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "StandardResponse | None" = None,
        error: "APIError | None" = None,
    ) -> None:
        super().__init__(message, response=response)
        self.status_code = status_code
        self.error = error


class TonicPowDecodeError(TonicPowRequestError):
    """An error response body could not be decoded as an API error."""
