"""Pydantic models for request outcomes.

APIError mirrors the universal error body returned by the TonicPow API; its
field names are the wire names and must not change.
"""

from datetime import timedelta
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

ModelT = TypeVar("ModelT", bound=BaseModel)


class APIError(BaseModel):
    """Universal error response from the API.

    Populated only when a response status differs from the expected one.
    """

    code: int = 0
    data: str = ""
    ip_address: str = ""
    method: str = ""
    message: str = ""
    request_guid: str = ""
    url: str = ""

    @field_validator("code", mode="before")
    @classmethod
    def null_code_is_zero(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator(
        "data", "ip_address", "method", "message", "request_guid", "url", mode="before"
    )
    @classmethod
    def null_text_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class TraceInfo(BaseModel):
    """Timing details for a single request, recorded when tracing is enabled.

    Phases the transport did not go through (e.g. TLS over plain HTTP, or
    connecting on a reused connection) are left as None.
    """

    tcp_conn_time: timedelta | None = None
    tls_handshake: timedelta | None = None
    server_time: timedelta | None = None
    response_time: timedelta | None = None
    total_time: timedelta = timedelta(0)
    is_conn_reused: bool = False
    http_version: str = ""
    remote_addr: str | None = None


class StandardResponse(BaseModel):
    """Per-call result envelope.

    Fields:
        body: Raw response body.
        error: Decoded API error, set only on status mismatch.
        status_code: HTTP status code (0 when no response was received).
        tracing: Timing details, set only when tracing is enabled.
    """

    model_config = ConfigDict(frozen=True)

    body: bytes = b""
    error: APIError | None = None
    status_code: int = 0
    tracing: TraceInfo | None = None

    def parse_as(self, model_cls: type[ModelT]) -> ModelT:
        """Decode the JSON body into the given pydantic model.

        Raises:
            pydantic.ValidationError: If the body does not match the model.
        """
        return model_cls.model_validate_json(self.body)
