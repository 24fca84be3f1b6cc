"""TonicPow API client.

Example:
    from tonicpow import TonicPowClient, with_api_key, with_environment_string
    from tonicpow.models import User

    client = TonicPowClient(with_api_key("your-api-key"), with_environment_string("staging"))
    response = client.request("POST", "users", User(email="a@b.com"), expected_status_code=201)
    user = response.parse_as(User)
"""

import json
import os
import sys
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from tonicpow._internal.http import create_http_client
from tonicpow._internal.redaction import redact_headers, redact_payload
from tonicpow._internal.tracing import RequestTracer
from tonicpow.exceptions import (
    TonicPowAPIError,
    TonicPowConfigError,
    TonicPowDecodeError,
    TonicPowSerializationError,
    TonicPowTransportError,
    TonicPowValidationError,
)
from tonicpow.models.response import APIError, StandardResponse
from tonicpow.options import (
    ClientOps,
    ClientSettings,
    build_settings,
    with_api_key,
    with_debugging,
    with_environment_string,
    with_http_timeout,
    with_request_tracing,
    with_retry_count,
)

API_KEY_HEADER = "api_key"
SESSION_COOKIE = "session_token"
VISITOR_SESSION_FIELD = "tncpw_session"

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})
BODYLESS_METHODS = frozenset({"GET", "DELETE"})


def encode_payload(data: Any) -> bytes:
    """Serialize a request payload to compact JSON.

    Pydantic models are dumped without unset (None) fields. None itself
    encodes to the literal ``null``.

    Raises:
        TonicPowSerializationError: If the payload is not JSON encodable.
    """
    try:
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(
            data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        ).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise TonicPowSerializationError(f"failed to encode request payload: {e}") from e


class TonicPowClient:
    """Client for the TonicPow API.

    Settings are fixed at construction; build a new client to change them.
    A constructed client holds no per-call state and can be shared between
    threads.
    """

    def __init__(self, *options: ClientOps, http_client: httpx.Client | None = None) -> None:
        """Build a client from ordered overrides.

        Args:
            *options: Override functions applied in order on top of the defaults.
            http_client: Optional httpx client to use instead of the default one.
                Timeout and retry settings are not applied to it.

        Raises:
            TonicPowConfigError: If no API key was configured.
        """
        settings = build_settings(*options)
        if not settings.api_key:
            raise TonicPowConfigError("missing an API Key")

        self._settings = settings
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = create_http_client(
                timeout=settings.http_timeout,
                retries=settings.retry_count,
                user_agent=settings.user_agent,
            )
        self._http_client = http_client

    @classmethod
    def from_env(cls) -> "TonicPowClient":
        """Create a client from environment variables.

        Required environment variables:
            TONICPOW_API_KEY: The API key.

        Optional environment variables:
            TONICPOW_ENVIRONMENT: Environment name or alias (default: live).
            TONICPOW_HTTP_TIMEOUT: Request timeout in seconds.
            TONICPOW_RETRY_COUNT: Retry count of the default transport.
            TONICPOW_REQUEST_TRACING: Set to "1" to enable request tracing.
            TONICPOW_DEBUG: Set to "1" to enable debug output.

        Raises:
            TonicPowConfigError: If TONICPOW_API_KEY is missing or empty.
            ValueError: If a numeric variable is malformed.
        """
        options: list[ClientOps] = [
            with_api_key(os.environ.get("TONICPOW_API_KEY", "")),
            with_environment_string(os.environ.get("TONICPOW_ENVIRONMENT", "")),
        ]

        timeout = os.environ.get("TONICPOW_HTTP_TIMEOUT")
        if timeout is not None:
            options.append(with_http_timeout(float(timeout)))
        retries = os.environ.get("TONICPOW_RETRY_COUNT")
        if retries is not None:
            options.append(with_retry_count(int(retries)))
        if os.environ.get("TONICPOW_REQUEST_TRACING", "") == "1":
            options.append(with_request_tracing())
        if os.environ.get("TONICPOW_DEBUG", "") == "1":
            options.append(with_debugging())

        return cls(*options)

    def __enter__(self) -> "TonicPowClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def settings(self) -> ClientSettings:
        """The settings snapshot this client was built with."""
        return self._settings

    @property
    def http_client(self) -> httpx.Client:
        return self._http_client

    def get_user_agent(self) -> str:
        return self._settings.user_agent

    def get_environment(self) -> str:
        return self._settings.environment

    def with_custom_http_client(self, http_client: httpx.Client) -> "TonicPowClient":
        """Replace the HTTP client and return this client.

        Call this before sharing the client between threads. A default HTTP
        client created by this TonicPowClient is closed when replaced.
        """
        if self._owns_http_client:
            self._http_client.close()
        self._http_client = http_client
        self._owns_http_client = False
        return self

    def close(self) -> None:
        """Close the HTTP client if this TonicPowClient created it."""
        if self._owns_http_client:
            self._http_client.close()

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._settings.debug:
            print(f"[tonicpow] {message}", file=sys.stderr)

    def _build_headers(self, content: bytes | None) -> httpx.Headers:
        settings = self._settings
        headers = httpx.Headers({"User-Agent": settings.user_agent})
        if content is not None:
            headers["Content-Length"] = str(len(content))
            headers["Content-Type"] = "application/json"
        headers[API_KEY_HEADER] = settings.api_key

        # Custom headers replace computed ones; the last value of a list wins
        for key, values in settings.custom_headers.items():
            for value in values:
                headers[key] = value
        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        expected_status_code: int = 0,
    ) -> StandardResponse:
        """Send a request to the API.

        Args:
            method: GET, POST, PUT or DELETE.
            endpoint: Path appended verbatim to the configured base URL.
            data: Payload for POST/PUT, ignored for GET/DELETE. None is sent
                as ``null``.
            expected_status_code: If greater than zero, any other status is
                treated as an API error.

        Returns:
            The response envelope.

        Raises:
            TonicPowValidationError: Unsupported HTTP method.
            TonicPowSerializationError: Payload could not be encoded.
            TonicPowTransportError: The request could not be completed.
            TonicPowAPIError: Status differed from expected_status_code.
            TonicPowDecodeError: Status differed and the body was not an API error.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise TonicPowValidationError(f"unsupported HTTP method: {method}")

        content: bytes | None = None
        if method not in BODYLESS_METHODS:
            content = encode_payload(data)

        headers = self._build_headers(content)
        tracer = RequestTracer() if self._settings.request_tracing else None
        extensions = {"trace": tracer} if tracer is not None else None
        url = self._settings.api_url + endpoint

        self._log_debug(f"{method} {url} headers={redact_headers(headers)}")
        if content is not None and self._settings.debug:
            self._log_debug(f"payload={redact_payload(json.loads(content))}")

        try:
            http_response = self._http_client.request(
                method,
                url,
                content=content,
                headers=headers,
                extensions=extensions,
            )
        except httpx.HTTPError as e:
            self._log_debug(f"{method} {url} failed: {e}")
            raise TonicPowTransportError(str(e), response=StandardResponse()) from e

        tracing = tracer.trace_info(http_response) if tracer is not None else None
        response = StandardResponse(
            body=http_response.content,
            status_code=http_response.status_code,
            tracing=tracing,
        )
        self._log_debug(f"{method} {url} -> {response.status_code}")

        if expected_status_code > 0 and response.status_code != expected_status_code:
            try:
                api_error = APIError.model_validate_json(response.body)
            except ValidationError as e:
                self._log_debug(f"could not decode error body: {e}")
                raise TonicPowDecodeError(
                    f"failed to decode error response ({response.status_code}): {e}",
                    response=response,
                ) from e

            response = StandardResponse(
                body=response.body,
                error=api_error,
                status_code=response.status_code,
                tracing=response.tracing,
            )
            raise TonicPowAPIError(
                api_error.message,
                status_code=response.status_code,
                response=response,
                error=api_error,
            )

        return response


def get_client() -> TonicPowClient:
    """Get a TonicPowClient configured from environment variables.

    Raises:
        TonicPowConfigError: If TONICPOW_API_KEY is not set.
    """
    return TonicPowClient.from_env()
