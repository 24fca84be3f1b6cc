"""TonicPow SDK for Python.

This SDK provides typed access to the TonicPow API.

Public API:
    TonicPowClient - Configured client with the generic request() method
    with_* functions - Configuration overrides passed to TonicPowClient
    tonicpow.models - Response envelope, API error and resource models
"""

from tonicpow._version import __version__
from tonicpow.client import (
    API_KEY_HEADER,
    SESSION_COOKIE,
    VISITOR_SESSION_FIELD,
    TonicPowClient,
    get_client,
)
from tonicpow.environments import (
    API_VERSION,
    DEVELOPMENT_ENVIRONMENT,
    LIVE_ENVIRONMENT,
    STAGING_ENVIRONMENT,
    Environment,
    environment_from_string,
)
from tonicpow.exceptions import (
    TonicPowAPIError,
    TonicPowConfigError,
    TonicPowDecodeError,
    TonicPowError,
    TonicPowRequestError,
    TonicPowSerializationError,
    TonicPowTransportError,
    TonicPowValidationError,
)
from tonicpow.options import (
    DEFAULT_SETTINGS,
    ClientOps,
    ClientSettings,
    with_api_key,
    with_api_url,
    with_custom_headers,
    with_debugging,
    with_environment,
    with_environment_string,
    with_http_timeout,
    with_request_tracing,
    with_retry_count,
    with_user_agent,
)

__all__ = [
    "__version__",
    "TonicPowClient",
    "get_client",
    "API_KEY_HEADER",
    "SESSION_COOKIE",
    "VISITOR_SESSION_FIELD",
    "API_VERSION",
    "Environment",
    "LIVE_ENVIRONMENT",
    "STAGING_ENVIRONMENT",
    "DEVELOPMENT_ENVIRONMENT",
    "environment_from_string",
    "ClientOps",
    "ClientSettings",
    "DEFAULT_SETTINGS",
    "with_api_key",
    "with_api_url",
    "with_custom_headers",
    "with_debugging",
    "with_environment",
    "with_environment_string",
    "with_http_timeout",
    "with_request_tracing",
    "with_retry_count",
    "with_user_agent",
    "TonicPowError",
    "TonicPowConfigError",
    "TonicPowValidationError",
    "TonicPowRequestError",
    "TonicPowSerializationError",
    "TonicPowTransportError",
    "TonicPowAPIError",
    "TonicPowDecodeError",
]
