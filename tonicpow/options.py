"""Client settings and the override functions that build them.

A client starts from DEFAULT_SETTINGS and applies each override in order.
Every override returns a new snapshot, so later overrides win when two of
them touch the same field.

Example:
    client = TonicPowClient(
        with_api_key("your-api-key"),
        with_environment(STAGING_ENVIRONMENT),
        with_http_timeout(5.0),
    )
"""

from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tonicpow._internal.http import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_RETRY_COUNT,
    DEFAULT_USER_AGENT,
)
from tonicpow.environments import LIVE_ENVIRONMENT, Environment, environment_from_string


class ClientSettings(BaseModel):
    """Configuration snapshot owned by a TonicPowClient.

    Fields:
        api_key: API key sent on every request (required, non-empty).
        api_url: Base URL that endpoints are appended to.
        environment: Descriptive environment label.
        custom_headers: Read-only map of header name to ordered values.
        http_timeout: Request timeout in seconds.
        request_tracing: Record timing details for each request.
        retry_count: Connection retries performed by the default transport.
        user_agent: User-Agent header for all requests.
        debug: Print request details to stderr.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    api_url: str = LIVE_ENVIRONMENT.api_url
    environment: str = LIVE_ENVIRONMENT.name
    custom_headers: Mapping[str, tuple[str, ...]] = Field(
        default_factory=lambda: MappingProxyType({})
    )
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    request_tracing: bool = False
    retry_count: int = DEFAULT_RETRY_COUNT
    user_agent: str = DEFAULT_USER_AGENT
    debug: bool = False

    @field_validator("custom_headers", mode="after")
    @classmethod
    def headers_read_only(cls, v: Mapping[str, Sequence[str]]) -> Mapping[str, tuple[str, ...]]:
        return _freeze_headers(v)


def _freeze_headers(headers: Mapping[str, Sequence[str]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({key: tuple(values) for key, values in headers.items()})


DEFAULT_SETTINGS = ClientSettings()

ClientOps = Callable[[ClientSettings], ClientSettings]


def _set(**fields: object) -> ClientOps:
    def apply(settings: ClientSettings) -> ClientSettings:
        return settings.model_copy(update=fields)

    return apply


def with_api_key(api_key: str) -> ClientOps:
    """Set the API key."""
    return _set(api_key=api_key)


def with_environment(environment: Environment) -> ClientOps:
    """Use the base URL of a named environment."""
    return _set(api_url=environment.api_url, environment=environment.name)


def with_environment_string(value: str) -> ClientOps:
    """Select an environment by name or alias; unknown values mean live."""
    return with_environment(environment_from_string(value))


def with_api_url(api_url: str, name: str = "custom") -> ClientOps:
    """Use a fully custom base URL, e.g. a self-hosted API instance."""
    return _set(api_url=api_url, environment=name)


def with_http_timeout(timeout: float) -> ClientOps:
    """Set the request timeout in seconds. Default is 10 seconds.

    The value goes to httpx unchanged; httpx treats 0 as an immediate timeout,
    not as "no timeout", and gives negative values its own meaning.
    """
    return _set(http_timeout=timeout)


def with_request_tracing() -> ClientOps:
    """Enable request tracing. Disabled by default."""
    return _set(request_tracing=True)


def with_retry_count(retries: int) -> ClientOps:
    """Set the retry count of the default transport. Default is 2."""
    return _set(retry_count=retries)


def with_user_agent(user_agent: str) -> ClientOps:
    """Replace the default user agent."""
    return _set(user_agent=user_agent)


def with_custom_headers(headers: Mapping[str, Sequence[str]]) -> ClientOps:
    """Replace the custom headers sent on every request.

    The given mapping replaces any headers set by an earlier override. Custom
    headers take precedence over every header the client computes itself.
    """
    return _set(custom_headers=_freeze_headers(headers))


def with_debugging() -> ClientOps:
    """Print request details to stderr (secrets redacted)."""
    return _set(debug=True)


def build_settings(*options: ClientOps) -> ClientSettings:
    """Apply overrides in order on top of DEFAULT_SETTINGS."""
    settings = DEFAULT_SETTINGS
    for option in options:
        settings = option(settings)
    return settings
