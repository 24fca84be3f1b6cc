"""Default HTTP transport configuration."""

import httpx

from tonicpow._version import __version__

DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_RETRY_COUNT = 2
DEFAULT_USER_AGENT = f"tonicpow-python/{__version__}"


def create_http_client(
    *,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
    retries: int = DEFAULT_RETRY_COUNT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> httpx.Client:
    """Create the default HTTP client used by TonicPowClient.

    Values are handed to httpx unchecked; httpx decides what it accepts.

    Args:
        timeout: Request timeout in seconds.
        retries: Connection retry count, handled by the httpx transport.
        user_agent: Default User-Agent header.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        transport=httpx.HTTPTransport(retries=retries),
        headers={"User-Agent": user_agent},
    )
