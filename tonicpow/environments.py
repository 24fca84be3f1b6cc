"""TonicPow API environments."""

from pydantic import BaseModel, ConfigDict

API_VERSION = "v1"


class Environment(BaseModel):
    """A named API environment and its base URL."""

    model_config = ConfigDict(frozen=True)

    name: str
    alias: str
    api_url: str


LIVE_ENVIRONMENT = Environment(
    name="live",
    alias="production",
    api_url=f"https://api.tonicpow.com/{API_VERSION}/",
)
STAGING_ENVIRONMENT = Environment(
    name="staging",
    alias="beta",
    api_url=f"https://apistaging.tonicpow.com/{API_VERSION}/",
)
DEVELOPMENT_ENVIRONMENT = Environment(
    name="development",
    alias="local",
    api_url=f"http://localhost:3000/{API_VERSION}/",
)


def environment_from_string(value: str) -> Environment:
    """Resolve an environment by name or alias.

    Matching ignores case and surrounding whitespace. Unrecognized values
    resolve to the live environment.
    """
    value = value.strip().lower()
    for environment in (STAGING_ENVIRONMENT, DEVELOPMENT_ENVIRONMENT):
        if value in (environment.name, environment.alias):
            return environment
    return LIVE_ENVIRONMENT
