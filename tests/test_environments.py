"""Tests for API environments."""

import pytest

from tonicpow.environments import (
    DEVELOPMENT_ENVIRONMENT,
    LIVE_ENVIRONMENT,
    STAGING_ENVIRONMENT,
    environment_from_string,
)


class TestEnvironmentConstants:
    """Tests for the named environments."""

    def test_live(self):
        assert LIVE_ENVIRONMENT.name == "live"
        assert LIVE_ENVIRONMENT.api_url == "https://api.tonicpow.com/v1/"

    def test_staging(self):
        assert STAGING_ENVIRONMENT.name == "staging"
        assert STAGING_ENVIRONMENT.api_url == "https://apistaging.tonicpow.com/v1/"

    def test_development(self):
        assert DEVELOPMENT_ENVIRONMENT.name == "development"
        assert DEVELOPMENT_ENVIRONMENT.api_url == "http://localhost:3000/v1/"

    def test_urls_end_with_version_segment(self):
        """Every base URL should end with the version segment."""
        for environment in (LIVE_ENVIRONMENT, STAGING_ENVIRONMENT, DEVELOPMENT_ENVIRONMENT):
            assert environment.api_url.endswith("/v1/")


class TestEnvironmentFromString:
    """Tests for environment_from_string()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("staging", STAGING_ENVIRONMENT),
            ("beta", STAGING_ENVIRONMENT),
            ("STAGING", STAGING_ENVIRONMENT),
            ("  Beta  ", STAGING_ENVIRONMENT),
            ("development", DEVELOPMENT_ENVIRONMENT),
            ("local", DEVELOPMENT_ENVIRONMENT),
            ("\tLOCAL\n", DEVELOPMENT_ENVIRONMENT),
            ("live", LIVE_ENVIRONMENT),
            ("production", LIVE_ENVIRONMENT),
            ("Production ", LIVE_ENVIRONMENT),
        ],
    )
    def test_known_names_and_aliases(self, value, expected):
        """Should match names and aliases ignoring case and whitespace."""
        assert environment_from_string(value) == expected

    @pytest.mark.parametrize("value", ["", "   ", "prod", "test", "staging-2"])
    def test_unknown_defaults_to_live(self, value):
        """Should fall back to live for anything unrecognized."""
        assert environment_from_string(value) == LIVE_ENVIRONMENT
