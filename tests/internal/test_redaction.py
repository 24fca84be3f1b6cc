"""Tests for redaction logic."""

import httpx

from tonicpow._internal.redaction import REDACTED_VALUE, redact_headers, redact_payload


class TestRedactPayload:
    """Tests for redact_payload function."""

    def test_redacts_password(self):
        """Should redact password fields of a user payload."""
        payload = {"email": "a@b.com", "password": "secret", "password_confirm": "secret"}
        result = redact_payload(payload)
        assert result["password"] == REDACTED_VALUE
        assert result["password_confirm"] == REDACTED_VALUE
        assert result["email"] == "a@b.com"

    def test_redacts_case_insensitive(self):
        """Should match sensitive keys regardless of case."""
        result = redact_payload({"API_KEY": "key1", "Token": "tok"})
        assert result["API_KEY"] == REDACTED_VALUE
        assert result["Token"] == REDACTED_VALUE

    def test_redacts_nested_dicts_and_lists(self):
        """Should redact sensitive keys at any depth."""
        payload = {
            "session": {"tncpw_session": "abc", "campaign_id": 3},
            "users": [{"id": 1, "new_password": "p1"}, {"id": 2}],
        }
        result = redact_payload(payload)
        assert result["session"] == {"tncpw_session": REDACTED_VALUE, "campaign_id": 3}
        assert result["users"] == [{"id": 1, "new_password": REDACTED_VALUE}, {"id": 2}]

    def test_does_not_mutate_original(self):
        """Should leave the input untouched."""
        payload = {"api_key": "key1", "nested": {"token": "tok"}}
        redact_payload(payload)
        assert payload == {"api_key": "key1", "nested": {"token": "tok"}}

    def test_scalars_pass_through(self):
        assert redact_payload(None) is None
        assert redact_payload("text") == "text"
        assert redact_payload(5) == 5


class TestRedactHeaders:
    """Tests for redact_headers function."""

    def test_redacts_api_key_and_cookie(self):
        headers = httpx.Headers({
            "api_key": "secret",
            "Cookie": "session_token=abc",
            "User-Agent": "tonicpow-python/0.1.0",
        })
        result = redact_headers(headers)
        assert result["api_key"] == REDACTED_VALUE
        assert result["cookie"] == REDACTED_VALUE
        assert result["user-agent"] == "tonicpow-python/0.1.0"

    def test_returns_plain_dict(self):
        result = redact_headers({"Authorization": "Bearer x", "Accept": "*/*"})
        assert result == {"Authorization": REDACTED_VALUE, "Accept": "*/*"}
