from __future__ import annotations

from datetime import timedelta

import pytest

from tenderdesk.auth.jwt import create_access_token, decode_jwt, encode_jwt
from tenderdesk.core.dependencies import extract_bearer_token, get_current_actor
from tenderdesk.core.exceptions import AuthenticationError


class _Settings:
    SESSION_SECRET = "test-secret"
    DEFAULT_ACTOR_ID = 7


def test_access_token_roundtrip_contains_subject():
    token = create_access_token(user_id=10, secret="test-secret")
    claims = decode_jwt(token, secret="test-secret")
    assert claims["sub"] == "10"
    assert claims["token_use"] == "access"
    assert "exp" in claims
    assert "jti" in claims


def test_tampered_signature_rejected():
    token = create_access_token(user_id=10, secret="test-secret")
    with pytest.raises(AuthenticationError, match="signature"):
        decode_jwt(token, secret="other-secret")


def test_expired_token_rejected():
    token = encode_jwt({"sub": "3"}, secret="test-secret", ttl=timedelta(seconds=-5))
    with pytest.raises(AuthenticationError, match="expired"):
        decode_jwt(token, secret="test-secret")


def test_actor_falls_back_to_default_without_token():
    actor = get_current_actor(token=None, settings=_Settings())
    assert actor.user_id == 7
    assert actor.authenticated is False


def test_actor_resolved_from_token():
    token = create_access_token(user_id=42, secret="test-secret")
    actor = get_current_actor(token=token, settings=_Settings())
    assert actor.user_id == 42
    assert actor.authenticated is True


def test_bearer_header_parsing():
    assert extract_bearer_token(None) is None
    assert extract_bearer_token("  ") is None
    assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"
    with pytest.raises(AuthenticationError):
        extract_bearer_token("Basic dXNlcjpwdw==")
