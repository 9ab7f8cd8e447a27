import asyncio

import httpx
import pytest
from jose import jwt

from jobboard.config import ConfigFactory, Environment
from jobboard.services.auth_service import AuthService, extract_candidate_id, require_candidate_id
from jobboard.utils.error_handling import AuthenticationError


@pytest.fixture
def auth_service():
    return AuthService(ConfigFactory.create_config(Environment.TESTING))


def _token(config, **claims):
    return jwt.encode(claims, config.SECRET_KEY, algorithm=config.ALGORITHM)


@pytest.mark.parametrize(
    "payload,expected",
    [
        ({"user_id": "a", "sub": "b"}, "a"),
        ({"userId": "c"}, "c"),
        ({"sub": "d"}, "d"),
        ({"user": {"userId": "e"}}, "e"),
        ({"role": "candidate"}, None),
    ],
)
def test_extract_candidate_id(payload, expected):
    assert extract_candidate_id(payload) == expected


def test_require_candidate_id_rejects_anonymous_payload():
    with pytest.raises(AuthenticationError):
        require_candidate_id({"role": "candidate"})


def test_local_decode(auth_service):
    token = _token(auth_service.config, sub="cand-1")
    assert auth_service.decode_token(token)["sub"] == "cand-1"


def test_local_decode_rejects_bad_signature(auth_service):
    token = jwt.encode({"sub": "x"}, "another-secret", algorithm="HS256")
    with pytest.raises(AuthenticationError):
        auth_service.decode_token(token)


def test_falls_back_to_local_decode_when_service_unreachable(auth_service, monkeypatch):
    async def unreachable(self, url, **kwargs):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(httpx.AsyncClient, "post", unreachable)
    token = _token(auth_service.config, user_id="cand-9")

    payload = asyncio.run(auth_service.validate_token(token))

    assert payload["user_id"] == "cand-9"


def test_rejected_token_is_not_decoded_locally(auth_service, monkeypatch):
    async def rejected(self, url, **kwargs):
        return httpx.Response(401, request=httpx.Request("POST", url))

    monkeypatch.setattr(httpx.AsyncClient, "post", rejected)
    token = _token(auth_service.config, user_id="cand-9")

    with pytest.raises(AuthenticationError):
        asyncio.run(auth_service.validate_token(token))
