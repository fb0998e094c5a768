import time

import pytest
from jose import jwt

from app.core import security
from app.core.config import settings
from app.middlewares.auth import current_principal
from app.schemas.principal import Principal

SECRET = "test-secret"
ISSUER = "https://clerk.test"


@pytest.fixture
def hs256_settings(monkeypatch):
    monkeypatch.setattr(settings, "clerk_jwt_secret", SECRET)
    monkeypatch.setattr(settings, "clerk_issuer", ISSUER)
    monkeypatch.setattr(settings, "clerk_audience", None)


def _token(claims: dict, secret: str = SECRET) -> str:
    base = {"iss": ISSUER, "iat": int(time.time()), "exp": int(time.time()) + 300}
    return jwt.encode({**base, **claims}, secret, algorithm="HS256")


def test_principal_from_flat_claims():
    p = Principal.from_claims({
        "sub": "user_1",
        "email": "ada@example.com",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "image_url": "https://img/ada.png",
    })
    assert p == Principal(
        external_id="user_1",
        email="ada@example.com",
        first_name="Ada",
        last_name="Lovelace",
        image_url="https://img/ada.png",
    )


def test_principal_from_email_addresses_and_oidc_names():
    p = Principal.from_claims({
        "sub": "user_2",
        "email_addresses": [{"email_address": "grace@example.com"}, {"email_address": "alt@example.com"}],
        "given_name": "Grace",
        "family_name": "Hopper",
        "picture": "https://img/grace.png",
    })
    assert p.email == "grace@example.com"
    assert (p.first_name, p.last_name, p.image_url) == ("Grace", "Hopper", "https://img/grace.png")


@pytest.mark.asyncio
@pytest.mark.parametrize("header", [None, "", "Basic abc", "Token xyz"])
async def test_missing_or_non_bearer_header_is_unauthenticated(header):
    assert await current_principal(authorization=header) is None


@pytest.mark.asyncio
async def test_valid_hs256_token_resolves_principal(hs256_settings):
    token = _token({"sub": "user_3", "email": "linus@example.com", "first_name": "Linus"})

    p = await current_principal(authorization=f"Bearer {token}")

    assert p.external_id == "user_3"
    assert p.email == "linus@example.com"
    assert p.first_name == "Linus"


@pytest.mark.asyncio
async def test_bad_signature_is_unauthenticated(hs256_settings):
    token = _token({"sub": "user_3"}, secret="someone-else")
    assert await current_principal(authorization=f"Bearer {token}") is None


@pytest.mark.asyncio
async def test_expired_token_is_unauthenticated(hs256_settings):
    token = _token({"sub": "user_3", "exp": int(time.time()) - 10})
    assert await current_principal(authorization=f"Bearer {token}") is None


@pytest.mark.asyncio
async def test_wrong_issuer_is_unauthenticated(hs256_settings):
    token = _token({"sub": "user_3", "iss": "https://evil.test"})
    assert await current_principal(authorization=f"Bearer {token}") is None


@pytest.mark.asyncio
async def test_audience_is_checked_when_configured(hs256_settings, monkeypatch):
    monkeypatch.setattr(settings, "clerk_audience", "orion")

    good = _token({"sub": "user_4", "aud": "orion"})
    bad = _token({"sub": "user_4", "aud": "other"})

    assert (await current_principal(authorization=f"Bearer {good}")).external_id == "user_4"
    assert await current_principal(authorization=f"Bearer {bad}") is None


@pytest.mark.asyncio
async def test_rs_token_with_unknown_kid_is_rejected(monkeypatch):
    async def fake_jwks():
        return {"keys": [{"kid": "known", "alg": "RS256"}]}

    monkeypatch.setattr(security, "get_jwks", fake_jwks)
    monkeypatch.setattr(security.jwt, "get_unverified_header", lambda token: {"alg": "RS256", "kid": "unknown"})

    with pytest.raises(ValueError, match="JWKS key not found"):
        await security.verify_session_token("header.payload.sig")


@pytest.mark.asyncio
async def test_hs256_without_secret_is_rejected(monkeypatch):
    monkeypatch.setattr(settings, "clerk_jwt_secret", "")
    token = _token({"sub": "user_5"})

    with pytest.raises(ValueError, match="CLERK_JWT_SECRET"):
        await security.verify_session_token(token)
