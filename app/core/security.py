import time, httpx
from jose import jwt
from functools import lru_cache
from app.core.config import settings

@lru_cache(maxsize=1)
def _jwks_cached():
    # Cachea JWKS ~5 min por proceso (solo llaves, nunca el usuario)
    return {"jwks": None, "ts": 0}

async def get_jwks():
    cache = _jwks_cached()
    if not cache["jwks"] or time.time() - cache["ts"] > 300:
        async with httpx.AsyncClient(timeout=5) as client:
            r = await client.get(settings.clerk_jwks_url)
            r.raise_for_status()
            cache["jwks"] = r.json()
            cache["ts"] = time.time()
    return cache["jwks"]

def _decode_options() -> dict:
    kwargs = {"issuer": settings.clerk_issuer or None}
    if settings.clerk_audience:
        kwargs["audience"] = settings.clerk_audience
    else:
        # los session tokens de Clerk no traen "aud" por defecto
        kwargs["options"] = {"verify_aud": False}
    return kwargs

async def verify_session_token(token: str) -> dict:
    header = jwt.get_unverified_header(token)
    algorithm = header.get("alg", "")

    if algorithm == "HS256":
        # Token firmado con HMAC - usar el secreto compartido
        if not settings.clerk_jwt_secret:
            raise ValueError("HS256 token but no CLERK_JWT_SECRET configured")
        return jwt.decode(token, settings.clerk_jwt_secret, algorithms=["HS256"], **_decode_options())

    if algorithm.startswith("RS"):
        # Token firmado con RSA - usar JWKS
        jwks = await get_jwks()
        key = next((k for k in jwks["keys"] if k["kid"] == header.get("kid")), None)
        if not key:
            raise ValueError("JWKS key not found")
        return jwt.decode(token, key, algorithms=[key.get("alg", algorithm)], **_decode_options())

    raise ValueError(f"Unsupported algorithm: {algorithm}")
