import logging
from fastapi import Header
from app.core.security import verify_session_token
from app.schemas.principal import Principal

logger = logging.getLogger(__name__)

async def current_principal(authorization: str | None = Header(default=None)) -> Principal | None:
    """Resuelve el usuario de la sesión; None significa "no autenticado"."""
    if not authorization or not authorization.lower().startswith("bearer "):
        return None
    token = authorization.split(" ", 1)[1].strip()
    try:
        claims = await verify_session_token(token)
        return Principal.from_claims(claims)
    except Exception as e:
        logger.warning("rejected session token: %r", e)
        return None
