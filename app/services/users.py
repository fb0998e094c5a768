import logging
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import User
from app.db.session import atomic
from app.schemas.principal import Principal
from app.schemas.user import AuthResult, UserOut
from app.services.bootstrap import seed_default_graph

logger = logging.getLogger(__name__)

USER_RELATIONS = (
    selectinload(User.cosmos),
    selectinload(User.active_cosmos),
    selectinload(User.workspace),
    selectinload(User.subscription),
    selectinload(User.studio),
)

async def find_user(session: AsyncSession, external_id: str) -> User | None:
    q = await session.execute(
        select(User)
        .where(User.external_id == external_id)
        .options(*USER_RELATIONS)
        .execution_options(populate_existing=True)
    )
    return q.scalar_one_or_none()

async def authenticate_or_create_user(session: AsyncSession, principal: Principal | None) -> AuthResult:
    if principal is None:
        return AuthResult(status=403)

    try:
        existing = await find_user(session, principal.external_id)
        if existing:
            return AuthResult(status=200, user=UserOut.model_validate(existing))

        async with atomic(session):
            seeded = await seed_default_graph(session, principal)
        logger.info("seeded default cosmos %s for user %s", seeded.cosmos_id, seeded.user_id)

        # los objetos del seed quedan con columnas server_default expiradas
        session.expunge_all()
        created = await find_user(session, principal.external_id)
        if created:
            return AuthResult(status=201, user=UserOut.model_validate(created))
        return AuthResult(status=400)
    except Exception:
        logger.exception("authenticate_or_create_user failed for %s", principal.external_id)
        await session.rollback()
        return AuthResult(status=500)
