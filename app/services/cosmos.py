import logging
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Cosmos, CosmosMember, User
from app.schemas.cosmos import CosmosAccessData, CosmosAccessResult, CosmosOut
from app.schemas.principal import Principal

logger = logging.getLogger(__name__)

def accessible_cosmos_query(cosmos_id: str, external_id: str):
    # dueño, o alguno de los miembros es el usuario actual
    return select(Cosmos).where(
        Cosmos.id == cosmos_id,
        or_(
            Cosmos.user.has(User.external_id == external_id),
            Cosmos.members.any(CosmosMember.user.has(User.external_id == external_id)),
        ),
    )

async def verify_access_to_cosmos(
    session: AsyncSession, principal: Principal | None, cosmos_id: str
) -> CosmosAccessResult:
    if principal is None:
        return CosmosAccessResult(status=403)

    try:
        q = await session.execute(accessible_cosmos_query(cosmos_id, principal.external_id))
        cosmos = q.scalar_one_or_none()
    except Exception as e:
        logger.warning("cosmos access check failed for %s: %r", cosmos_id, e)
        return CosmosAccessResult(status=403, data=CosmosAccessData(cosmos=None))

    return CosmosAccessResult(
        status=200,
        data=CosmosAccessData(cosmos=CosmosOut.model_validate(cosmos) if cosmos else None),
    )
