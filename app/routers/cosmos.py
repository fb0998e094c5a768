from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_session
from app.middlewares.auth import current_principal
from app.schemas.cosmos import CosmosAccessResult
from app.schemas.principal import Principal
from app.services.cosmos import verify_access_to_cosmos

router = APIRouter(prefix="/cosmos", tags=["cosmos"])

@router.get("/{cosmos_id}/access", response_model=CosmosAccessResult)
async def cosmos_access_route(
    cosmos_id: str,
    principal: Principal | None = Depends(current_principal),
    session: AsyncSession = Depends(get_session),
):
    result = await verify_access_to_cosmos(session, principal, cosmos_id)
    return JSONResponse(status_code=result.status, content=result.model_dump(mode="json"))
