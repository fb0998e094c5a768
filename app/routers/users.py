from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_session
from app.middlewares.auth import current_principal
from app.schemas.principal import Principal
from app.schemas.user import AuthResult
from app.services.users import authenticate_or_create_user

router = APIRouter(prefix="/users", tags=["users"])

@router.get("/me", response_model=AuthResult)
async def me_route(
    principal: Principal | None = Depends(current_principal),
    session: AsyncSession = Depends(get_session),
):
    # primer login: crea usuario + cosmos por defecto
    result = await authenticate_or_create_user(session, principal)
    return JSONResponse(status_code=result.status, content=result.model_dump(mode="json"))
