from datetime import datetime
from pydantic import BaseModel, ConfigDict
from app.db.models.enums import Preset, Plan, WorkspaceType
from app.schemas.cosmos import CosmosOut

class StudioOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    preset: Preset

class SubscriptionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    plan: Plan

class WorkspaceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    name: str
    type: WorkspaceType

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    external_id: str
    email: str
    firstname: str | None = None
    lastname: str | None = None
    image: str | None = None
    active_cosmos_id: str | None = None
    created_at: datetime | None = None
    cosmos: list[CosmosOut] = []
    active_cosmos: CosmosOut | None = None
    workspace: list[WorkspaceOut] = []
    subscription: SubscriptionOut | None = None
    studio: StudioOut | None = None

class AuthResult(BaseModel):
    # 200 existente, 201 creado, 400 sin registro, 403 sin sesión, 500 error
    status: int
    user: UserOut | None = None
