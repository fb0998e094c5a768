from datetime import datetime
from pydantic import BaseModel, ConfigDict

class CosmosOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    name: str
    description: str | None = None
    user_id: str
    created_at: datetime | None = None

class CosmosAccessData(BaseModel):
    cosmos: CosmosOut | None = None

class CosmosAccessResult(BaseModel):
    status: int
    data: CosmosAccessData | None = None
