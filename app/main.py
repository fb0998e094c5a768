import sys, asyncio
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.base import Base
from app.db import models  # noqa: F401  registra las tablas en Base.metadata
from app.db.session import engine

from app.routers import health
from app.routers import users as users_router
from app.routers import cosmos as cosmos_router

load_dotenv()
configure_logging()

if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

# Crear tablas si no existen (dev). En prod, usar migraciones.
@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_tables_on_startup:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield

app = FastAPI(title="Orion API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(health.router)
app.include_router(users_router.router)      # /users/me
app.include_router(cosmos_router.router)     # /cosmos/{cosmos_id}/access
