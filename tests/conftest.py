"""Shared fixtures: a throwaway SQLite database per test and a sample principal."""

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.db.base import Base
from app.db import models  # noqa: F401
from app.schemas.principal import Principal


@pytest_asyncio.fixture
async def engine(tmp_path):
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'orion.db'}")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
def principal() -> Principal:
    return Principal(
        external_id="user_2ada",
        email="ada@example.com",
        first_name="Ada",
        last_name="Lovelace",
        image_url="https://img.example.com/ada.png",
    )


@pytest.fixture
def other_principal() -> Principal:
    return Principal(external_id="user_2bob", email="bob@example.com", first_name="Bob")


async def count_rows(session: AsyncSession, model) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar_one()
