"""Shared fixtures for the SQLAlchemy store: an in-memory aiosqlite ``users`` table."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta

import pytest
from sqlalchemy import DateTime, Integer, String
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


class Base(DeclarativeBase):
    pass


class UserRow(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    status: Mapped[str] = mapped_column(String(20))
    age: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime)


def _seed() -> list[UserRow]:
    rows = [
        UserRow(
            id=i,
            name=f"active{i:02d}",
            email=f"active{i:02d}@example.com",
            status="active",
            age=20 + i,
            created_at=BASE_TIME + timedelta(days=i),
        )
        for i in range(1, 13)
    ]
    rows += [
        UserRow(
            id=100 + i,
            name=f"pending{i}",
            email=None,
            status="pending",
            age=40 + i,
            created_at=BASE_TIME - timedelta(days=i),
        )
        for i in range(1, 4)
    ]
    rows.append(
        UserRow(
            id=200,
            name="Johnny",
            email="johnny@example.org",
            status="banned",
            age=33,
            created_at=BASE_TIME,
        )
    )
    return rows


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    eng = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(eng, expire_on_commit=False)
    async with factory() as session:
        session.add_all(_seed())
        await session.commit()
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as sess:
        yield sess


@pytest.fixture
def user_model() -> type[UserRow]:
    return UserRow
