"""Test configuration for database unit tests.

This module provides common fixtures for testing the database layer with
in-memory SQLite.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

import fivimedia_llc.core.database.entities  # noqa: F401
from fivimedia_llc.core.database.base import Base
from fivimedia_llc.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async_session = sessionmaker(
        bind=in_memory_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def repos(in_memory_session: AsyncSession) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=in_memory_session)
