"""Schema Bootstrap: create tables directly on an engine, outside alembic.

Invariants:
    - Meant for local SQLite startup and test fixtures; production uses alembic
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from app.db.base import Base


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables known to Base.metadata."""
    import app.models  # noqa: F401  (populates Base.metadata)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
