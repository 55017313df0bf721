"""Schema creation for development, tests and ``tillbook db init``."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from tillbook.infrastructure.persistence.sqlalchemy.models import Base
from tillbook_auth.persistence.sqlalchemy import AuthBase

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.run_sync(AuthBase.metadata.create_all)
    logger.info("Database tables created")

