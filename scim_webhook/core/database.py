# scim_webhook/core/database.py

import asyncpg
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from scim_webhook.core.config import settings


class Database:
    """
    Central asyncpg connection pool wrapper.

    - connect() / disconnect() manage the pool lifecycle.
    - acquire() yields a pooled connection (org lookups are read-only).
    - ping() is used by startup checks.
    """

    def __init__(self) -> None:
        self.pool: Optional[asyncpg.Pool] = None

    async def connect(self) -> None:
        if self.pool is not None:
            return

        self.pool = await asyncpg.create_pool(
            host=settings.DATABASE_HOST,
            port=settings.DATABASE_PORT,
            user=settings.DATABASE_USER,
            password=settings.DATABASE_PASSWORD,
            database=settings.DATABASE_NAME,
            min_size=settings.DATABASE_POOL_MIN_SIZE,
            max_size=settings.DATABASE_POOL_SIZE,
        )

    async def disconnect(self) -> None:
        if self.pool is not None:
            await self.pool.close()
            self.pool = None

    async def ping(self) -> bool:
        """
        Returns True if the database responds to a simple query.
        """
        try:
            if self.pool is None:
                await self.connect()
            async with self.pool.acquire() as conn:
                await conn.execute("SELECT 1")
            return True
        except Exception:
            return False

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[asyncpg.Connection]:
        if self.pool is None:
            await self.connect()

        async with self.pool.acquire() as conn:
            yield conn


db = Database()
