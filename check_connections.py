import asyncio
import logging
import sys

import asyncpg
from scim_webhook.core.config import settings

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("connection_check")

MAX_RETRIES = 30
RETRY_INTERVAL = 2  # seconds


async def check_postgres():
    """Attempt to connect to PostgreSQL and confirm the orgs table is readable."""
    dsn = settings.DATABASE_URL
    for attempt in range(1, MAX_RETRIES + 1):
        try:
            logger.info(f"Checking PostgreSQL connection (Attempt {attempt}/{MAX_RETRIES})...")
            conn = await asyncpg.connect(dsn)
            try:
                await conn.fetchval("SELECT count(*) FROM orgs")
            finally:
                await conn.close()
            logger.info("✅ PostgreSQL is ready!")
            return True
        except asyncpg.UndefinedTableError:
            logger.error("❌ Table 'orgs' does not exist. Run seed_db.py first.")
            return False
        except Exception as e:
            logger.warning(f"⚠️ PostgreSQL not ready yet: {e}")
            await asyncio.sleep(RETRY_INTERVAL)
    return False


async def main():
    if await check_postgres():
        logger.info("🚀 Database is UP. Starting SCIM server...")
        sys.exit(0)
    else:
        logger.error("❌ Database failed to come up. Aborting.")
        sys.exit(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Connection check cancelled.")
        sys.exit(1)
