import argparse
import asyncio
import secrets
from urllib.parse import urlencode

import asyncpg
from scim_webhook.core.config import settings
from scim_webhook.core.security import encode_secret_token
from scim_webhook.modules.orgs.repository import OrgRepository

ORGS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS orgs (
    org_id      TEXT PRIMARY KEY,
    name        TEXT,
    scim_secret TEXT
)
"""


async def enable_scim(org_id: str, secret_bytes: int):
    print(f"🌱 Enabling SCIM for org '{org_id}' at {settings.DATABASE_HOST}...")

    conn = await asyncpg.connect(settings.DATABASE_URL)
    try:
        await conn.execute(ORGS_TABLE_SQL)

        secret = secrets.token_bytes(secret_bytes)
        await OrgRepository(conn).set_scim_secret(org_id, secret)

        print("✅ SCIM secret stored (encrypted).")
        query = urlencode({"token": encode_secret_token(secret), "org": org_id})
        print("Configure the identity provider to POST users to:")
        print(f"    /Users?{query}")
    finally:
        await conn.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Enable SCIM provisioning for an org.")
    parser.add_argument("org_id")
    parser.add_argument("--secret-bytes", type=int, default=32)
    args = parser.parse_args()

    asyncio.run(enable_scim(args.org_id, args.secret_bytes))
