# scim_webhook/modules/orgs/repository.py

import base64
from typing import Optional

from asyncpg import Connection

from scim_webhook.core.encryption import decrypt_value, encrypt_value
from scim_webhook.modules.orgs.schemas import Org, OrgScimConfig


class OrgRepository:
    """
    Data access for organizations.

    Table: orgs
      - org_id TEXT PRIMARY KEY
      - name TEXT
      - scim_secret TEXT NULL   (Fernet-encrypted base64 of the secret bytes)
    """

    def __init__(self, conn: Connection):
        self.conn = conn

    async def get_by_id(self, org_id: str) -> Optional[Org]:
        row = await self.conn.fetchrow(
            """
            SELECT org_id, name, scim_secret
            FROM orgs
            WHERE org_id = $1
            """,
            org_id,
        )
        if not row:
            return None

        scim = None
        if row["scim_secret"]:
            scim = OrgScimConfig(secret=self._decrypt_secret(row["scim_secret"]))

        return Org(org_id=row["org_id"], name=row["name"], scim=scim)

    async def set_scim_secret(self, org_id: str, secret: bytes) -> None:
        """
        Operator helper (seed_db.py). Creates the org row if it is missing.
        """
        await self.conn.execute(
            """
            INSERT INTO orgs (org_id, scim_secret)
            VALUES ($1, $2)
            ON CONFLICT (org_id)
            DO UPDATE SET scim_secret = EXCLUDED.scim_secret
            """,
            org_id,
            self._encrypt_secret(secret),
        )

    # ------------------------------------------------------------------
    # SECRET ENCRYPTION HELPERS
    # ------------------------------------------------------------------
    def _encrypt_secret(self, secret: bytes) -> str:
        return encrypt_value(base64.b64encode(secret).decode("ascii"))

    def _decrypt_secret(self, stored: str) -> bytes:
        # InvalidToken propagates; an unreadable secret is a lookup failure
        return base64.b64decode(decrypt_value(stored))
