# scim_webhook/modules/orgs/service.py

from scim_webhook.core.database import Database, db
from scim_webhook.modules.orgs.repository import OrgRepository
from scim_webhook.modules.orgs.schemas import Org


class OrgNotFoundError(LookupError):
    def __init__(self, org_id: str):
        super().__init__(f"Org not found: {org_id}")
        self.org_id = org_id


class OrgService:
    """
    Read-only organization lookup used by the SCIM auth gate.

    A connection is only acquired when get_org() is awaited, so requests
    rejected earlier in the pipeline never touch the pool.
    """

    def __init__(self, database: Database = db):
        self.database = database

    async def get_org(self, org_id: str) -> Org:
        async with self.database.acquire() as conn:
            org = await OrgRepository(conn).get_by_id(org_id)

        if org is None:
            raise OrgNotFoundError(org_id)
        return org
