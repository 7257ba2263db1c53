# scim_webhook/modules/orgs/schemas.py

from pydantic import BaseModel
from typing import Optional


class OrgScimConfig(BaseModel):
    secret: bytes


class Org(BaseModel):
    """
    Tenant organization as seen by the provisioning endpoint.
    scim is None when provisioning has not been enabled for the org.
    """
    org_id: str
    name: Optional[str] = None
    scim: Optional[OrgScimConfig] = None
