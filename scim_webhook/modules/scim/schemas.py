# scim_webhook/modules/scim/schemas.py

from pydantic import BaseModel, ConfigDict
from typing import Literal


# -----------------------------
# SCIM INPUT MODELS
# -----------------------------
# Only the fields the endpoint relies on are typed. Everything else an IdP
# sends (schemas, emails, active, custom extensions, ...) is kept as extra
# attributes and handed to provisioning handlers untouched.

class ScimName(BaseModel):
    model_config = ConfigDict(extra="allow")
    formatted: str


class ScimMeta(BaseModel):
    model_config = ConfigDict(extra="allow")
    resourceType: Literal["User"]


class ScimUser(BaseModel):
    model_config = ConfigDict(extra="allow")
    externalId: str
    email: str
    name: ScimName
    meta: ScimMeta


# -----------------------------
# REQUEST CONTEXT
# -----------------------------

class RequestContext(BaseModel):
    """Per-request credentials taken from the query string. Never stored."""
    secret_token: str
    org_id: str
