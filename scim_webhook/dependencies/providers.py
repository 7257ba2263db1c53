# scim_webhook/dependencies/providers.py

from scim_webhook.core.database import db
from scim_webhook.modules.orgs.service import OrgService
from scim_webhook.modules.scim.handlers import HandlerRegistry, handlers


def get_org_service() -> OrgService:
    """
    Org lookup backed by the shared asyncpg pool.
    Tests override this through app.dependency_overrides.
    """
    return OrgService(db)


def get_handler_registry() -> HandlerRegistry:
    return handlers
