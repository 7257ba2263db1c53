# scim_webhook/dependencies/__init__.py

from .providers import get_handler_registry, get_org_service

__all__ = [
    "get_handler_registry",
    "get_org_service",
]
