import os

# Settings require a Fernet key; tests use a throwaway one
os.environ.setdefault("FIELD_ENCRYPTION_KEY", "dGVzdC1vbmx5LWZlcm5ldC1rZXktMzItYnl0ZXMhIT0=")

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, Mock
from httpx import AsyncClient, ASGITransport

from scim_webhook.main import app
from scim_webhook.dependencies import get_handler_registry, get_org_service
from scim_webhook.modules.orgs.schemas import Org, OrgScimConfig
from scim_webhook.modules.scim.handlers import HandlerRegistry

from tests.helpers import ORG_ID, ORG_SECRET, ORG_TOKEN


@pytest.fixture
def scim_org():
    return Org(org_id=ORG_ID, name="Acme", scim=OrgScimConfig(secret=ORG_SECRET))


@pytest.fixture
def org_service(scim_org):
    svc = Mock()
    svc.get_org = AsyncMock(return_value=scim_org)
    return svc


@pytest.fixture
def registry():
    return HandlerRegistry()


@pytest.fixture
def scim_user_payload():
    return {
        "schemas": ["urn:ietf:params:scim:schemas:core:2.0:User"],
        "externalId": "00u1abcd",
        "email": "jane.doe@acme.com",
        "userName": "jane.doe@acme.com",
        "name": {
            "formatted": "Jane Doe",
            "givenName": "Jane",
            "familyName": "Doe",
        },
        "emails": [{"value": "jane.doe@acme.com", "primary": True}],
        "active": True,
        "meta": {"resourceType": "User"},
    }


@pytest.fixture
def scim_params():
    return {"token": ORG_TOKEN, "org": ORG_ID}


# API Client
@pytest_asyncio.fixture(scope="function")
async def async_client(org_service, registry):
    app.dependency_overrides[get_org_service] = lambda: org_service
    app.dependency_overrides[get_handler_registry] = lambda: registry

    try:
        async with AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://test"
        ) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
