import pytest
from unittest.mock import AsyncMock, patch

from scim_webhook.main import app, lifespan
from scim_webhook.modules.scim.handlers import HandlerRegistry, LoggingProvisioningHandler


@pytest.mark.asyncio
async def test_lifespan_freezes_registry_and_manages_pool():
    registry = HandlerRegistry()

    with patch("scim_webhook.main.handlers", registry), \
            patch("scim_webhook.core.database.db.ping", new_callable=AsyncMock) as mock_ping, \
            patch("scim_webhook.core.database.db.disconnect", new_callable=AsyncMock) as mock_disconnect:
        mock_ping.return_value = True

        async with lifespan(app):
            with pytest.raises(RuntimeError):
                registry.register(LoggingProvisioningHandler())

        mock_ping.assert_awaited_once()
        mock_disconnect.assert_awaited_once()


@pytest.mark.asyncio
async def test_lifespan_tolerates_unreachable_database():
    with patch("scim_webhook.main.handlers", HandlerRegistry()), \
            patch("scim_webhook.core.database.db.ping", new_callable=AsyncMock) as mock_ping, \
            patch("scim_webhook.core.database.db.disconnect", new_callable=AsyncMock):
        mock_ping.return_value = False

        async with lifespan(app):
            pass
