# tests/unit/test_handlers.py

import logging

import pytest

from scim_webhook.modules.scim.handlers import (
    HandlerRegistry,
    LoggingProvisioningHandler,
    ProvisioningHandler,
)
from scim_webhook.modules.scim.validator import build_scim_user


def test_registry_preserves_registration_order():
    registry = HandlerRegistry()
    a, b = LoggingProvisioningHandler(), LoggingProvisioningHandler()
    registry.register(a)
    registry.register(b)

    assert list(registry) == [a, b]
    assert len(registry) == 2


def test_registry_rejects_registration_after_freeze():
    registry = HandlerRegistry()
    registry.register(LoggingProvisioningHandler())
    registry.freeze()

    with pytest.raises(RuntimeError):
        registry.register(LoggingProvisioningHandler())

    assert len(registry) == 1


def test_provisioning_handler_is_abstract():
    with pytest.raises(TypeError):
        ProvisioningHandler()


@pytest.mark.asyncio
async def test_logging_handler_logs_created_user(scim_user_payload, caplog):
    user = build_scim_user(scim_user_payload)

    with caplog.at_level(logging.INFO, logger="scim_webhook.modules.scim.handlers"):
        await LoggingProvisioningHandler().user_created(user)

    assert "externalId=00u1abcd" in caplog.text
