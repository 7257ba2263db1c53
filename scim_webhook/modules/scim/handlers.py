# scim_webhook/modules/scim/handlers.py

import logging
from abc import ABC, abstractmethod
from typing import Iterator, List

from scim_webhook.modules.scim.schemas import ScimUser

logger = logging.getLogger(__name__)


class ProvisioningHandler(ABC):
    """
    Consumer of validated user-creation events.

    Raising from user_created() fails the request with a 500 and stops any
    handlers registered after this one.
    """

    @abstractmethod
    async def user_created(self, user: ScimUser) -> None:
        ...


class LoggingProvisioningHandler(ProvisioningHandler):
    async def user_created(self, user: ScimUser) -> None:
        logger.info(
            "SCIM user created: externalId=%s email=%s",
            user.externalId,
            user.email,
        )


class HandlerRegistry:
    """
    Ordered set of provisioning handlers owned by the server.

    Handlers are registered before the listener starts; freeze() is called
    from the app lifespan and rejects later registrations.
    """

    def __init__(self) -> None:
        self._handlers: List[ProvisioningHandler] = []
        self._frozen = False

    def register(self, handler: ProvisioningHandler) -> None:
        if self._frozen:
            raise RuntimeError("Cannot register provisioning handlers after startup")
        self._handlers.append(handler)

    def freeze(self) -> None:
        self._frozen = True

    def __iter__(self) -> Iterator[ProvisioningHandler]:
        return iter(tuple(self._handlers))

    def __len__(self) -> int:
        return len(self._handlers)


handlers = HandlerRegistry()
