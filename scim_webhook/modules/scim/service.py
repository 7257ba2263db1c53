# scim_webhook/modules/scim/service.py

import logging

from starlette.datastructures import QueryParams
from starlette.requests import ClientDisconnect, Request

from scim_webhook.core.exceptions import (
    AuthenticationError,
    ClientInputError,
    InternalError,
)
from scim_webhook.core.security import decode_secret_token, secrets_match
from scim_webhook.modules.orgs.schemas import Org
from scim_webhook.modules.orgs.service import OrgService
from scim_webhook.modules.scim.handlers import HandlerRegistry
from scim_webhook.modules.scim.schemas import RequestContext, ScimUser
from scim_webhook.modules.scim.validator import (
    BODY_UNREADABLE,
    build_scim_user,
    parse_body,
)

logger = logging.getLogger(__name__)

MISSING_CONTEXT = "Empty SCIM Secret Token / Org Id"
SCIM_NOT_CONFIGURED = "SCIM has not been configured for this org."


class ScimService:
    """
    Inbound SCIM user provisioning.

    Pipeline per request, in this order:
    1. Extract token / org from the query string.
    2. Parse and validate the SCIM user body.
    3. Load the org and verify the secret token.
    4. Fan the user out to every registered provisioning handler.
    """

    def __init__(self, org_service: OrgService, registry: HandlerRegistry):
        self.org_service = org_service
        self.registry = registry

    # ---------------------------------------------------------
    # ENTRY POINT
    # ---------------------------------------------------------
    async def create_user(self, request: Request) -> ScimUser:
        ctx = self.extract_context(request.query_params)

        try:
            raw = await request.body()
        except ClientDisconnect:
            raise ClientInputError(BODY_UNREADABLE)

        user = build_scim_user(parse_body(raw))

        org = await self._load_org(ctx.org_id)
        self.verify_secret(org, ctx)
        await self.fan_out(user, ctx.org_id)

        logger.info("SCIM user provisioned (org=%s, externalId=%s)", ctx.org_id, user.externalId)
        return user

    # ---------------------------------------------------------
    # REQUEST CONTEXT
    # ---------------------------------------------------------
    @staticmethod
    def extract_context(query_params: QueryParams) -> RequestContext:
        # First occurrence wins when a key is repeated
        secret_token = next(iter(query_params.getlist("token")), "")
        org_id = next(iter(query_params.getlist("org")), "")

        if not secret_token or not org_id:
            raise ClientInputError(MISSING_CONTEXT)

        return RequestContext(secret_token=secret_token, org_id=org_id)

    # ---------------------------------------------------------
    # AUTH GATE
    # ---------------------------------------------------------
    async def _load_org(self, org_id: str) -> Org:
        # Missing org and storage failures both surface as a 500
        try:
            return await self.org_service.get_org(org_id)
        except Exception:
            logger.exception("SCIM org lookup failed (org=%s)", org_id)
            raise InternalError()

    def verify_secret(self, org: Org, ctx: RequestContext) -> None:
        if org.scim is None:
            logger.warning("SCIM request for org without SCIM config (org=%s)", ctx.org_id)
            raise ClientInputError(SCIM_NOT_CONFIGURED)

        provided = decode_secret_token(ctx.secret_token)
        if provided is None:
            logger.warning("SCIM token is not valid base64 (org=%s)", ctx.org_id)
            raise AuthenticationError()

        try:
            matched = secrets_match(org.scim.secret, provided)
        except Exception:
            logger.exception("SCIM secret comparison failed (org=%s)", ctx.org_id)
            raise InternalError()

        if not matched:
            logger.warning("SCIM secret mismatch (org=%s)", ctx.org_id)
            raise AuthenticationError()

    # ---------------------------------------------------------
    # HANDLER FANOUT
    # ---------------------------------------------------------
    async def fan_out(self, user: ScimUser, org_id: str) -> None:
        """
        Await each handler in registration order. The first failure stops
        the loop; handlers that already ran are not compensated.
        """
        for handler in self.registry:
            try:
                await handler.user_created(user)
            except Exception:
                logger.exception(
                    "Provisioning handler %s failed (org=%s, externalId=%s)",
                    type(handler).__name__,
                    org_id,
                    user.externalId,
                )
                raise InternalError()
