# scim_webhook/modules/scim/router.py

from fastapi import APIRouter, Depends, Request, Response, status

from scim_webhook.core.exceptions import RoutingError
from scim_webhook.dependencies import get_handler_registry, get_org_service
from scim_webhook.modules.orgs.service import OrgService
from scim_webhook.modules.scim.handlers import HandlerRegistry
from scim_webhook.modules.scim.service import ScimService

router = APIRouter(tags=["SCIM"])

NON_POST_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_scim_service(
    org_service: OrgService = Depends(get_org_service),
    registry: HandlerRegistry = Depends(get_handler_registry),
) -> ScimService:
    return ScimService(org_service, registry)


@router.post("/Users", response_class=Response)
async def scim_create_user(
    request: Request,
    service: ScimService = Depends(get_scim_service),
):
    """
    SCIM User creation webhook.

    The IdP calls POST /Users?token=<base64 secret>&org=<org id> with a
    SCIM User resource as the JSON body.
    """
    await service.create_user(request)
    return Response(status_code=status.HTTP_200_OK)


# Only POST /Users exists. Registered after it, so these only catch the rest.

@router.post("/{path:path}", include_in_schema=False)
async def scim_unknown_path(path: str):
    raise RoutingError(status.HTTP_404_NOT_FOUND)


@router.api_route("/{path:path}", methods=NON_POST_METHODS, include_in_schema=False)
async def scim_method_not_allowed(path: str):
    raise RoutingError(status.HTTP_405_METHOD_NOT_ALLOWED)
