# scim_webhook/main.py

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from scim_webhook.core.config import settings
from scim_webhook.core.database import db
from scim_webhook.core.exceptions import ScimError
from scim_webhook.modules.scim.handlers import LoggingProvisioningHandler, handlers
from scim_webhook.modules.scim.router import router as scim_router

logger = logging.getLogger("uvicorn")


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application startup/shutdown lifecycle.
    - Freeze the provisioning handler registry
    - Connect DB pool (org lookups)
    """
    logger.info("Starting SCIM server on port %s", settings.PORT)
    handlers.freeze()
    logger.info("%d provisioning handler(s) registered.", len(handlers))

    if not await db.ping():
        # Requests will answer 500 until the database is reachable
        logger.warning("Database not reachable at startup; org lookups will fail.")
    yield
    logger.info("Shutting down SCIM server...")
    await db.disconnect()


async def scim_error_handler(request: Request, exc: ScimError) -> PlainTextResponse:
    return PlainTextResponse(exc.detail or "", status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    # Framework-raised 404/405 (methods the router does not list) carry no body
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return PlainTextResponse("", status_code=exc.status_code)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


# Every non-POST path answers 405, so the docs endpoints are disabled.
app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.add_exception_handler(ScimError, scim_error_handler)
app.add_exception_handler(StarletteHTTPException, http_error_handler)

# SCIM endpoints live at the root: POST /Users
app.include_router(scim_router)


def run() -> None:
    """Console entry point: scim-webhook"""
    configure_logging()
    handlers.register(LoggingProvisioningHandler())
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
