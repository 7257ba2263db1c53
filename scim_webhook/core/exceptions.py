# scim_webhook/core/exceptions.py

"""
Error taxonomy for the provisioning endpoint.

Every error maps to one HTTP status and a plain-text body; see
scim_error_handler() in scim_webhook.main.
"""

from fastapi import HTTPException, status


class ScimError(HTTPException):
    def __init__(self, detail: str = "", status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class ClientInputError(ScimError):
    def __init__(self, detail: str):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)


class AuthenticationError(ScimError):
    def __init__(self, detail: str = "Invalid Request."):
        super().__init__(detail=detail, status_code=status.HTTP_401_UNAUTHORIZED)


class RoutingError(ScimError):
    """404 / 405. Always rendered with an empty body."""

    def __init__(self, status_code: int = status.HTTP_404_NOT_FOUND):
        super().__init__(detail="", status_code=status_code)


class InternalError(ScimError):
    def __init__(self):
        super().__init__(
            detail="Unexpected Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
