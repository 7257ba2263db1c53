# scim_webhook/modules/scim/validator.py

import json
from typing import Any, Optional

from scim_webhook.core.exceptions import ClientInputError
from scim_webhook.modules.scim.schemas import ScimUser

BODY_UNREADABLE = "Failed to read request body."
USER_MISSING_EXTERNAL_ID = "User must contain externalId"
USER_MISSING_EMAIL = "User must contain email"
USER_MISSING_NAME_FORMATTED = "User must contain name.formatted"
USER_WRONG_RESOURCE_TYPE = 'User meta.resourceType must be "User"'


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def parse_body(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors;
        # RecursionError comes from deeply nested arrays or objects
        raise ClientInputError(BODY_UNREADABLE)


def validate_scim_user(data: Any) -> Optional[str]:
    """
    Apply the required-field rules in order and return the message of the
    first one violated, or None when the user is acceptable.

    A body that is not a JSON object fails the first rule.
    """
    if not isinstance(data, dict):
        return USER_MISSING_EXTERNAL_ID

    if not _non_empty_str(data.get("externalId")):
        return USER_MISSING_EXTERNAL_ID

    if not _non_empty_str(data.get("email")):
        return USER_MISSING_EMAIL

    name = data.get("name")
    if not isinstance(name, dict) or not _non_empty_str(name.get("formatted")):
        return USER_MISSING_NAME_FORMATTED

    meta = data.get("meta")
    if not isinstance(meta, dict) or meta.get("resourceType") != "User":
        return USER_WRONG_RESOURCE_TYPE

    return None


def build_scim_user(data: Any) -> ScimUser:
    error = validate_scim_user(data)
    if error:
        raise ClientInputError(error)
    return ScimUser.model_validate(data)
