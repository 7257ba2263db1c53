import base64

from scim_webhook.modules.scim.handlers import ProvisioningHandler

ORG_ID = "org-acme"
ORG_SECRET = b"\x8f\x01acme-scim-secret\xfe\x7f+/="
ORG_TOKEN = base64.b64encode(ORG_SECRET).decode("ascii")


class RecordingHandler(ProvisioningHandler):
    """Appends (name, user) to a shared list; optionally fails afterwards."""

    def __init__(self, name, calls, error=None):
        self.name = name
        self.calls = calls
        self.error = error

    async def user_created(self, user):
        self.calls.append((self.name, user))
        if self.error is not None:
            raise self.error
