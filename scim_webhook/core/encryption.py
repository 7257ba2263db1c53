# scim_webhook/core/encryption.py

from cryptography.fernet import Fernet

from scim_webhook.core.config import settings

fernet = Fernet(settings.FIELD_ENCRYPTION_KEY.encode())


def encrypt_value(value: str) -> str:
    if not value:
        return value
    return fernet.encrypt(value.encode()).decode()


def decrypt_value(value: str) -> str:
    if not value:
        return value
    return fernet.decrypt(value.encode()).decode()
