# catalog/api/auth/password.py
"""
Credential verification. Users carry no stored password yet; login accepts a
single shared secret. Swap SharedSecretVerifier for a hashing verifier without
touching the resolvers.
"""
import hmac
from typing import Optional

from catalog.api import settings


class CredentialVerifier:
    def verify(self, user, password: str) -> bool:
        raise NotImplementedError


class SharedSecretVerifier(CredentialVerifier):
    def __init__(self, secret: Optional[str] = None):
        self.secret = secret if secret is not None else settings.LOGIN_SECRET

    def verify(self, user, password):
        if not isinstance(password, str):
            return False
        return hmac.compare_digest(password.encode("utf-8"), self.secret.encode("utf-8"))


def verify_password(user, password, verifier: Optional[CredentialVerifier] = None) -> bool:
    verifier = verifier or SharedSecretVerifier()
    return verifier.verify(user, password)
