"""
Credentials
-----------

Strategies to check a supplied password against the stored credential.
"""
import hmac
from abc import ABC, abstractmethod


class CredentialVerifier(ABC):

    @abstractmethod
    def verify(self, supplied: str, stored: str) -> bool:
        """Checks whether the supplied password matches the stored credential."""


class PlainCredentialVerifier(CredentialVerifier):
    """
    Compares the password with the stored credential as is.
    """

    def verify(self, supplied: str, stored: str) -> bool:
        return hmac.compare_digest(supplied.encode(), stored.encode())
