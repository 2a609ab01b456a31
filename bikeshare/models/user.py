"""
User
---------------------------
"""
from attr import dataclass


@dataclass
class User:
    """
    Represents a User in the system.

    Users are identified by their email.
    """

    name: str
    email: str
    password: str

    def __str__(self):
        return f"{self.name} ({self.email})"
