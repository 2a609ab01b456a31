"""
This module hosts the abstract base classes for the repositories.
They define the "contract" that every storage backend must adhere
to. The service layer only ever talks to these interfaces, so any
class implementing them is assumed to provide a persistent store.
"""

from abc import ABC, abstractmethod
from typing import Optional

from bikeshare.models import Bike, Rent, User


class UserRepo(ABC):
    """Stores the users, keyed by email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Adds a user to the store."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Gets the user with the given email, if there is one."""

    @abstractmethod
    async def delete(self, email: str) -> None:
        """Removes the user with the given email."""


class BikeRepo(ABC):
    """Stores the bikes, keyed by their generated id."""

    @abstractmethod
    async def save(self, bike: Bike) -> str:
        """
        Adds a bike to the store.

        :return: The id assigned to the bike. It is also set on the given bike.
        """

    @abstractmethod
    async def find_by_id(self, bike_id: str) -> Optional[Bike]:
        """Gets the bike with the given id, if there is one."""

    @abstractmethod
    async def update(self, bike: Bike) -> None:
        """Persists the availability and location of an existing bike."""


class RentRepo(ABC):
    """Stores the rents. Rents are never deleted."""

    @abstractmethod
    async def save(self, rent: Rent) -> None:
        """Adds a new rent to the store."""

    @abstractmethod
    async def find_open_by_bike_and_user(self, bike_id: str, email: str) -> Optional[Rent]:
        """Gets the open rent of the given bike by the given user."""

    @abstractmethod
    async def find_open_by_user(self, email: str) -> Optional[Rent]:
        """Gets an open rent held by the given user."""

    @abstractmethod
    async def update(self, rent: Rent) -> None:
        """Persists the end time and amount of an existing rent."""
