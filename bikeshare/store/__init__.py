"""
Handles all the persistence for the application.

The service only depends on the interfaces in :mod:`~bikeshare.store.ports`.
There are currently two implementations: in-memory and a relational
database through the tortoise ORM.
"""

from typing import Optional, Tuple

from .ports import UserRepo, BikeRepo, RentRepo
from .memory import MemoryUserRepo, MemoryBikeRepo, MemoryRentRepo
from .database import DatabaseUserRepo, DatabaseBikeRepo, DatabaseRentRepo

MEMORY_URI = "memory://"


def uses_memory(database_uri: Optional[str]) -> bool:
    return database_uri is None or database_uri == MEMORY_URI


def build_repositories(database_uri: Optional[str] = None) -> Tuple[UserRepo, BikeRepo, RentRepo]:
    """
    Picks the repositories for the given database uri.

    .. note:: The database repositories need the connection to be
        initialized with :func:`~bikeshare.store.database.init_database`.
    """
    if uses_memory(database_uri):
        return MemoryUserRepo(), MemoryBikeRepo(), MemoryRentRepo()
    return DatabaseUserRepo(), DatabaseBikeRepo(), DatabaseRentRepo()
