"""
Provides a relational implementation of the repositories on top
of the tortoise ORM. The connection is set up with
:func:`~bikeshare.store.database.init_database` before the repositories
are used.
"""

from tortoise import Tortoise, connections

from .store import DatabaseUserRepo, DatabaseBikeRepo, DatabaseRentRepo

MODELS_MODULE = "bikeshare.store.database.models"


async def init_database(database_uri: str, generate_schemas=True):
    """Initializes the connection and, if requested, generates the schema for our database."""
    await Tortoise.init(
        db_url=database_uri,
        modules={'models': [MODELS_MODULE]}
    )
    if generate_schemas:
        await Tortoise.generate_schemas(safe=True)


async def close_database():
    """Closes the open database connections."""
    await connections.close_all()
