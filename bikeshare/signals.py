"""
Signals
-------

Defines the signals that the aiohttp server uses to set up
and tear down the storage behind the service.

Each signal must accept an the ``app`` argument.
"""
from typing import Optional

from aiohttp.web import AppKey, Application

from bikeshare import logger
from bikeshare.store import uses_memory
from bikeshare.store.database import init_database, close_database

database_uri_key = AppKey("database_uri", Optional[str])


async def initialize_database(app: Application):
    """Initializes and generates the schema for our database."""
    logger.info("Connecting to the database")
    await init_database(app[database_uri_key])


async def close_database_connections(app: Application):
    """Closes the open database connections."""
    await close_database()


def register_signals(app: Application):
    """Registers all the signals at the appropriate hooks."""
    if not uses_memory(app[database_uri_key]):
        app.on_startup.append(initialize_database)
        app.on_cleanup.append(close_database_connections)
