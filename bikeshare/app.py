"""
App
-----
"""

from typing import Optional

from aiohttp import web

from bikeshare import logger
from bikeshare.config import api_root
from bikeshare.middleware import service_error_middleware
from bikeshare.service import BikeShare
from bikeshare.signals import register_signals, database_uri_key
from bikeshare.store import build_repositories
from bikeshare.version import __version__, name
from bikeshare.views import register_views
from bikeshare.views.base import bike_share_key


def build_app(database_uri: Optional[str] = None) -> web.Application:
    """Sets up the app, storing records in memory unless given a database uri."""
    logger.info("Building %s %s", name, __version__)
    app = web.Application(middlewares=[service_error_middleware])

    app[database_uri_key] = database_uri
    app[bike_share_key] = BikeShare(*build_repositories(database_uri))

    register_signals(app)
    register_views(app, api_root)

    return app
