"""
.. autoclasstree:: bikeshare.views

This package contains the API for registering users and bikes,
and for renting and returning bikes.

API Conventions
---------------

The API is ordered in terms of resources (nouns such as bike) and
accepts and returns JSON with snake_case key naming.

API Expected Responses
----------------------

The server responds with JSend formatted JSON to all GET, POST, PUT and PATCH requests.
DELETE requests respond with a 204 no content.
"""

from aiohttp.web import Application

from bikeshare import logger
from .bikes import BikesView, BikeView, BikeLocationView, BikeRentalsView, BikeReturnView
from .users import UsersView, UserView, UserAuthenticationView

views = [
    BikesView, BikeView, BikeLocationView, BikeRentalsView, BikeReturnView,
    UsersView, UserView, UserAuthenticationView,
]


def register_views(app: Application, base: str):
    """
    Registers all the API views onto the given router at a specific root url.

    :param app: The app to register the views to.
    :param base: The base URL.
    """
    for view in views:
        logger.info("Registered %s at %s", view.__name__, base + view.url)
        view.register_route(app, base)
