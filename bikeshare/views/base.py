"""
Base
------------------------

The base view for the API. This view contains functionality
required in all other views.
"""

from typing import Optional

from aiohttp.web import AppKey, Application, View, AbstractRoute

from bikeshare.service import BikeShare

bike_share_key = AppKey("bike_share", BikeShare)
"""The key the service is stored under on the app."""


class ViewConfigurationError(Exception):
    """
    Raised if the view doesn't provide a URL.
    """


class BaseView(View):
    """
    The base view that all other views extend. Gives each
    view access to the service it implements its logic with.
    """

    url: str
    name: Optional[str]
    route: AbstractRoute

    @property
    def bike_share(self) -> BikeShare:
        return self.request.app[bike_share_key]

    @classmethod
    def register_route(cls, app: Application, base: Optional[str] = None):
        """
        Registers the view with the given router.

        :raises ViewConfigurationError: If the URL hasn't been set on the given view.
        """
        try:
            url = base + cls.url if base is not None else cls.url
        except AttributeError:
            raise ViewConfigurationError("No URL provided!")

        kwargs = {}
        name = getattr(cls, "name", None)
        if name is not None:
            kwargs["name"] = name

        cls.route = app.router.add_view(url, cls, **kwargs)
