"""
User Related Views
-------------------------

Handles registering, fetching, authenticating and removing users.
"""
from http import HTTPStatus

from aiohttp import web
from marshmallow.fields import Boolean

from bikeshare.models import User
from bikeshare.serializer import JSendSchema, JSendStatus, expects, returns
from bikeshare.serializer.misc import AuthenticationSchema
from bikeshare.serializer.models import UserSchema
from bikeshare.views.base import BaseView


class UsersView(BaseView):
    """
    Adds to the list of users.
    """
    url = "/users"
    name = "users"

    @expects(UserSchema())
    @returns(JSendSchema.of(user=UserSchema()), HTTPStatus.CREATED)
    async def post(self):
        user = User(**self.request["data"])
        await self.bike_share.register_user(user)
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"user": user}
        }


class UserView(BaseView):
    """
    Gets or deletes a single user.
    """
    url = "/users/{email}"
    name = "user"

    @expects(None)
    @returns(JSendSchema.of(user=UserSchema()))
    async def get(self):
        user = await self.bike_share.find_user(self.request.match_info["email"])
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"user": user}
        }

    async def delete(self):
        await self.bike_share.remove_user(self.request.match_info["email"])
        raise web.HTTPNoContent


class UserAuthenticationView(BaseView):
    """
    Checks the password of a user.
    """
    url = "/users/{email}/authenticate"
    name = "user_authenticate"

    @expects(AuthenticationSchema())
    @returns(JSendSchema.of(authenticated=Boolean()))
    async def post(self):
        authenticated = await self.bike_share.authenticate(
            self.request.match_info["email"], self.request["data"]["password"]
        )
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"authenticated": authenticated}
        }
