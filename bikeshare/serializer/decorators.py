"""
Decorators
----------

Decorators that handle the JSON going in and out of the views.
:func:`expects` validates the request body against a schema before
the view runs, and :func:`returns` dumps whatever the view returns
through a schema, so views deal in plain dictionaries and models.
"""

from functools import wraps
from http import HTTPStatus
from json import JSONDecodeError
from typing import Optional

from aiohttp import web
from aiohttp.web_urldispatcher import View
from marshmallow import Schema, ValidationError

from bikeshare.serializer.jsend import JSendSchema, JSendStatus

response_schema = JSendSchema()


def _fail(message: str, **extra) -> web.Response:
    """A JSend failure reporting a bad request."""
    return web.json_response(response_schema.dump({
        "status": JSendStatus.FAIL,
        "data": {"message": message, **extra}
    }), status=HTTPStatus.BAD_REQUEST)


def expects(schema: Optional[Schema], into="data"):
    """
    Loads the JSON body of the request with the given schema and
    stores the result on the request under ``into``.

    .. code:: python

        @expects(LocationSchema())
        async def put(self):
            location = self.request["data"]

    Requests that are not JSON, that do not parse, or that do not
    validate are answered with a 400 before the view runs.

    :param schema: The schema to load the body with, or ``None`` to accept anything.
    :param into: The key to store the loaded data in.
    :raises TypeError: If the schema is not a :class:`~marshmallow.Schema`.
    """
    if schema is None:
        return lambda view: view

    if not isinstance(schema, Schema):
        raise TypeError(f"Expected a Schema, not {type(schema)}")

    def decorator(view_function):

        @wraps(view_function)
        async def wrapper(self: View, **kwargs):
            request = self.request

            if not request.body_exists or request.content_type != "application/json":
                return _fail(f"This route ({request.method}: {request.rel_url}) only accepts JSON.")

            try:
                body = await request.json()
            except JSONDecodeError as error:
                return _fail("Could not parse supplied JSON.", errors=[error.msg])

            try:
                request[into] = schema.load(body)
            except ValidationError as error:
                return _fail("The request did not validate properly.", errors=error.messages)

            return await view_function(self, **kwargs)

        return wrapper

    return decorator


def returns(schema: Schema, return_code: HTTPStatus = HTTPStatus.OK):
    """
    Dumps the data returned by the view with the given schema
    and sends it as JSON with the given status.

    .. code:: python

        @returns(JSendSchema.of(bike=BikeSchema()), HTTPStatus.CREATED)
        async def post(self):
            return {"status": JSendStatus.SUCCESS, "data": {"bike": bike}}

    :param schema: The schema to dump the returned data with.
    :param return_code: The status to respond with.
    """

    def decorator(view_function):

        @wraps(view_function)
        async def wrapper(self: View, **kwargs):
            response_data = await view_function(self, **kwargs)
            return web.json_response(schema.dump(response_data), status=return_code)

        return wrapper

    return decorator
