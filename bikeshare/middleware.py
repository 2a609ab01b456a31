"""
Middleware
----------
"""
from http import HTTPStatus

from aiohttp import web
from aiohttp.abc import Request
from aiohttp.web_middlewares import middleware

from bikeshare import logger
from bikeshare.serializer import JSendStatus, JSendSchema
from bikeshare.service.errors import BikeShareError, UserNotFoundError, BikeNotFoundError, RentNotFoundError, \
    DuplicateUserError, UnavailableBikeError, OpenRentError

response_schema = JSendSchema()

error_statuses = {
    UserNotFoundError: HTTPStatus.NOT_FOUND,
    BikeNotFoundError: HTTPStatus.NOT_FOUND,
    RentNotFoundError: HTTPStatus.NOT_FOUND,
    DuplicateUserError: HTTPStatus.CONFLICT,
    UnavailableBikeError: HTTPStatus.CONFLICT,
    OpenRentError: HTTPStatus.CONFLICT,
}
"""Maps the errors raised by the service to the status they are reported with."""


@middleware
async def service_error_middleware(request: Request, handler):
    """
    Turns the errors raised by the service layer into JSend failures,
    naming the kind of error so that clients need not parse the message.
    """
    try:
        return await handler(request)
    except BikeShareError as error:
        status = error_statuses.get(type(error), HTTPStatus.BAD_REQUEST)
        logger.debug("%s %s failed with %s", request.method, request.rel_url, type(error).__name__)
        return web.json_response(response_schema.dump({
            "status": JSendStatus.FAIL,
            "data": {
                "message": str(error),
                "error": type(error).__name__
            }
        }), status=status)
