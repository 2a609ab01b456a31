"""
Bike Related Views
-------------------------

Handles registering and moving bikes, along with renting them
out and taking them back. It is most logical that a rental is
handled on a bike resource: it resembles picking a bike off the
rack and putting it back.
"""
from http import HTTPStatus

from marshmallow.fields import Float

from bikeshare.models import Bike
from bikeshare.serializer import JSendSchema, JSendStatus, expects, returns
from bikeshare.serializer.misc import RentalRequestSchema
from bikeshare.serializer.models import BikeSchema, LocationSchema, RentSchema
from bikeshare.views.base import BaseView


class BikesView(BaseView):
    """
    Adds to the list of bikes.
    """
    url = "/bikes"
    name = "bikes"

    @expects(BikeSchema())
    @returns(JSendSchema.of(bike=BikeSchema()), HTTPStatus.CREATED)
    async def post(self):
        bike = Bike(**self.request["data"])
        await self.bike_share.register_bike(bike)
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"bike": bike}
        }


class BikeView(BaseView):
    """
    Gets a single bike.
    """
    url = "/bikes/{id}"
    name = "bike"

    @returns(JSendSchema.of(bike=BikeSchema()))
    async def get(self):
        bike = await self.bike_share.find_bike(self.request.match_info["id"])
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"bike": bike}
        }


class BikeLocationView(BaseView):
    """
    Places a bike at a new location.
    """
    url = "/bikes/{id}/location"
    name = "bike_location"

    @expects(LocationSchema())
    @returns(JSendSchema.of(bike=BikeSchema()))
    async def put(self):
        bike = await self.bike_share.move_bike_to(self.request.match_info["id"], self.request["data"])
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"bike": bike}
        }


class BikeRentalsView(BaseView):
    """
    Starts a new rental on a bike.
    """
    url = "/bikes/{id}/rentals"
    name = "bike_rentals"

    @expects(RentalRequestSchema())
    @returns(JSendSchema.of(rental=RentSchema()), HTTPStatus.CREATED)
    async def post(self):
        rent = await self.bike_share.rent_bike(self.request.match_info["id"], self.request["data"]["email"])
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"rental": rent}
        }


class BikeReturnView(BaseView):
    """
    Ends the current rental on a bike, billing the user.
    """
    url = "/bikes/{id}/rentals/return"
    name = "bike_return"

    @expects(RentalRequestSchema())
    @returns(JSendSchema.of(amount=Float()))
    async def patch(self):
        amount = await self.bike_share.return_bike(self.request.match_info["id"], self.request["data"]["email"])
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"amount": amount}
        }
