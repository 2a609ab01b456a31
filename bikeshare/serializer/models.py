"""
Model Serializers
-----------------

Defines serializers for the various models in the system.
"""

from marshmallow import Schema, post_load
from marshmallow.fields import Integer, Boolean, String, Email, Nested, DateTime, Float, List
from marshmallow.validate import Range, Length

from bikeshare.models import Location


class UserSchema(Schema):
    """The schema corresponding to the :class:`~bikeshare.models.user.User` model."""

    name = String(required=True, validate=Length(min=1))
    email = Email(required=True)
    password = String(required=True, load_only=True)


class LocationSchema(Schema):
    latitude = Float(required=True, validate=Range(min=-90, max=90))
    longitude = Float(required=True, validate=Range(min=-180, max=180))

    @post_load
    def make_location(self, data, **kwargs):
        return Location(**data)


class BikeSchema(Schema):
    """The schema corresponding to the :class:`~bikeshare.models.bike.Bike` model."""

    id = String(dump_only=True)
    name = String(required=True)
    type = String(required=True)
    body_size = Integer(required=True)
    max_load = Integer(required=True)
    rate = Float(required=True, validate=Range(min=0))
    description = String()
    ratings = Integer()
    image_urls = List(String())
    available = Boolean(dump_only=True)
    location = Nested(LocationSchema())


class RentSchema(Schema):
    """The schema corresponding to the :class:`~bikeshare.models.rent.Rent` model."""

    bike_id = String(attribute="bike.id", dump_only=True)
    user_email = Email(attribute="user.email", dump_only=True)
    start = DateTime(dump_only=True)
    end = DateTime(dump_only=True, allow_none=True)
    amount = Float(dump_only=True, allow_none=True)
    is_open = Boolean(dump_only=True)
