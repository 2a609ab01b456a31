from marshmallow import Schema
from marshmallow.fields import Email, String


class AuthenticationSchema(Schema):
    """The schema of the authentication request."""
    password = String(required=True)


class RentalRequestSchema(Schema):
    """The schema of the requests to rent and return a bike."""
    email = Email(required=True)
