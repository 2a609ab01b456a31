"""
Errors
------

The failures the service layer reports to its callers. Every
predictable failure has its own type so that callers branch on
the kind of error rather than on its message.
"""


class BikeShareError(Exception):
    """The base class for all the errors raised by the service."""


class DuplicateUserError(BikeShareError):
    """Raised when registering a user with an email that is already in use."""

    def __init__(self, email):
        super().__init__(f"A user with the email {email} already exists.")
        self.email = email


class UserNotFoundError(BikeShareError):

    def __init__(self, email):
        super().__init__(f"There is no user with the email {email}.")
        self.email = email


class BikeNotFoundError(BikeShareError):

    def __init__(self, bike_id):
        super().__init__(f"There is no bike with the id {bike_id}.")
        self.bike_id = bike_id


class UnavailableBikeError(BikeShareError):
    """Raised when trying to rent a bike that is currently rented."""

    def __init__(self, bike_id):
        super().__init__(f"The bike {bike_id} is not available.")
        self.bike_id = bike_id


class RentNotFoundError(BikeShareError):
    """Raised when returning a bike that the user has no open rent for."""

    def __init__(self, bike_id, email):
        super().__init__(f"The user {email} has no open rent for the bike {bike_id}.")
        self.bike_id = bike_id
        self.email = email


class OpenRentError(BikeShareError):
    """Raised when a user tries to do an operation that requires no open rent."""

    def __init__(self, email):
        super().__init__(f"The user {email} has an open rent.")
        self.email = email
