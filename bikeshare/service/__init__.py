"""
.. autoclasstree:: bikeshare.service

The service layer for the system. Acts as the internal API.
Each interface (REST API, command line) should use the
service layer to implement their logic.

The service layer implements the use cases for the system, such
that they may be reused by any program that needs to access it.
It is designed to represent the business logic.
"""

from .bike_share import BikeShare
from .credentials import CredentialVerifier, PlainCredentialVerifier
from .errors import BikeShareError, DuplicateUserError, UserNotFoundError, BikeNotFoundError, \
    UnavailableBikeError, RentNotFoundError, OpenRentError
