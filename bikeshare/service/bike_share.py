"""
Bike Share
----------

This module is what handles the users, the bikes and the rents in the system.

Responsibilities
================

- registering, finding, authenticating and removing users
- registering and moving bikes
- renting bikes out and taking them back
- billing the returned rents

Every operation checks all of its preconditions before changing anything,
and reports failures with the errors in :mod:`bikeshare.service.errors`.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from bikeshare import logger
from bikeshare.models import Bike, Location, Rent, User
from bikeshare.pricing import get_price
from bikeshare.service.credentials import CredentialVerifier, PlainCredentialVerifier
from bikeshare.service.errors import BikeNotFoundError, DuplicateUserError, OpenRentError, RentNotFoundError, \
    UnavailableBikeError, UserNotFoundError
from bikeshare.service.locks import KeyedLock
from bikeshare.store.ports import BikeRepo, RentRepo, UserRepo


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BikeShare:
    """
    Handles the lifecycle of the users, bikes and rents in the system.

    The state lives in the repositories; the only thing kept here are
    the locks that stop two operations on the same bike or user from
    interleaving. Rent and return take the bike lock before the user lock.
    """

    def __init__(self, user_repo: UserRepo, bike_repo: BikeRepo, rent_repo: RentRepo, *,
                 clock: Callable[[], datetime] = utc_now,
                 credential_verifier: Optional[CredentialVerifier] = None):
        self.user_repo = user_repo
        self.bike_repo = bike_repo
        self.rent_repo = rent_repo
        self.clock = clock
        self.credential_verifier = credential_verifier or PlainCredentialVerifier()

        self._bike_locks = KeyedLock()
        self._user_locks = KeyedLock()

    async def register_user(self, user: User) -> None:
        """
        Adds a new user to the system.

        :raises DuplicateUserError: When a user with the same email exists.
        """
        async with self._user_locks.hold(user.email):
            if await self.user_repo.find_by_email(user.email) is not None:
                logger.debug("Refused to register %s, the email is taken", user.email)
                raise DuplicateUserError(user.email)

            await self.user_repo.save(user)
        logger.info("Registered user %s", user)

    async def find_user(self, email: str) -> User:
        """
        :raises UserNotFoundError: When there is no user with that email.
        """
        user = await self.user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    async def remove_user(self, email: str) -> None:
        """
        Removes a user from the system.

        :raises UserNotFoundError: When there is no user with that email.
        :raises OpenRentError: When the user has not returned a bike yet.
        """
        async with self._user_locks.hold(email):
            await self.find_user(email)

            if await self.rent_repo.find_open_by_user(email) is not None:
                logger.debug("Refused to remove %s, who has an open rent", email)
                raise OpenRentError(email)

            await self.user_repo.delete(email)
        logger.info("Removed user %s", email)

    async def authenticate(self, email: str, password: str) -> bool:
        """
        Checks the password of a user.

        :return: Whether the password matches.
        :raises UserNotFoundError: When there is no user with that email.
        """
        user = await self.find_user(email)
        return self.credential_verifier.verify(password, user.password)

    async def register_bike(self, bike: Bike) -> str:
        """
        Adds a bike to the system. The bike is given its id in place.

        :return: The id of the bike.
        """
        bike_id = await self.bike_repo.save(bike)
        bike.id = bike_id
        logger.info("Registered bike %s", bike)
        return bike_id

    async def find_bike(self, bike_id: str) -> Bike:
        """
        :raises BikeNotFoundError: When there is no bike with that id.
        """
        bike = await self.bike_repo.find_by_id(bike_id)
        if bike is None:
            raise BikeNotFoundError(bike_id)
        return bike

    async def move_bike_to(self, bike_id: str, location: Location) -> Bike:
        """
        Places a bike at the given location. Bikes may be moved while rented.

        :raises BikeNotFoundError: When there is no bike with that id.
        """
        async with self._bike_locks.hold(bike_id):
            bike = await self.find_bike(bike_id)
            bike.location = location
            await self.bike_repo.update(bike)
        logger.info("Moved bike %s to %s", bike_id, location)
        return bike

    async def rent_bike(self, bike_id: str, user_email: str) -> Rent:
        """
        Starts a new rent of a bike for a user.

        :raises BikeNotFoundError: When there is no bike with that id.
        :raises UserNotFoundError: When there is no user with that email.
        :raises UnavailableBikeError: When the bike is already rented.
        """
        async with self._bike_locks.hold(bike_id), self._user_locks.hold(user_email):
            bike = await self.find_bike(bike_id)
            user = await self.find_user(user_email)

            if not bike.available:
                logger.debug("Refused to rent %s to %s, it is unavailable", bike_id, user_email)
                raise UnavailableBikeError(bike_id)

            rent = Rent(bike=bike, user=user, start=self.clock())
            await self.rent_repo.save(rent)

            bike.available = False
            await self.bike_repo.update(bike)

        logger.info("Started rent %s", rent)
        return rent

    async def return_bike(self, bike_id: str, user_email: str) -> float:
        """
        Ends the open rent of a bike by a user.

        :return: The amount billed for the rent.
        :raises BikeNotFoundError: When there is no bike with that id.
        :raises UserNotFoundError: When there is no user with that email.
        :raises RentNotFoundError: When the user has no open rent of that bike.
        """
        async with self._bike_locks.hold(bike_id), self._user_locks.hold(user_email):
            bike = await self.find_bike(bike_id)
            await self.find_user(user_email)

            rent = await self.rent_repo.find_open_by_bike_and_user(bike_id, user_email)
            if rent is None:
                logger.debug("Refused to return %s for %s, there is no open rent", bike_id, user_email)
                raise RentNotFoundError(bike_id, user_email)

            end = self.clock()
            amount = await get_price(rent.start, end, bike.rate)

            rent.end = end
            rent.amount = amount
            bike.available = True

            await self.rent_repo.update(rent)
            await self.bike_repo.update(bike)

        logger.info("Ended rent %s, billed %s", rent, rent.amount)
        return rent.amount
