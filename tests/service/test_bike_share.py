import asyncio
import logging
from datetime import timedelta

import pytest

from bikeshare.models import Bike, Location, User
from bikeshare.service import BikeShare, BikeNotFoundError, DuplicateUserError, OpenRentError, \
    RentNotFoundError, UnavailableBikeError, UserNotFoundError

NEW_YORK = Location(40.753056, -73.983056)


class TestUsers:

    async def test_register_user(self, bike_share: BikeShare):
        """Assert that a registered user can be found again."""
        user = User('jose', 'jose@mail.com', '1234')
        await bike_share.register_user(user)
        assert await bike_share.find_user(user.email) == user

    async def test_register_duplicate_user(self, bike_share: BikeShare, random_user):
        """Assert that a second user with the same email is refused and the first one kept."""
        with pytest.raises(DuplicateUserError) as error:
            await bike_share.register_user(User('impostor', random_user.email, 'other'))

        assert error.value.email == random_user.email
        assert await bike_share.find_user(random_user.email) == random_user

    async def test_find_missing_user(self, bike_share: BikeShare):
        with pytest.raises(UserNotFoundError):
            await bike_share.find_user('fake@mail.com')

    async def test_authenticate(self, bike_share: BikeShare):
        user = User('jose', 'jose@mail.com', '1234')
        await bike_share.register_user(user)
        assert await bike_share.authenticate('jose@mail.com', '1234') is True

    @pytest.mark.parametrize("password", ["4321", "12345", "123", "", " 1234"])
    async def test_authenticate_wrong_password(self, bike_share: BikeShare, password):
        """Assert that any mismatching password is refused without an error."""
        await bike_share.register_user(User('jose', 'jose@mail.com', '1234'))
        assert await bike_share.authenticate('jose@mail.com', password) is False

    async def test_authenticate_missing_user(self, bike_share: BikeShare):
        with pytest.raises(UserNotFoundError):
            await bike_share.authenticate('fake@mail.com', '1234')

    async def test_remove_user(self, bike_share: BikeShare, random_user):
        await bike_share.remove_user(random_user.email)
        with pytest.raises(UserNotFoundError):
            await bike_share.find_user(random_user.email)

    async def test_remove_missing_user(self, bike_share: BikeShare):
        with pytest.raises(UserNotFoundError):
            await bike_share.remove_user('fake@mail.com')

    async def test_remove_user_with_open_rent(self, bike_share: BikeShare, random_user, random_bike):
        """Assert that a user who has not returned a bike cannot be removed."""
        await bike_share.rent_bike(random_bike.id, random_user.email)
        with pytest.raises(OpenRentError):
            await bike_share.remove_user(random_user.email)
        assert await bike_share.find_user(random_user.email) == random_user

    async def test_remove_user_after_return(self, bike_share: BikeShare, random_user, random_bike):
        await bike_share.rent_bike(random_bike.id, random_user.email)
        await bike_share.return_bike(random_bike.id, random_user.email)
        await bike_share.remove_user(random_user.email)
        with pytest.raises(UserNotFoundError):
            await bike_share.find_user(random_user.email)


class TestBikes:

    async def test_register_bike(self, bike_share: BikeShare, bike_factory):
        """Assert that registering a bike gives it an id on the caller's object."""
        bike = bike_factory()
        bike_id = await bike_share.register_bike(bike)
        assert bike.id == bike_id
        assert (await bike_share.find_bike(bike_id)).name == bike.name

    async def test_register_bikes_unique_ids(self, bike_share: BikeShare, bike_factory):
        ids = {await bike_share.register_bike(bike_factory()) for _ in range(5)}
        assert len(ids) == 5

    async def test_find_missing_bike(self, bike_share: BikeShare):
        with pytest.raises(BikeNotFoundError):
            await bike_share.find_bike('fake-id')

    async def test_move_bike(self, bike_share: BikeShare, random_bike):
        """Assert that a bike can be moved to a specific location."""
        await bike_share.move_bike_to(random_bike.id, NEW_YORK)
        bike = await bike_share.find_bike(random_bike.id)
        assert bike.location.latitude == NEW_YORK.latitude
        assert bike.location.longitude == NEW_YORK.longitude

    async def test_move_missing_bike(self, bike_share: BikeShare):
        with pytest.raises(BikeNotFoundError):
            await bike_share.move_bike_to('fake-id', NEW_YORK)

    async def test_move_rented_bike(self, bike_share: BikeShare, random_user, random_bike):
        """Assert that a bike can be tracked while it is rented."""
        await bike_share.rent_bike(random_bike.id, random_user.email)
        await bike_share.move_bike_to(random_bike.id, NEW_YORK)
        bike = await bike_share.find_bike(random_bike.id)
        assert bike.location == NEW_YORK
        assert not bike.available

    async def test_move_bike_is_logged(self, bike_share: BikeShare, random_bike, caplog):
        with caplog.at_level(logging.INFO, logger="bikeshare"):
            await bike_share.move_bike_to(random_bike.id, NEW_YORK)

        assert any(
            record.levelno == logging.INFO and record.getMessage().startswith(f"Moved bike {random_bike.id}")
            for record in caplog.records
        )


class TestRentals:

    async def test_rent_bike(self, bike_share: BikeShare, random_user, random_bike, clock):
        rent = await bike_share.rent_bike(random_bike.id, random_user.email)
        assert rent.is_open
        assert rent.start == clock()
        assert rent.bike.id == random_bike.id
        assert rent.user.email == random_user.email
        assert not (await bike_share.find_bike(random_bike.id)).available

    async def test_rent_missing_bike(self, bike_share: BikeShare, random_user):
        with pytest.raises(BikeNotFoundError):
            await bike_share.rent_bike('fake-id', random_user.email)

    async def test_rent_missing_user(self, bike_share: BikeShare, random_bike):
        with pytest.raises(UserNotFoundError):
            await bike_share.rent_bike(random_bike.id, 'fake@mail.com')
        assert (await bike_share.find_bike(random_bike.id)).available

    async def test_rent_missing_bike_and_user(self, bike_share: BikeShare):
        """Assert that the bike is resolved before the user."""
        with pytest.raises(BikeNotFoundError):
            await bike_share.rent_bike('fake-id', 'fake@mail.com')

    async def test_rent_unavailable_bike(self, bike_share: BikeShare, random_user, random_bike):
        await bike_share.rent_bike(random_bike.id, random_user.email)
        with pytest.raises(UnavailableBikeError):
            await bike_share.rent_bike(random_bike.id, random_user.email)

    async def test_rent_bike_rented_by_other(self, bike_share: BikeShare, random_user, random_bike, user_factory):
        """Assert that a rented bike is unavailable to everyone."""
        other = user_factory()
        await bike_share.register_user(other)
        await bike_share.rent_bike(random_bike.id, random_user.email)
        with pytest.raises(UnavailableBikeError):
            await bike_share.rent_bike(random_bike.id, other.email)

    async def test_rent_several_bikes(self, bike_share: BikeShare, random_user, bike_factory):
        """Assert that a user may hold rents on different bikes."""
        first, second = bike_factory(), bike_factory()
        await bike_share.register_bike(first)
        await bike_share.register_bike(second)
        await bike_share.rent_bike(first.id, random_user.email)
        await bike_share.rent_bike(second.id, random_user.email)

    async def test_return_bike(self, bike_share: BikeShare, random_user, bike_factory, clock):
        """Assert that the rent amount is the elapsed hours times the rate."""
        bike = bike_factory(rate=100.0)
        await bike_share.register_bike(bike)
        await bike_share.rent_bike(bike.id, random_user.email)
        clock.tick(timedelta(hours=2))
        amount = await bike_share.return_bike(bike.id, random_user.email)
        assert amount == 200.0
        assert (await bike_share.find_bike(bike.id)).available

    async def test_return_bike_immediately(self, bike_share: BikeShare, random_user, random_bike):
        await bike_share.rent_bike(random_bike.id, random_user.email)
        assert await bike_share.return_bike(random_bike.id, random_user.email) == 0

    @pytest.mark.parametrize("rate,elapsed,amount", [
        (100.0, timedelta(minutes=30), 50.0),
        (12.5, timedelta(hours=4), 50.0),
        (0.0, timedelta(hours=10), 0.0),
        (3.0, timedelta(days=1), 72.0),
    ])
    async def test_return_bike_amount(self, bike_share: BikeShare, random_user, bike_factory, clock,
                                      rate, elapsed, amount):
        bike = bike_factory(rate=rate)
        await bike_share.register_bike(bike)
        await bike_share.rent_bike(bike.id, random_user.email)
        clock.tick(elapsed)
        assert await bike_share.return_bike(bike.id, random_user.email) == pytest.approx(amount)

    async def test_return_without_rent(self, bike_share: BikeShare, random_user, random_bike):
        with pytest.raises(RentNotFoundError):
            await bike_share.return_bike(random_bike.id, random_user.email)

    async def test_return_twice(self, bike_share: BikeShare, random_user, random_bike):
        await bike_share.rent_bike(random_bike.id, random_user.email)
        await bike_share.return_bike(random_bike.id, random_user.email)
        with pytest.raises(RentNotFoundError):
            await bike_share.return_bike(random_bike.id, random_user.email)

    async def test_return_other_users_rent(self, bike_share: BikeShare, random_user, random_bike, user_factory):
        """Assert that only the user renting a bike can return it."""
        other = user_factory()
        await bike_share.register_user(other)
        await bike_share.rent_bike(random_bike.id, random_user.email)
        with pytest.raises(RentNotFoundError):
            await bike_share.return_bike(random_bike.id, other.email)
        assert not (await bike_share.find_bike(random_bike.id)).available

    async def test_return_with_clock_gone_back(self, bike_share: BikeShare, random_user, random_bike, clock):
        """Assert that a return that cannot be priced leaves the rent open and the bike rented."""
        await bike_share.rent_bike(random_bike.id, random_user.email)
        clock.tick(timedelta(seconds=-1))

        with pytest.raises(ValueError):
            await bike_share.return_bike(random_bike.id, random_user.email)

        rent = await bike_share.rent_repo.find_open_by_bike_and_user(random_bike.id, random_user.email)
        assert rent is not None
        assert rent.is_open
        assert rent.amount is None
        assert not (await bike_share.find_bike(random_bike.id)).available

        clock.tick(timedelta(hours=1))
        amount = await bike_share.return_bike(random_bike.id, random_user.email)
        assert amount == pytest.approx(random_bike.rate * (3599 / 3600))

    async def test_return_missing_bike(self, bike_share: BikeShare, random_user):
        with pytest.raises(BikeNotFoundError):
            await bike_share.return_bike('fake-id', random_user.email)

    async def test_return_missing_user(self, bike_share: BikeShare, random_bike):
        with pytest.raises(UserNotFoundError):
            await bike_share.return_bike(random_bike.id, 'fake@mail.com')

    async def test_rent_again_after_return(self, bike_share: BikeShare, random_user, random_bike, clock):
        await bike_share.rent_bike(random_bike.id, random_user.email)
        clock.tick(timedelta(hours=1))
        await bike_share.return_bike(random_bike.id, random_user.email)
        await bike_share.rent_bike(random_bike.id, random_user.email)
        clock.tick(timedelta(hours=3))
        assert await bike_share.return_bike(random_bike.id, random_user.email) == pytest.approx(3 * random_bike.rate)

    async def test_concurrent_rents(self, bike_share: BikeShare, random_bike, user_factory):
        """Assert that only one of two simultaneous rents of a bike succeeds."""
        users = [user_factory(), user_factory()]
        for user in users:
            await bike_share.register_user(user)

        results = await asyncio.gather(
            *(bike_share.rent_bike(random_bike.id, user.email) for user in users),
            return_exceptions=True
        )

        assert sum(1 for result in results if isinstance(result, UnavailableBikeError)) == 1
        assert sum(1 for result in results if not isinstance(result, Exception)) == 1


class TestMemoryReferences:
    """The in-memory repositories store the caller's objects, so changes show on them."""

    async def test_rent_marks_callers_bike(self, memory_bike_share: BikeShare):
        user = User('Jose', 'jose@mail.com', '1234')
        await memory_bike_share.register_user(user)
        bike = Bike('caloi mountainbike', 'mountain bike', 1234, 1234, 100.0, 'My bike', 5, [])
        await memory_bike_share.register_bike(bike)
        await memory_bike_share.rent_bike(bike.id, user.email)

        rents = memory_bike_share.rent_repo.rents
        assert len(rents) == 1
        assert rents[0].bike.id == bike.id
        assert rents[0].user.email == user.email
        assert not bike.available

    async def test_move_moves_callers_bike(self, memory_bike_share: BikeShare):
        bike = Bike('caloi mountainbike', 'mountain bike', 1234, 1234, 100.0, 'My bike', 5, [])
        await memory_bike_share.register_bike(bike)
        await memory_bike_share.move_bike_to(bike.id, NEW_YORK)
        assert bike.location.latitude == NEW_YORK.latitude
        assert bike.location.longitude == NEW_YORK.longitude

    async def test_return_closes_rent(self, memory_bike_share: BikeShare, clock):
        user = User('Jose', 'jose@mail.com', '1234')
        await memory_bike_share.register_user(user)
        bike = Bike('caloi mountainbike', 'mountain bike', 1234, 1234, 100.0, 'My bike', 5, [])
        await memory_bike_share.register_bike(bike)
        rent = await memory_bike_share.rent_bike(bike.id, user.email)
        clock.tick(timedelta(hours=2))
        await memory_bike_share.return_bike(bike.id, user.email)

        assert rent.end == clock()
        assert rent.amount == 200.0
        assert bike.available
