from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from bikeshare.models import Bike, Location, Rent, User
from bikeshare.store.database.models import UserRecord, BikeRecord, RentRecord
from bikeshare.store.ports import UserRepo, BikeRepo, RentRepo


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """The database may hand back naive or localized times; the service works in UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_user(record: UserRecord) -> User:
    return User(record.name, record.email, record.password)


def _to_bike(record: BikeRecord) -> Bike:
    return Bike(
        name=record.name,
        type=record.type,
        body_size=record.body_size,
        max_load=record.max_load,
        rate=record.rate,
        description=record.description,
        ratings=record.ratings,
        image_urls=list(record.image_urls),
        available=record.available,
        location=Location(record.latitude, record.longitude),
        id=record.id,
    )


class DatabaseUserRepo(UserRepo):

    async def save(self, user: User) -> None:
        await UserRecord.create(email=user.email, name=user.name, password=user.password)

    async def find_by_email(self, email: str) -> Optional[User]:
        record = await UserRecord.get_or_none(email=email)
        return _to_user(record) if record is not None else None

    async def delete(self, email: str) -> None:
        await UserRecord.filter(email=email).delete()


class DatabaseBikeRepo(BikeRepo):

    async def save(self, bike: Bike) -> str:
        bike.id = uuid4().hex
        await BikeRecord.create(
            id=bike.id,
            name=bike.name,
            type=bike.type,
            body_size=bike.body_size,
            max_load=bike.max_load,
            rate=bike.rate,
            description=bike.description,
            ratings=bike.ratings,
            image_urls=list(bike.image_urls),
            available=bike.available,
            latitude=bike.location.latitude,
            longitude=bike.location.longitude,
        )
        return bike.id

    async def find_by_id(self, bike_id: str) -> Optional[Bike]:
        record = await BikeRecord.get_or_none(id=bike_id)
        return _to_bike(record) if record is not None else None

    async def update(self, bike: Bike) -> None:
        updated = await BikeRecord.filter(id=bike.id).update(
            available=bike.available,
            latitude=bike.location.latitude,
            longitude=bike.location.longitude,
        )
        if not updated:
            raise KeyError(f"Bike {bike.id} was never saved.")


class DatabaseRentRepo(RentRepo):
    """
    Rents are looked up by their open state. Since a bike has at most one
    open rent, the bike id and user email are enough to find its record.
    """

    async def save(self, rent: Rent) -> None:
        await RentRecord.create(
            bike_id=rent.bike.id,
            user_email=rent.user.email,
            start=rent.start,
            end=rent.end,
            amount=rent.amount,
        )

    async def find_open_by_bike_and_user(self, bike_id: str, email: str) -> Optional[Rent]:
        record = await RentRecord.filter(
            bike_id=bike_id, user_email=email, end__isnull=True
        ).prefetch_related("bike").first()
        return await self._to_rent(record)

    async def find_open_by_user(self, email: str) -> Optional[Rent]:
        record = await RentRecord.filter(user_email=email, end__isnull=True).prefetch_related("bike").first()
        return await self._to_rent(record)

    async def update(self, rent: Rent) -> None:
        updated = await RentRecord.filter(
            bike_id=rent.bike.id, user_email=rent.user.email, end__isnull=True
        ).update(end=rent.end, amount=rent.amount)
        if not updated:
            raise KeyError(f"Rent {rent} is not open.")

    @staticmethod
    async def _to_rent(record: Optional[RentRecord]) -> Optional[Rent]:
        if record is None:
            return None

        user = await UserRecord.get(email=record.user_email)
        return Rent(
            bike=_to_bike(record.bike),
            user=_to_user(user),
            start=_as_utc(record.start),
            end=_as_utc(record.end),
            amount=record.amount,
        )
