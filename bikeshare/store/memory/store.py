from typing import Dict, List, Optional
from uuid import uuid4

from bikeshare.models import Bike, Rent, User
from bikeshare.store.ports import UserRepo, BikeRepo, RentRepo


class MemoryUserRepo(UserRepo):
    """
    Emulates a database by keeping the users in a dictionary.
    """

    def __init__(self):
        self.users: Dict[str, User] = {}

    async def save(self, user: User) -> None:
        self.users[user.email] = user

    async def find_by_email(self, email: str) -> Optional[User]:
        return self.users.get(email)

    async def delete(self, email: str) -> None:
        self.users.pop(email, None)


class MemoryBikeRepo(BikeRepo):
    """
    Emulates a database by keeping the bikes in a dictionary.

    The stored objects are the ones handed to :meth:`save`, so any
    change made by the service is visible on the caller's reference.
    """

    def __init__(self):
        self.bikes: Dict[str, Bike] = {}

    async def save(self, bike: Bike) -> str:
        bike.id = uuid4().hex
        self.bikes[bike.id] = bike
        return bike.id

    async def find_by_id(self, bike_id: str) -> Optional[Bike]:
        return self.bikes.get(bike_id)

    async def update(self, bike: Bike) -> None:
        if bike.id not in self.bikes:
            raise KeyError(f"Bike {bike.id} was never saved.")
        self.bikes[bike.id] = bike


class MemoryRentRepo(RentRepo):
    """
    Emulates a database by keeping the rents in a list.
    """

    def __init__(self):
        self.rents: List[Rent] = []

    async def save(self, rent: Rent) -> None:
        self.rents.append(rent)

    async def find_open_by_bike_and_user(self, bike_id: str, email: str) -> Optional[Rent]:
        return next((
            rent for rent in self.rents
            if rent.is_open and rent.bike.id == bike_id and rent.user.email == email
        ), None)

    async def find_open_by_user(self, email: str) -> Optional[Rent]:
        return next((rent for rent in self.rents if rent.is_open and rent.user.email == email), None)

    async def update(self, rent: Rent) -> None:
        if not any(rent is stored for stored in self.rents):
            raise KeyError(f"Rent {rent} was never saved.")
