"""
Rent
---------------------------

A rent ties a user to a bike for a period of time. It is
open from the moment it is created until the bike is returned,
at which point the end time and the billed amount are recorded.
"""

from datetime import datetime
from typing import Optional

from attr import dataclass

from bikeshare.models.bike import Bike
from bikeshare.models.user import User


@dataclass
class Rent:
    bike: Bike
    user: User
    start: datetime
    end: Optional[datetime] = None

    amount: Optional[float] = None
    """The billed amount, set when the rent is closed."""

    @property
    def is_open(self) -> bool:
        return self.end is None

    def __str__(self):
        return f"{self.user.email} -> {self.bike.id} ({'open' if self.is_open else 'closed'})"
