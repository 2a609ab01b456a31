"""
Bike
-------------------------

Represents a rentable bike. A bike receives its id from the
:class:`~bikeshare.store.ports.BikeRepo` when it is registered, and
is rented out by flipping its :attr:`~Bike.available` flag.
"""
from typing import List, Optional

import attr

from bikeshare.models.location import Location


def _non_negative(instance, attribute, value):
    if value < 0:
        raise ValueError(f"{attribute.name} must be non-negative, not {value}")


@attr.s(auto_attribs=True)
class Bike:
    name: str
    type: str
    body_size: int
    max_load: int
    rate: float = attr.ib(validator=_non_negative)
    """The price of the bike for an hour (in any currency)."""

    description: str = ""
    ratings: int = 0
    image_urls: List[str] = attr.Factory(list)
    available: bool = True
    location: Location = attr.Factory(lambda: Location(0.0, 0.0))
    id: Optional[str] = None

    def __str__(self):
        return f"[{self.type}] {self.name} ({self.id})"
