from attr import dataclass


@dataclass(frozen=True)
class Location:
    """A point on the globe, in degrees."""

    latitude: float
    longitude: float

    def __str__(self):
        return f"{self.latitude},{self.longitude}"
