"""
The models package contains the entities of the bike share.
They are plain data holders, persisted by the repositories
in :mod:`bikeshare.store`.

.. autoclasstree:: bikeshare.models
"""

from .bike import Bike
from .location import Location
from .rent import Rent
from .user import User
