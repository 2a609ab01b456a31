"""
Provides a simple in-memory implementation of the repositories,
for testing and development purposes.
"""

from .store import MemoryUserRepo, MemoryBikeRepo, MemoryRentRepo
