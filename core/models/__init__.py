"""ConfigScout Core Models Package - Domain model definitions.

The models follow these principles:
- Immutable data structures using dataclasses with frozen=True
- Produced by a single walk or resolution pass and never mutated
"""

from .entry import DirectoryEntry
from .load_result import CosmicResult, LoadResult
from .roots import RootPair

__all__ = [
    "DirectoryEntry",
    "LoadResult",
    "CosmicResult",
    "RootPair",
]
