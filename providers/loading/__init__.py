"""Loading providers package for ConfigScout - concrete config loader strategies."""

from typing import List

from interfaces.config_loader import ConfigLoader

from .deferred_loader import DeferredLoader
from .eager_loader import EagerLoader


def default_loaders() -> List[ConfigLoader]:
    """Get the default loader strategies in the order they are tried."""
    return [EagerLoader(), DeferredLoader()]


__all__ = [
    "EagerLoader",
    "DeferredLoader",
    "default_loaders",
]
