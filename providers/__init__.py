"""Providers package for ConfigScout - concrete implementations of abstract interfaces."""

from .loading import DeferredLoader, EagerLoader, default_loaders

__all__ = [
    # Loading providers
    "EagerLoader",
    "DeferredLoader",
    "default_loaders",
]
