"""Cogsman cost-of-goods providers."""

from cogsman.providers.base import AbstractCogsProvider
from cogsman.providers.wooc import WooCCogsProvider
from cogsman.providers.wpfactory import WPFactoryCogsProvider

__all__ = [
    "AbstractCogsProvider",
    "WooCCogsProvider",
    "WPFactoryCogsProvider",
]
