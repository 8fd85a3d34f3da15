"""Cogsman protocols."""

from cogsman.protocols.cost import CogsProvider, LineItem
from cogsman.protocols.environment import HostEnvironment
from cogsman.protocols.product import CogsProductRef, ProductRef

__all__ = [
    "CogsProductRef",
    "CogsProvider",
    "HostEnvironment",
    "LineItem",
    "ProductRef",
]
