"""
CogsProvider protocol and line items.

A provider wraps exactly one third-party extension that holds cost data.
Cogsman reads per-unit cost through this Protocol without importing the
extension itself.

Usage:
    class MyCogsProvider(AbstractCogsProvider):
        INTEGRATION_NAME = "My Cost Plugin"

        @classmethod
        def is_available(cls, environment) -> bool:
            return environment.has_symbol("my_cost_plugin")

        def get_cost(self, product):
            return self.environment.get_symbol("my_cost_plugin")(product.get_id())
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class LineItem:
    """One ordered product and its quantity."""

    product: Any
    qty: int | Decimal | float


@runtime_checkable
class CogsProvider(Protocol):
    """
    Interface for retrieving the per-unit cost of a product.

    Implementations are pure pass-throughs: no rounding, currency
    conversion or default values.
    """

    def get_cost(self, product: Any) -> int | float | Decimal | str | None:
        """
        Return the per-unit cost reported by the wrapped extension.

        Args:
            product: Opaque product handle supplied by the caller

        Returns:
            Whatever numeric value the extension yields, or None if the
            extension has no cost for this product.
        """
        ...
