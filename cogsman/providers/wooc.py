"""
Provider for the built-in Cost of Goods feature of the host store.

The feature stores cost on the product itself, so lookup goes through
the product handle. It is available when the store option
`woocommerce_feature_cost_of_goods_sold_enabled` is switched on.
"""

from __future__ import annotations

from cogsman.protocols.cost import CogsProvider
from cogsman.protocols.environment import HostEnvironment
from cogsman.protocols.product import CogsProductRef
from cogsman.providers.base import AbstractCogsProvider

FEATURE_OPTION = "woocommerce_feature_cost_of_goods_sold_enabled"


class WooCCogsProvider(AbstractCogsProvider):
    """Host store Cost of Goods feature."""

    INTEGRATION_NAME = "WooCommerce Cost of Goods"

    @classmethod
    def is_available(cls, environment: HostEnvironment) -> bool:
        value = environment.get_option(FEATURE_OPTION)
        return value == "yes" or value is True

    def get_cost(self, product: CogsProductRef):
        # simple products and variations store the value the same way
        return product.get_cogs_total_value()


if not issubclass(WooCCogsProvider, CogsProvider):
    raise TypeError("WooCCogsProvider does not implement CogsProvider protocol")
