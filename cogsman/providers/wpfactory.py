"""
Provider for the WPFactory "Cost of Goods" plugin (free and pro versions).

The plugin is detected through its `alg_wc_cog` entry point, which returns
the plugin object exposing `core.products.get_product_cost(product_id)`.
"""

from __future__ import annotations

from cogsman.protocols.cost import CogsProvider
from cogsman.protocols.environment import HostEnvironment
from cogsman.protocols.product import ProductRef
from cogsman.providers.base import AbstractCogsProvider

ENTRY_POINT = "alg_wc_cog"


class WPFactoryCogsProvider(AbstractCogsProvider):
    """WooCommerce Cost of Goods by WPFactory."""

    INTEGRATION_NAME = "WooCommerce Cost of Goods by WPFactory"

    @classmethod
    def is_available(cls, environment: HostEnvironment) -> bool:
        return environment.has_symbol(ENTRY_POINT)

    def get_cost(self, product: ProductRef):
        plugin = self.environment.get_symbol(ENTRY_POINT)()
        return plugin.core.products.get_product_cost(product.get_id())


if not issubclass(WPFactoryCogsProvider, CogsProvider):
    raise TypeError("WPFactoryCogsProvider does not implement CogsProvider protocol")
