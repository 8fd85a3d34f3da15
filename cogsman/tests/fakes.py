"""Stand-ins for host catalog products and the WPFactory plugin."""

from types import SimpleNamespace


class FakeProduct:
    """Host product handle with the built-in COGS accessor."""

    def __init__(self, product_id, cogs_total_value=0):
        self.product_id = product_id
        self.cogs_total_value = cogs_total_value

    def get_id(self):
        return self.product_id

    def get_cogs_total_value(self):
        return self.cogs_total_value


# product id -> cost, as stored in the plugin's "_alg_wc_cog_cost" meta
PRODUCT_COSTS: dict = {}


class _Products:
    def get_product_cost(self, product_id):
        return PRODUCT_COSTS.get(product_id, "")


_plugin = SimpleNamespace(core=SimpleNamespace(products=_Products()))


def alg_wc_cog():
    """WPFactory plugin entry point."""
    return _plugin
