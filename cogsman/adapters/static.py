"""
Static HostEnvironment -- an in-memory description of the host.

Useful in tests and scripts where no extension is installed:

    env = StaticHostEnvironment(
        symbols={"alg_wc_cog": fake_plugin},
        options={"woocommerce_feature_cost_of_goods_sold_enabled": "yes"},
    )
    CogsService(environment=env).calculate_cogs_for_products(items)

An empty StaticHostEnvironment() reports every extension as absent.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from cogsman.protocols.environment import HostEnvironment


class StaticHostEnvironment:
    """HostEnvironment holding fixed symbols and options."""

    def __init__(
        self,
        symbols: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self.symbols = MappingProxyType(dict(symbols or {}))
        self.options = MappingProxyType(dict(options or {}))

    def has_symbol(self, name: str) -> bool:
        return name in self.symbols

    def get_symbol(self, name: str) -> Any:
        return self.symbols[name]

    def get_option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def __repr__(self) -> str:
        return f"StaticHostEnvironment(symbols={sorted(self.symbols)}, options={dict(self.options)})"


# Verify protocol compliance at import time.
if not isinstance(StaticHostEnvironment(), HostEnvironment):
    raise TypeError("StaticHostEnvironment does not implement HostEnvironment protocol")
