"""
HostEnvironment backed by Django settings.

Extension entry points are declared as dotted import paths; a symbol is
present when its path imports. Host options are plain values.

Usage in settings.py:
    COGSMAN = {
        "ENVIRONMENT": "cogsman.adapters.django_env.DjangoHostEnvironment",
        "SYMBOLS": {"alg_wc_cog": "cost_of_goods.api.alg_wc_cog"},
        "OPTIONS": {"woocommerce_feature_cost_of_goods_sold_enabled": "yes"},
    }
"""

from __future__ import annotations

import importlib
import logging
from typing import Any

from cogsman.protocols.environment import HostEnvironment

logger = logging.getLogger(__name__)


class DjangoHostEnvironment:
    """
    HostEnvironment reading COGSMAN["SYMBOLS"] and COGSMAN["OPTIONS"].

    Settings are re-read on every call, so override_settings works.
    """

    def _symbol_path(self, name: str) -> str | None:
        from cogsman.conf import cogsman_settings

        return cogsman_settings.SYMBOLS.get(name)

    def has_symbol(self, name: str) -> bool:
        try:
            self.get_symbol(name)
        except (ImportError, AttributeError, LookupError, ValueError):
            return False
        return True

    def get_symbol(self, name: str) -> Any:
        path = self._symbol_path(name)
        if not path:
            raise LookupError(f"Symbol {name!r} is not declared in COGSMAN['SYMBOLS']")
        module_path, attr = path.rsplit(".", 1)
        module = importlib.import_module(module_path)
        return getattr(module, attr)

    def get_option(self, name: str, default: Any = None) -> Any:
        from cogsman.conf import cogsman_settings

        return cogsman_settings.OPTIONS.get(name, default)


# Verify protocol compliance at import time.
if not isinstance(DjangoHostEnvironment(), HostEnvironment):
    raise TypeError("DjangoHostEnvironment does not implement HostEnvironment protocol")
