"""
Cogsman configuration.

Usage in settings.py:
    COGSMAN = {
        "ENVIRONMENT": "cogsman.adapters.django_env.DjangoHostEnvironment",
        "SYMBOLS": {"alg_wc_cog": "cost_of_goods.api.alg_wc_cog"},
        "OPTIONS": {"woocommerce_feature_cost_of_goods_sold_enabled": "yes"},
    }
"""

import importlib
import threading
from dataclasses import dataclass, field
from typing import Any

from django.conf import settings


@dataclass
class CogsmanSettings:
    """Cogsman configuration settings."""

    ENVIRONMENT: str = "cogsman.adapters.django_env.DjangoHostEnvironment"
    SYMBOLS: dict[str, str] = field(default_factory=dict)
    OPTIONS: dict[str, Any] = field(default_factory=dict)


def get_cogsman_settings() -> CogsmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "COGSMAN", {})
    return CogsmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_cogsman_settings(), name)


cogsman_settings = _LazySettings()


# HostEnvironment singleton
_environment_lock = threading.Lock()
_environment_instance = None


def get_environment():
    """
    Return the configured HostEnvironment instance.

    Loads from COGSMAN["ENVIRONMENT"] setting (dotted path).
    If _environment_instance was set directly (e.g. in tests), returns it as-is.
    """
    global _environment_instance
    if _environment_instance is not None:
        return _environment_instance
    with _environment_lock:
        if _environment_instance is None:
            module_path, cls_name = cogsman_settings.ENVIRONMENT.rsplit(".", 1)
            module = importlib.import_module(module_path)
            cls = getattr(module, cls_name)
            _environment_instance = cls()
    return _environment_instance


def reset_environment():
    """Reset HostEnvironment singleton (for tests)."""
    global _environment_instance
    _environment_instance = None
