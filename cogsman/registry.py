"""
Registry of supported cost-of-goods integrations.

The table is fixed: order defines selection priority. A new integration
is added by writing a provider and adding one entry here.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from cogsman.protocols.environment import HostEnvironment
from cogsman.providers import AbstractCogsProvider, WooCCogsProvider, WPFactoryCogsProvider

logger = logging.getLogger(__name__)


SUPPORTED_INTEGRATIONS: Mapping[str, type[AbstractCogsProvider]] = MappingProxyType(
    {
        "WooC": WooCCogsProvider,
        "WPFactory": WPFactoryCogsProvider,
    }
)


def describe_integrations(
    integrations: Mapping[str, type[AbstractCogsProvider]],
) -> dict[str, str]:
    """Return {integration key: provider class name}, preserving order."""
    return {key: provider_cls.__name__ for key, provider_cls in integrations.items()}


def list_supported_integrations() -> dict[str, str]:
    """Return the fixed {integration key: provider class name} table."""
    return describe_integrations(SUPPORTED_INTEGRATIONS)


def list_available_providers(
    environment: HostEnvironment,
    integrations: Mapping[str, type[AbstractCogsProvider]] | None = None,
) -> list[AbstractCogsProvider]:
    """
    Build the providers whose extensions are present, in registry order.

    Args:
        environment: Host description used for availability checks
        integrations: Table to use instead of SUPPORTED_INTEGRATIONS

    Returns:
        Provider instances; absent integrations are skipped.
    """
    if integrations is None:
        integrations = SUPPORTED_INTEGRATIONS

    providers = []
    for key, provider_cls in integrations.items():
        provider = provider_cls.try_construct(environment)
        if provider is None:
            logger.debug("Skipping COGS integration %s: not available", key)
            continue
        providers.append(provider)
    return providers
