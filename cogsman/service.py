"""
Cogsman public API.

CORE:
    CogsService().calculate_cogs_for_products(items) - Aggregate COGS or False
    CogsService().get_supported_integrations()       - Integration table

A line item is a LineItem(product, qty) or a mapping {"product": ..., "qty": ...}.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, Iterable, Literal

from cogsman.exceptions import IncorrectCogsInputStructure
from cogsman.protocols.cost import LineItem
from cogsman.registry import (
    SUPPORTED_INTEGRATIONS,
    describe_integrations,
    list_available_providers,
)

if TYPE_CHECKING:
    from cogsman.protocols.environment import HostEnvironment
    from cogsman.providers import AbstractCogsProvider

logger = logging.getLogger(__name__)


class CogsService:
    """
    Cost of goods sold for a basket of products.

    Only the first available provider (in registry order) is consulted;
    the others are ignored.

    Args:
        integrations: {key: provider class} table. Defaults to the registry.
        environment: HostEnvironment. Defaults to cogsman.conf.get_environment().
    """

    def __init__(
        self,
        integrations: Mapping[str, type["AbstractCogsProvider"]] | None = None,
        environment: "HostEnvironment | None" = None,
    ) -> None:
        self.integrations = SUPPORTED_INTEGRATIONS if integrations is None else integrations
        self._environment = environment

    @property
    def environment(self) -> "HostEnvironment":
        if self._environment is not None:
            return self._environment
        from cogsman.conf import get_environment

        return get_environment()

    # ======================================================================
    # CORE API
    # ======================================================================

    def calculate_cogs_for_products(self, items: Iterable[Any]) -> Decimal | Literal[False]:
        """
        Return total COGS for the given line items.

        Args:
            items: LineItem instances or {"product", "qty"} mappings

        Returns:
            Positive Decimal total, or False when no provider is available,
            items is empty, or the total is not positive.

        Raises:
            IncorrectCogsInputStructure: If a line item is malformed
        """
        providers = self.get_cogs_providers()
        if not providers:
            return False

        try:
            items = list(items)
        except TypeError:
            raise IncorrectCogsInputStructure("Line items must be a sequence", item=items) from None
        if not items:
            return False

        provider = providers[0]
        logger.debug("Calculating COGS for %d item(s) with %r", len(items), provider)

        total = Decimal("0")
        for index, raw_item in enumerate(items):
            item = self._validate_item(raw_item, index)
            cost = self._to_decimal(provider.get_cost(item.product), provider)
            total += cost * item.qty

        if total <= 0:
            return False
        return total

    def get_supported_integrations(self) -> dict[str, str]:
        """Return {integration key: provider class name} in priority order."""
        return describe_integrations(self.integrations)

    def get_cogs_providers(self) -> list["AbstractCogsProvider"]:
        """Return providers available in the current environment. Override for caching, etc."""
        return list_available_providers(self.environment, self.integrations)

    # ======================================================================
    # INTERNAL
    # ======================================================================

    @staticmethod
    def _validate_item(item: Any, index: int) -> LineItem:
        if isinstance(item, LineItem):
            product, qty = item.product, item.qty
        elif isinstance(item, Mapping):
            product = item.get("product")
            qty = item.get("qty")
            if qty is None:
                qty = item.get("quantity")
        else:
            raise IncorrectCogsInputStructure(
                f"Line item {index} must be a LineItem or a mapping with 'product' and 'qty'",
                index=index,
                item=item,
            )

        if product is None:
            raise IncorrectCogsInputStructure(
                f"Line item {index} has no product", index=index, item=item
            )
        if isinstance(qty, bool) or not isinstance(qty, (int, float, Decimal)):
            raise IncorrectCogsInputStructure(
                f"Line item {index} has no numeric quantity", index=index, item=item
            )
        qty = Decimal(str(qty))
        if not qty.is_finite() or qty <= 0:
            raise IncorrectCogsInputStructure(
                f"Line item {index} quantity must be positive", index=index, item=item
            )

        return LineItem(product=product, qty=qty)

    @staticmethod
    def _to_decimal(cost: Any, provider: "AbstractCogsProvider") -> Decimal:
        """Provider value as Decimal; no value counts as zero."""
        if cost is None or cost is False or cost == "":
            return Decimal("0")
        try:
            value = Decimal(str(cost))
        except InvalidOperation:
            logger.warning("Ignoring non-numeric cost %r from %r", cost, provider)
            return Decimal("0")
        if not value.is_finite():
            logger.warning("Ignoring non-finite cost %r from %r", cost, provider)
            return Decimal("0")
        return value
