"""Product reference protocols."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ProductRef(Protocol):
    """Opaque product handle from the host catalog."""

    def get_id(self) -> Any:
        """Return the product identifier."""
        ...


@runtime_checkable
class CogsProductRef(ProductRef, Protocol):
    """Product handle that carries its own cost of goods (host COGS feature)."""

    def get_cogs_total_value(self) -> Any:
        """Return the total cost of goods stored on the product."""
        ...
