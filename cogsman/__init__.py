"""
Django Cogsman - Cost of goods sold from pluggable cost providers.

Usage:
    from cogsman import CogsService, LineItem

    total = CogsService().calculate_cogs_for_products(
        [LineItem(product=product, qty=2)]
    )
    if total is False:
        ...  # no provider, nothing to price, or no cost known
"""


def __getattr__(name):
    if name == "CogsService":
        from cogsman.service import CogsService

        return CogsService
    elif name == "LineItem":
        from cogsman.protocols.cost import LineItem

        return LineItem
    elif name in ("CogsError", "IncorrectCogsInputStructure", "IntegrationUnavailable"):
        from cogsman import exceptions

        return getattr(exceptions, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CogsService",
    "LineItem",
    "CogsError",
    "IncorrectCogsInputStructure",
    "IntegrationUnavailable",
]
__version__ = "0.1.0"
