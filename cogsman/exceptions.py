"""Cogsman exceptions."""

from typing import Any


ERROR_MESSAGES = {
    "INTEGRATION_NOT_AVAILABLE": "Integration is not available",
    "INCORRECT_INPUT_STRUCTURE": "Incorrect COGS input structure",
}


class CogsError(Exception):
    """
    Structured exception for COGS operations.

    Usage:
        try:
            total = CogsService().calculate_cogs_for_products(items)
        except CogsError as e:
            if e.code == "INCORRECT_INPUT_STRUCTURE":
                print(f"Bad line item at position {e.data.get('index')}")
    """

    def __init__(self, code: str, message: str = "", **data: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }


class IntegrationUnavailable(CogsError):
    """The third-party extension wrapped by a provider is not present."""

    def __init__(self, integration: str, message: str = "", **data: Any) -> None:
        super().__init__(
            "INTEGRATION_NOT_AVAILABLE",
            message=message or f"Integration is not available: {integration}",
            integration=integration,
            **data,
        )

    @property
    def integration(self) -> str:
        return self.data["integration"]


class IncorrectCogsInputStructure(CogsError):
    """A line item is not a well-formed {product, qty} pair."""

    def __init__(self, message: str = "", **data: Any) -> None:
        super().__init__("INCORRECT_INPUT_STRUCTURE", message=message, **data)

    @property
    def index(self) -> int | None:
        return self.data.get("index")

    @property
    def item(self) -> Any:
        return self.data.get("item")
