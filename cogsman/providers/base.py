"""Base class for cost-of-goods providers."""

from __future__ import annotations

import logging
from typing import Any

from cogsman.exceptions import IntegrationUnavailable
from cogsman.protocols.environment import HostEnvironment

logger = logging.getLogger(__name__)


class AbstractCogsProvider:
    """
    Wraps one third-party cost extension.

    Construction is the availability check: it raises IntegrationUnavailable
    when is_available() is False. The registry uses try_construct(), which
    returns None instead.
    """

    INTEGRATION_NAME: str = ""

    def __init__(self, environment: HostEnvironment) -> None:
        if not self.is_available(environment):
            raise IntegrationUnavailable(self.INTEGRATION_NAME)
        self.environment = environment

    @classmethod
    def is_available(cls, environment: HostEnvironment) -> bool:
        """Return True if the wrapped extension is present. Must not have side effects."""
        raise NotImplementedError

    @classmethod
    def try_construct(cls, environment: HostEnvironment) -> AbstractCogsProvider | None:
        """Return a provider instance, or None if the extension is absent."""
        try:
            return cls(environment)
        except IntegrationUnavailable:
            logger.debug("COGS integration not available: %s", cls.INTEGRATION_NAME)
            return None

    def get_cost(self, product: Any) -> Any:
        """Return the per-unit cost from the wrapped extension, or None."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.INTEGRATION_NAME}>"
