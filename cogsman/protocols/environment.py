"""Host environment protocol."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HostEnvironment(Protocol):
    """
    Describes which cost extensions exist in the running host.

    Providers check availability against this object instead of
    inspecting process state directly, so tests can substitute a fake.
    """

    def has_symbol(self, name: str) -> bool:
        """Return True if the extension entry point `name` is present."""
        ...

    def get_symbol(self, name: str) -> Any:
        """Return the extension entry point `name`."""
        ...

    def get_option(self, name: str, default: Any = None) -> Any:
        """Return a host option value."""
        ...
