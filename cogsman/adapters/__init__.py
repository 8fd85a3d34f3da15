"""Cogsman adapters."""

from cogsman.adapters.django_env import DjangoHostEnvironment
from cogsman.adapters.static import StaticHostEnvironment

__all__ = [
    "DjangoHostEnvironment",
    "StaticHostEnvironment",
]
