"""Pytest fixtures for Cogsman tests."""

from unittest.mock import MagicMock

import pytest

from cogsman.adapters import StaticHostEnvironment
from cogsman.providers import AbstractCogsProvider
from cogsman.tests import fakes


WOOC_OPTION = "woocommerce_feature_cost_of_goods_sold_enabled"


@pytest.fixture(autouse=True)
def reset_cogsman_state():
    """Fresh environment singleton and plugin costs for every test."""
    import cogsman.conf as conf

    conf.reset_environment()
    fakes.PRODUCT_COSTS.clear()
    yield
    conf.reset_environment()
    fakes.PRODUCT_COSTS.clear()


@pytest.fixture
def empty_env():
    """No cost extension installed."""
    return StaticHostEnvironment()


@pytest.fixture
def wooc_env():
    """Host COGS feature switched on."""
    return StaticHostEnvironment(options={WOOC_OPTION: "yes"})


@pytest.fixture
def wpfactory_env():
    """WPFactory plugin installed."""
    return StaticHostEnvironment(symbols={"alg_wc_cog": fakes.alg_wc_cog})


@pytest.fixture
def full_env():
    """Both integrations present."""
    return StaticHostEnvironment(
        symbols={"alg_wc_cog": fakes.alg_wc_cog},
        options={WOOC_OPTION: "yes"},
    )


@pytest.fixture
def product():
    return fakes.FakeProduct(101)


@pytest.fixture
def croissant():
    return fakes.FakeProduct(102, cogs_total_value=100.0)


@pytest.fixture
def baguete():
    return fakes.FakeProduct(103, cogs_total_value=150.0)


@pytest.fixture
def make_provider():
    """Build a mock provider whose get_cost returns `cost`."""

    def _make(cost):
        provider = MagicMock(spec=AbstractCogsProvider)
        provider.get_cost.return_value = cost
        return provider

    return _make
