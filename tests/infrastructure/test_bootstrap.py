"""Tests for pricing service resolution in the composition root."""

import logging

import pytest

from online_order.domain.exceptions import ConfigurationError
from online_order.domain.model.order_request import OrderRequest
from online_order.infrastructure.bootstrap import (
    PRICING_SERVICE_ENV,
    place_order_handler,
    pricing_service_factory,
)
from tests.fakes import FlatRatePricingService


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv(PRICING_SERVICE_ENV, raising=False)


class TestResolution:

    def test_explicit_target(self):
        factory = pricing_service_factory("tests.fakes:FlatRatePricingService")
        assert factory is FlatRatePricingService

    def test_target_from_environment(self, monkeypatch):
        monkeypatch.setenv(PRICING_SERVICE_ENV, "tests.fakes:FlatRatePricingService")
        assert pricing_service_factory() is FlatRatePricingService

    def test_explicit_target_overrides_environment(self, monkeypatch):
        monkeypatch.setenv(PRICING_SERVICE_ENV, "tests.fakes:DuckTypedShop")
        factory = pricing_service_factory("tests.fakes:FlatRatePricingService")
        assert factory is FlatRatePricingService

    def test_dotted_attribute(self):
        factory = pricing_service_factory("tests.fakes:FlatRatePricingService.order")
        assert factory is FlatRatePricingService.order

    def test_logs_resolution(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="online_order.infrastructure.bootstrap"):
            pricing_service_factory("tests.fakes:FlatRatePricingService")
        assert "tests.fakes:FlatRatePricingService" in caplog.text


class TestResolutionErrors:

    def test_unset(self):
        with pytest.raises(ConfigurationError, match=PRICING_SERVICE_ENV):
            pricing_service_factory()

    def test_blank_environment(self, monkeypatch):
        monkeypatch.setenv(PRICING_SERVICE_ENV, "   ")
        with pytest.raises(ConfigurationError, match="No pricing service configured"):
            pricing_service_factory()

    def test_missing_colon(self):
        with pytest.raises(ConfigurationError, match="Invalid pricing service target"):
            pricing_service_factory("tests.fakes.FlatRatePricingService")

    def test_empty_attribute(self):
        with pytest.raises(ConfigurationError, match="Invalid pricing service target"):
            pricing_service_factory("tests.fakes:")

    def test_unknown_module(self):
        with pytest.raises(ConfigurationError, match="Cannot import"):
            pricing_service_factory("no_such_shop.module:Shop")

    def test_relative_module(self):
        with pytest.raises(ConfigurationError, match="Invalid pricing service target"):
            pricing_service_factory(".fakes:FlatRatePricingService")

    def test_module_failing_on_import(self):
        with pytest.raises(ConfigurationError, match="pricing tables unavailable") as exc_info:
            pricing_service_factory("tests.broken_pricing:Shop")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unknown_attribute(self):
        with pytest.raises(ConfigurationError, match="has no attribute 'Shop'"):
            pricing_service_factory("tests.fakes:Shop")

    def test_not_callable(self):
        with pytest.raises(ConfigurationError, match="not callable"):
            pricing_service_factory("tests.fakes:NOT_CALLABLE")


class TestPlaceOrderHandlerWiring:

    def test_handler_uses_resolved_service(self):
        handler = place_order_handler("tests.fakes:FlatRatePricingService")
        assert handler.handle(OrderRequest("vanilla", 2)) == 5.0

    def test_configuration_error_raised_at_wiring(self):
        with pytest.raises(ConfigurationError):
            place_order_handler()
