"""Composition root: wires the concrete pricing service to the handler.

The pricing service is not part of this project. It is named by an
import target (``"package.module:attribute"``) taken from the
``ONLINE_ORDER_PRICING_SERVICE`` environment variable, or passed
explicitly. The attribute must be a zero-argument callable, usually the
service class itself.
"""

from __future__ import annotations

import importlib
import logging
import os
from collections.abc import Callable

from online_order.application.place_order import PlaceOrderHandler
from online_order.domain.exceptions import ConfigurationError
from online_order.domain.service.pricing_service import PricingService

logger = logging.getLogger(__name__)

PRICING_SERVICE_ENV = "ONLINE_ORDER_PRICING_SERVICE"


def pricing_service_factory(target: str | None = None) -> Callable[[], PricingService]:
    """Resolve an import target into a pricing service factory."""
    if not target:
        target = os.environ.get(PRICING_SERVICE_ENV, "").strip()
    if not target:
        raise ConfigurationError(
            f"No pricing service configured. Set {PRICING_SERVICE_ENV} "
            "to 'package.module:attribute'."
        )

    module_name, sep, attr_name = target.partition(":")
    if not sep or not module_name or not attr_name or module_name.startswith("."):
        raise ConfigurationError(
            f"Invalid pricing service target '{target}'. "
            "Expected 'package.module:attribute'."
        )

    # A broken module can fail with anything while it executes.
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise ConfigurationError(
            f"Cannot import pricing service module '{module_name}': {exc}"
        ) from exc

    factory = module
    for part in attr_name.split("."):
        try:
            factory = getattr(factory, part)
        except AttributeError as exc:
            raise ConfigurationError(
                f"Module '{module_name}' has no attribute '{attr_name}'"
            ) from exc

    if not callable(factory):
        raise ConfigurationError(
            f"Pricing service target '{target}' is not callable"
        )

    logger.debug("Resolved pricing service %s", target)
    return factory


def place_order_handler(target: str | None = None) -> PlaceOrderHandler:
    return PlaceOrderHandler(pricing_service_factory(target))
