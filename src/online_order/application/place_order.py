"""Application service: Place Order use case.

Adapts one order request to one pricing service call. All pricing,
catalog and stock decisions belong to the service; this handler only
checks that a request exists and passes the result back unchanged.
"""

from __future__ import annotations

from collections.abc import Callable

from online_order.domain.exceptions import InvalidRequest
from online_order.domain.model.order_request import OrderRequest, PriceResult
from online_order.domain.service.pricing_service import PricingService


class PlaceOrderHandler:

    def __init__(self, pricing_service_factory: Callable[[], PricingService]) -> None:
        self._pricing_service_factory = pricing_service_factory

    def handle(self, request: OrderRequest | None) -> PriceResult:
        """Price an order.

        A fresh pricing service is obtained for every call, so nothing
        is shared between requests. Whatever the service raises
        propagates as-is.
        """
        if request is None:
            raise InvalidRequest("Order request is missing")

        service = self._pricing_service_factory()
        return service.order(request.flavour, request.quantity)
