"""Function-as-a-service entry point.

A hosting runtime calls :func:`handle_request` once per incoming
request with the decoded JSON body.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from online_order.domain.model.order_request import OrderRequest, PriceResult
from online_order.infrastructure.bootstrap import place_order_handler


def handle_request(
    payload: Mapping[str, Any] | None, service: str | None = None
) -> PriceResult:
    request = OrderRequest.from_payload(payload)
    return place_order_handler(service).handle(request)
