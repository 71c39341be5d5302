"""Order request value object.

The request is immutable and validated on construction so a malformed
request never reaches a pricing service.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from online_order.domain.exceptions import InvalidRequest

# The price a pricing service returns, passed through untouched.
PriceResult = float


@dataclass(frozen=True)
class OrderRequest:
    """A flavour identifier and a quantity.

    The sign of ``quantity`` is not checked here: zero and negative
    quantities are left to the pricing service to reject.
    """

    flavour: str
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.flavour, str):
            raise InvalidRequest(
                f"Flavour must be a string, got {type(self.flavour).__name__}"
            )
        if not self.flavour.strip():
            raise InvalidRequest("Flavour must not be empty")
        # bool is an int subclass
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidRequest(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_payload(payload: Mapping[str, Any] | None) -> OrderRequest:
        """Build a request from a transport payload.

        Accepts the body a hosting runtime delivers, e.g.
        ``{"flavour": "vanilla", "quantity": 2}``. Integral strings are
        accepted for the quantity.
        """
        if payload is None:
            raise InvalidRequest("Order request is missing")
        if not isinstance(payload, Mapping):
            raise InvalidRequest(
                f"Order request must be an object, got {type(payload).__name__}"
            )

        missing = [key for key in ("flavour", "quantity") if key not in payload]
        if missing:
            raise InvalidRequest(
                f"Order request is missing field(s): {', '.join(missing)}"
            )

        return OrderRequest(
            flavour=payload["flavour"],
            quantity=_coerce_quantity(payload["quantity"]),
        )


def _coerce_quantity(raw: Any) -> Any:
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise InvalidRequest(f"Invalid quantity: {raw!r}") from exc
    return raw
