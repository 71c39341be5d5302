"""Abstract pricing service.

Defined in the domain layer so the handler never depends on a concrete
implementation. The real service (catalog, stock, discounts) lives
outside this project and is resolved by the composition root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PricingService(ABC):

    @abstractmethod
    def order(self, flavour: str, quantity: int) -> float:
        """Return the price for ``quantity`` of ``flavour``, or raise."""
