"""Delivery strategies — rules that charge for shipping a cart."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from cartpricing.domain.model.value_objects import Money


class DeliveryStrategy(ABC):

    @abstractmethod
    def calculate_delivery(self, subtotal: Money) -> Money:
        """Return the delivery fee for an already-discounted *subtotal*."""


class StandardDelivery(DeliveryStrategy):
    """Three-tier delivery charge.

    - ``subtotal >= free_threshold``: free
    - ``subtotal < min_spend``: ``under_min_cost``
    - otherwise: ``standard_cost``

    Spending exactly ``min_spend`` lands in the standard tier. The
    ``min_spend <= free_threshold`` ordering is assumed, not checked.
    """

    def __init__(
        self,
        free_threshold: Decimal | float | int | str,
        min_spend: Decimal | float | int | str,
        under_min_cost: Decimal | float | int | str,
        standard_cost: Decimal | float | int | str,
    ) -> None:
        self.free_threshold = Money.of(free_threshold).non_negative("free_threshold")
        self.min_spend = Money.of(min_spend).non_negative("min_spend")
        self.under_min_cost = Money.of(under_min_cost).non_negative("under_min_cost")
        self.standard_cost = Money.of(standard_cost).non_negative("standard_cost")

    def calculate_delivery(self, subtotal: Money) -> Money:
        if subtotal >= self.free_threshold:
            return Money.zero()
        if subtotal < self.min_spend:
            return self.under_min_cost
        return self.standard_cost
