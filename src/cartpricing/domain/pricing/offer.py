"""Offer strategies — rules that discount a cart subtotal.

Defined as an abstract interface so the Cart never knows which promotion
is running; new promotions are new subclasses.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Mapping, Sequence
from decimal import Decimal

from cartpricing.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class OfferStrategy(ABC):

    @abstractmethod
    def discount(self, product_codes: Sequence[str]) -> Money:
        """Return the total discount earned by *product_codes*."""

    def apply(self, product_codes: Sequence[str], subtotal: Money) -> Money:
        """Return *subtotal* less the discount for *product_codes*.

        The result goes below zero when the discount exceeds the subtotal.
        """
        return subtotal - self.discount(product_codes)


class NoOffer(OfferStrategy):
    """Full price, always."""

    def discount(self, product_codes: Sequence[str]) -> Money:
        return Money.zero()


class BuyOneGetHalfOff(OfferStrategy):
    """Buy one, get the second half price.

    Configured with ``{code: reference_price}``. Every complete pair of an
    eligible code takes half the reference price off the subtotal; an odd
    unit out pays full price. The reference price is used as given, the
    catalog is not consulted.
    """

    def __init__(self, eligible_products: Mapping[str, Decimal | float | int | str]) -> None:
        self._eligible = {
            code: Money.of(price).non_negative(f"Reference price of {code}")
            for code, price in eligible_products.items()
        }

    @property
    def eligible_codes(self) -> frozenset[str]:
        return frozenset(self._eligible)

    def discount(self, product_codes: Sequence[str]) -> Money:
        counts = Counter(product_codes)
        total = Money.zero()
        for code, reference_price in self._eligible.items():
            pairs = counts[code] // 2
            if pairs:
                logger.debug("%d half-price pair(s) of %s", pairs, code)
                total = total + reference_price.half() * pairs
        return total
