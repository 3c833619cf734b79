"""Cart — accumulates product codes and prices them.

Pricing runs as a straight pipeline:
catalog lookup -> subtotal -> offer -> delivery fee -> truncated total.
"""

from __future__ import annotations

import logging

from cartpricing.domain.model.catalog import ProductCatalog
from cartpricing.domain.model.value_objects import Money, format_amount
from cartpricing.domain.pricing.delivery import DeliveryStrategy
from cartpricing.domain.pricing.offer import OfferStrategy

logger = logging.getLogger(__name__)


class Cart:
    """A shopping basket bound to one catalog and one pair of pricing rules.

    Duplicate codes are meaningful: adding ``"R01"`` twice means two units.
    The strategies are only read, so one instance can back any number of
    carts.
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        offer_strategy: OfferStrategy,
        delivery_strategy: DeliveryStrategy,
    ) -> None:
        self._catalog = catalog
        self._offer_strategy = offer_strategy
        self._delivery_strategy = delivery_strategy
        self._product_codes: list[str] = []

    def add(self, code: str) -> None:
        """Add one unit of *code*.

        Raises NotFoundError for an unknown code and leaves the cart
        unchanged.
        """
        self._catalog.get_price(code)
        self._product_codes.append(code)
        logger.debug("Added %s (%d unit(s) in cart)", code, len(self._product_codes))

    @property
    def product_codes(self) -> tuple[str, ...]:
        return tuple(self._product_codes)

    def __len__(self) -> int:
        return len(self._product_codes)

    # --- Pricing pipeline -----------------------------------------------------

    def subtotal(self) -> Money:
        result = Money.zero()
        for code in self._product_codes:
            result = result + self._catalog.get_price(code)
        return result

    def discounted_subtotal(self) -> Money:
        return self._offer_strategy.apply(self.product_codes, self.subtotal())

    def delivery_fee(self) -> Money:
        return self._delivery_strategy.calculate_delivery(self.discounted_subtotal())

    def raw_total(self) -> Money:
        """Discounted subtotal plus delivery, before truncation."""
        discounted = self.discounted_subtotal()
        fee = self._delivery_strategy.calculate_delivery(discounted)
        logger.debug("discounted subtotal=%s delivery=%s", discounted.amount, fee.amount)
        return discounted + fee

    def total(self) -> str:
        """Return the total truncated to cents, e.g. ``"54.37"``."""
        total = format_amount(self.raw_total().amount)
        logger.info("Cart total %s for %d unit(s)", total, len(self._product_codes))
        return total
