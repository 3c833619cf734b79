"""Application service: Price Cart use case.

Builds a cart from a list of product codes and reports every stage of
the pricing pipeline.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from cartpricing.application.dto import CartItemDTO, CartTotalDTO
from cartpricing.domain.model.cart import Cart
from cartpricing.domain.model.catalog import ProductCatalog
from cartpricing.domain.model.value_objects import Money, truncate
from cartpricing.domain.pricing.delivery import DeliveryStrategy
from cartpricing.domain.pricing.offer import OfferStrategy

logger = logging.getLogger(__name__)


class PriceCartHandler:

    def __init__(
        self,
        catalog: ProductCatalog,
        offer_strategy: OfferStrategy,
        delivery_strategy: DeliveryStrategy,
    ) -> None:
        self._catalog = catalog
        self._offer_strategy = offer_strategy
        self._delivery_strategy = delivery_strategy

    def handle(self, product_codes: Iterable[str]) -> CartTotalDTO:
        """Price a new cart holding *product_codes*.

        Steps:
        1. Add each code to a fresh Cart (fail on the first unknown code).
        2. Read every pipeline stage back from the cart.
        3. Return a DTO with display strings. Each line is shown truncated
           to cents and the discount is derived from the shown figures, so
           subtotal - discount + delivery always equals the total.
        """
        cart = Cart(self._catalog, self._offer_strategy, self._delivery_strategy)
        for code in product_codes:
            cart.add(code)

        subtotal = truncate(cart.subtotal().amount)
        delivery = truncate(cart.delivery_fee().amount)
        total = truncate(cart.raw_total().amount)
        logger.debug("Priced %d unit(s): subtotal=%s", len(cart), subtotal)

        return CartTotalDTO(
            items=self._to_items(cart),
            subtotal=str(Money(subtotal)),
            discount=str(Money(subtotal + delivery - total)),
            delivery=str(Money(delivery)),
            total=cart.total(),
        )

    # --- Mapping --------------------------------------------------------------

    def _to_items(self, cart: Cart) -> list[CartItemDTO]:
        items = []
        for code, quantity in Counter(cart.product_codes).items():
            product = self._catalog.get(code)
            items.append(
                CartItemDTO(
                    code=code,
                    name=product.name,
                    quantity=quantity,
                    unit_price=str(product.price),
                )
            )
        return items
