"""Composition root — wires the default catalog to the default pricing rules.

This is the only module that knows the concrete catalog and rule
parameters. Everything else receives them as constructor arguments.
"""

from __future__ import annotations

from decimal import Decimal

from cartpricing.domain.model.cart import Cart
from cartpricing.domain.model.catalog import ProductCatalog
from cartpricing.domain.pricing.delivery import StandardDelivery
from cartpricing.domain.pricing.offer import BuyOneGetHalfOff

# ---------------------------------------------------------------------------
# Default configuration
# ---------------------------------------------------------------------------
CATALOG = {
    "R01": {"name": "Red Widget", "price": Decimal("32.95")},
    "G01": {"name": "Green Widget", "price": Decimal("24.95")},
    "B01": {"name": "Blue Widget", "price": Decimal("7.95")},
}

HALF_OFF_PRODUCTS = {"R01": Decimal("32.95")}

FREE_THRESHOLD = Decimal("90")
MIN_SPEND = Decimal("50")
UNDER_MIN_COST = Decimal("4.95")
STANDARD_COST = Decimal("2.95")

DEMO_BASKETS = (
    ("B01", "G01"),
    ("R01", "R01"),
    ("R01", "G01"),
    ("B01", "B01", "R01", "R01", "R01"),
)


def product_catalog() -> ProductCatalog:
    return ProductCatalog(CATALOG)


def offer_strategy() -> BuyOneGetHalfOff:
    return BuyOneGetHalfOff(HALF_OFF_PRODUCTS)


def delivery_strategy(
    free_threshold: Decimal | str = FREE_THRESHOLD,
    min_spend: Decimal | str = MIN_SPEND,
    under_min_cost: Decimal | str = UNDER_MIN_COST,
    standard_cost: Decimal | str = STANDARD_COST,
) -> StandardDelivery:
    return StandardDelivery(free_threshold, min_spend, under_min_cost, standard_cost)


def new_cart() -> Cart:
    return Cart(product_catalog(), offer_strategy(), delivery_strategy())
