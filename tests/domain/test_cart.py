"""Unit tests for the Cart pricing pipeline."""

import logging

import pytest

from cartpricing.domain.exceptions import NotFoundError
from cartpricing.domain.model.cart import Cart
from cartpricing.domain.model.catalog import ProductCatalog
from cartpricing.domain.model.value_objects import Money
from cartpricing.domain.pricing.delivery import StandardDelivery
from cartpricing.domain.pricing.offer import BuyOneGetHalfOff
from tests.fakes import FakeDeliveryStrategy, FakeOfferStrategy


@pytest.fixture
def catalog():
    return ProductCatalog({
        "R01": {"name": "Red Widget", "price": 32.95},
        "G01": {"name": "Green Widget", "price": 24.95},
        "B01": {"name": "Blue Widget", "price": 7.95},
    })


@pytest.fixture
def make_cart(catalog):
    offer = BuyOneGetHalfOff({"R01": 32.95})
    delivery = StandardDelivery(90, 50, 4.95, 2.95)

    def _make(*codes):
        cart = Cart(catalog, offer, delivery)
        for code in codes:
            cart.add(code)
        return cart

    return _make


class TestAdd:

    def test_duplicates_count_as_units(self, make_cart):
        cart = make_cart("R01", "R01")
        assert cart.product_codes == ("R01", "R01")
        assert len(cart) == 2

    def test_unknown_code_rejected_and_cart_unchanged(self, make_cart):
        cart = make_cart("B01")
        with pytest.raises(NotFoundError, match="Product not found: X99"):
            cart.add("X99")
        assert cart.product_codes == ("B01",)

    def test_product_codes_is_a_snapshot(self, make_cart):
        cart = make_cart("B01")
        codes = cart.product_codes
        cart.add("G01")
        assert codes == ("B01",)


class TestReferenceBaskets:

    @pytest.mark.parametrize(
        "codes,expected",
        [
            (("B01", "G01"), "37.85"),
            (("R01", "R01"), "54.37"),
            (("R01", "G01"), "60.85"),
            (("B01", "B01", "R01", "R01", "R01"), "98.27"),
        ],
        ids=["no-offer-under-min", "pair-under-min", "standard-tier", "free-delivery"],
    )
    def test_total(self, make_cart, codes, expected):
        assert make_cart(*codes).total() == expected

    def test_pipeline_stages_for_red_pair(self, make_cart):
        cart = make_cart("R01", "R01")
        assert cart.subtotal() == Money.of("65.90")
        assert cart.discounted_subtotal() == Money.of("49.425")
        assert cart.delivery_fee() == Money.of("4.95")
        assert cart.raw_total() == Money.of("54.375")

    def test_remainder_truncated_not_rounded(self, make_cart):
        cart = make_cart("B01", "B01", "R01", "R01", "R01")
        assert cart.raw_total() == Money.of("98.275")
        assert cart.total() == "98.27"


class TestDelegation:

    def test_offer_sees_all_codes_and_delivery_sees_discounted_subtotal(self, catalog):
        offer = FakeOfferStrategy(discount="10")
        delivery = FakeDeliveryStrategy(fee="1.50")
        cart = Cart(catalog, offer, delivery)
        cart.add("R01")
        cart.add("G01")

        assert cart.total() == "49.40"
        assert offer.calls == [("R01", "G01")]
        assert delivery.subtotals == [Money.of("47.90")]

    def test_empty_cart_pays_delivery_only(self, catalog):
        cart = Cart(catalog, FakeOfferStrategy(), FakeDeliveryStrategy(fee="4.95"))
        assert cart.total() == "4.95"

    def test_strategies_shared_between_carts(self, make_cart):
        first = make_cart("R01", "R01")
        second = make_cart("R01")
        assert first.total() == "54.37"
        assert second.total() == "37.90"

    def test_total_logged(self, make_cart, caplog):
        caplog.set_level(logging.INFO, logger="cartpricing.domain.model.cart")
        make_cart("B01", "G01").total()
        assert any("Cart total 37.85" in r.message for r in caplog.records)


class TestOfferLargerThanSubtotal:

    def test_total_goes_negative_and_keeps_sign(self, catalog):
        offer = BuyOneGetHalfOff({"R01": "200"})
        cart = Cart(catalog, offer, StandardDelivery(90, 50, 4.95, 2.95))
        cart.add("R01")
        cart.add("R01")

        assert cart.discounted_subtotal() == Money.of("-34.10")
        assert cart.delivery_fee() == Money.of("4.95")
        assert cart.total() == "-29.15"

    def test_negative_remainder_truncated_toward_zero(self, catalog):
        cart = Cart(catalog, FakeOfferStrategy(discount="40.005"), FakeDeliveryStrategy())
        cart.add("R01")
        assert cart.total() == "-7.05"


class TestLargeTotals:

    def test_thousands_separator(self, catalog):
        cart = Cart(catalog, FakeOfferStrategy(), FakeDeliveryStrategy())
        for _ in range(40):
            cart.add("R01")
        assert cart.total() == "1,318.00"
