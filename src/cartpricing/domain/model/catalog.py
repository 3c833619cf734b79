"""ProductCatalog — the price list every cart is validated against."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from cartpricing.domain.exceptions import NotFoundError, ValidationError
from cartpricing.domain.model.product import Product
from cartpricing.domain.model.value_objects import Money


class ProductCatalog:
    """Read-only mapping of product code to Product.

    Built from ``{"R01": {"name": "Red Widget", "price": 32.95}, ...}``.
    There are no add/remove operations; a catalog shared between carts
    can never drift out of step with them.
    """

    def __init__(self, catalog: Mapping[str, Mapping[str, Any]]) -> None:
        products: dict[str, Product] = {}
        for code, entry in catalog.items():
            try:
                name, price = entry["name"], entry["price"]
            except (KeyError, TypeError) as exc:
                raise ValidationError(
                    f"Catalog entry '{code}' must provide 'name' and 'price'"
                ) from exc
            products[code] = Product(code=code, name=name, price=Money.of(price))
        self._products = products

    @classmethod
    def from_products(cls, products: Iterable[Product]) -> ProductCatalog:
        catalog = cls({})
        for product in products:
            if product.code in catalog._products:
                raise ValidationError(f"Duplicate product code: {product.code}")
            catalog._products[product.code] = product
        return catalog

    # --- Lookup ---------------------------------------------------------------

    def get(self, code: str) -> Product:
        """Return the product for *code*.

        Raises NotFoundError if the code is not in the catalog.
        """
        product = self._products.get(code)
        if product is None:
            raise NotFoundError(f"Product not found: {code}")
        return product

    def get_price(self, code: str) -> Money:
        return self.get(code).price

    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""
        return list(self._products.values())

    def __contains__(self, code: object) -> bool:
        return code in self._products

    def __len__(self) -> int:
        return len(self._products)
