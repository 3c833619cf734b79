"""Product entry — one line of the catalog."""

from __future__ import annotations

from dataclasses import dataclass

from cartpricing.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A sellable product identified by its code.

    Immutable: a catalog is fixed once built, so a price never changes
    between ``Cart.add()`` and ``Cart.total()``. Negative prices are
    rejected on construction.
    """

    code: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        self.price.non_negative(f"Price of {self.code}")
