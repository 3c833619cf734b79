"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry a priced cart out to the CLI without exposing the domain
objects themselves.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemDTO:
    """Output: one product line, units of the same code grouped."""

    code: str
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$32.95"


@dataclass(frozen=True)
class CartTotalDTO:
    """Output: the full price breakdown of a cart."""

    items: list[CartItemDTO]
    subtotal: str
    discount: str
    delivery: str
    total: str  # truncated, without currency sign, e.g. "54.37"
