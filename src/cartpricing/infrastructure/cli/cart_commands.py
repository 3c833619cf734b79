"""CLI commands that price carts."""

from __future__ import annotations

import click

from cartpricing.application.price_cart import PriceCartHandler
from cartpricing.domain.exceptions import DomainException
from cartpricing.domain.pricing.offer import NoOffer
from cartpricing.infrastructure import bootstrap


@click.command("demo")
def cart_demo() -> None:
    """Price the four reference baskets."""
    for codes in bootstrap.DEMO_BASKETS:
        cart = bootstrap.new_cart()
        for code in codes:
            cart.add(code)
        click.echo(f"Total: ${cart.total()}")


@click.command("total")
@click.argument("codes", nargs=-1, required=True)
@click.option("--no-offer", is_flag=True, default=False, help="Price without the half-price offer.")
@click.option(
    "--free-threshold",
    default=str(bootstrap.FREE_THRESHOLD),
    envvar="CART_FREE_THRESHOLD",
    show_default=True,
    help="Spend at which delivery is free.",
)
@click.option(
    "--min-spend",
    default=str(bootstrap.MIN_SPEND),
    envvar="CART_MIN_SPEND",
    show_default=True,
    help="Spend below which the higher delivery fee applies.",
)
@click.option(
    "--under-min-cost",
    default=str(bootstrap.UNDER_MIN_COST),
    envvar="CART_UNDER_MIN_COST",
    show_default=True,
    help="Delivery fee below the minimum spend.",
)
@click.option(
    "--standard-cost",
    default=str(bootstrap.STANDARD_COST),
    envvar="CART_STANDARD_COST",
    show_default=True,
    help="Delivery fee between minimum spend and free threshold.",
)
def cart_total(
    codes: tuple[str, ...],
    no_offer: bool,
    free_threshold: str,
    min_spend: str,
    under_min_cost: str,
    standard_cost: str,
) -> None:
    """Price a cart holding CODES (repeat a code for more units)."""
    try:
        handler = PriceCartHandler(
            catalog=bootstrap.product_catalog(),
            offer_strategy=NoOffer() if no_offer else bootstrap.offer_strategy(),
            delivery_strategy=bootstrap.delivery_strategy(
                free_threshold, min_spend, under_min_cost, standard_cost
            ),
        )
        dto = handler.handle(codes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"  {'Code':<6} {'Product':<20} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*44}")
    for item in dto.items:
        click.echo(
            f"  {item.code:<6} {item.name:<20} {item.quantity:>5} {item.unit_price:>10}"
        )
    click.echo(f"  {'-'*44}")
    click.echo(f"  {'Subtotal':<33} {dto.subtotal:>10}")
    click.echo(f"  {'Discount':<33} {dto.discount:>10}")
    click.echo(f"  {'Delivery':<33} {dto.delivery:>10}")
    click.echo(f"Total: ${dto.total}")
