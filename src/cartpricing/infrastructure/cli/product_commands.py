"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from cartpricing.infrastructure.bootstrap import product_catalog


@click.command("catalog")
def catalog_list() -> None:
    """List all products in the catalog."""
    products = product_catalog().list_all()

    click.echo(f"{'Code':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.code:<6} {p.name:<20} {str(p.price):>10}")
