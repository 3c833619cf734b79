import logging

import click

from cartpricing.infrastructure.cli.cart_commands import cart_demo, cart_total
from cartpricing.infrastructure.cli.product_commands import catalog_list


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each pricing step.")
def cli(verbose: bool) -> None:
    """Cart Pricing — shopping-cart totals with offers and delivery rules"""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register subcommands
cli.add_command(cart_demo)
cli.add_command(cart_total)
cli.add_command(catalog_list)
