import logging

import click

from online_order.infrastructure.cli.order_commands import order_invoke, order_place


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Online Order: price ice cream orders"""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Register subcommands
cli.add_command(order_invoke)
cli.add_command(order_place)
