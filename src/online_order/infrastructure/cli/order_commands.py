"""CLI commands for placing orders."""

from __future__ import annotations

import json
from typing import TextIO

import click

from online_order.domain.exceptions import DomainException
from online_order.domain.model.order_request import OrderRequest
from online_order.infrastructure.bootstrap import PRICING_SERVICE_ENV, place_order_handler
from online_order.infrastructure.function import handle_request

_SERVICE_HELP = (
    f"Pricing service as 'package.module:attribute' (overrides {PRICING_SERVICE_ENV})."
)


@click.command("order")
@click.option("--flavour", required=True, help="Flavour identifier.")
@click.option("--quantity", required=True, type=int, help="Number of items.")
@click.option("--service", default=None, help=_SERVICE_HELP)
def order_place(flavour: str, quantity: int, service: str | None) -> None:
    """Price a single order."""
    try:
        handler = place_order_handler(service)
        price = handler.handle(OrderRequest(flavour=flavour, quantity=quantity))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{quantity} x {flavour}: {price}")


@click.command("invoke")
@click.argument("payload_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--service", default=None, help=_SERVICE_HELP)
def order_invoke(payload_file: TextIO, service: str | None) -> None:
    """Run a JSON order payload through the function entry point.

    Reads the payload from PAYLOAD_FILE, or stdin when omitted.
    """
    try:
        payload = json.load(payload_file)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise click.BadParameter(
            f"Invalid JSON payload: {exc}", param_hint="PAYLOAD_FILE"
        )

    try:
        price = handle_request(payload, service=service)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps({"price": price}))
