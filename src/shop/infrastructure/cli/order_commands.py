"""CLI commands for the order book."""

from __future__ import annotations

import click

from shop.domain.exceptions import DomainException
from shop.infrastructure.cli.session import Session, pass_session


@click.command("place-order", context_settings={"ignore_unknown_options": True})
@click.argument("email")
@click.argument("product")
@click.argument("quantity", type=int)
@pass_session
def order_place(session: Session, email: str, product: str, quantity: int) -> None:
    """Place an order for a registered customer."""
    try:
        order = session.shop.place_order(
            customer_email=email, product_name=product, quantity=quantity
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order placed successfully. (total {order.total_price})")


@click.command("order-total")
@click.argument("email")
@click.argument("product")
@pass_session
def order_total(session: Session, email: str, product: str) -> None:
    """Total price of every order a customer placed for one product."""
    try:
        total = session.shop.total_for_customer_and_product(email, product)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Total price of the orders for customer {email} and product {product}: {total}"
    )
