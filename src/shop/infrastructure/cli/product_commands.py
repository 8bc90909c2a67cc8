"""CLI commands for the product inventory."""

from __future__ import annotations

import click

from shop.domain.exceptions import DomainException
from shop.infrastructure.cli.session import Session, pass_session


@click.command("add-product", context_settings={"ignore_unknown_options": True})
@click.argument("name")
@click.argument("price")
@click.argument("quantity", type=int)
@pass_session
def product_add(session: Session, name: str, price: str, quantity: int) -> None:
    """Add a product to the inventory (price may start with '$')."""
    try:
        session.shop.add_product(name=name, price=price, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Product added to inventory successfully.")


@click.command("list-products")
@pass_session
def product_list(session: Session) -> None:
    """Display available products."""
    products = session.shop.list_products()

    if not products:
        click.echo("No products available.")
        return

    click.echo("Available Products:")
    for p in products:
        click.echo(f"{p.name} - {p.price}")
