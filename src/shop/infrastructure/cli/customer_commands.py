"""CLI commands for the customer registry."""

from __future__ import annotations

import click

from shop.domain.exceptions import DomainException
from shop.infrastructure.cli.session import Session, pass_session


@click.command("add-customer")
@click.argument("name")
@click.argument("email")
@pass_session
def customer_add(session: Session, name: str, email: str) -> None:
    """Register a customer (quote names that contain spaces)."""
    try:
        session.shop.add_customer(name=name, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Customer added successfully.")


@click.command("customer-orders")
@click.argument("email")
@pass_session
def customer_orders(session: Session, email: str) -> None:
    """Display a customer and the orders they placed."""
    try:
        dto = session.shop.orders_for_customer(email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Orders placed by {dto.customer_name}:")
    if not dto.orders:
        click.echo("  (no orders)")
    for line in dto.orders:
        click.echo(f"Product: {line.product_name}, Quantity: {line.quantity}")
