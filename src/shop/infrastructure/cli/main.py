"""Entry point: an interactive shell over an in-memory Shop.

Everything lives in memory for one process run, so the commands are not
separate invocations of the program.  ``cli`` starts a session and then
feeds each input line to the ``shell`` command group.
"""

from __future__ import annotations

import logging
import shlex

import click

from shop.infrastructure.bootstrap import build_shop
from shop.infrastructure.cli.customer_commands import customer_add, customer_orders
from shop.infrastructure.cli.order_commands import order_place, order_total
from shop.infrastructure.cli.product_commands import product_add, product_list
from shop.infrastructure.cli.session import Session, pass_session
from shop.infrastructure.config import LOG_LEVELS, load_settings
from shop.infrastructure.logging_config import setup_logging

logger = logging.getLogger(__name__)

MENU = """\
Options:
  1. add-product NAME PRICE QUANTITY     Add product to inventory
  2. list-products                       Display available products
  3. add-customer NAME EMAIL             Add customer
  4. place-order EMAIL PRODUCT QUANTITY  Place an order
  5. order-total EMAIL PRODUCT           Calculate total price of an order
  6. customer-orders EMAIL               Display customer information and orders
  7. exit                                Exit
"""

# Numbered menu entries work too: "4 alice@example.com Widget 3".
MENU_ALIASES = {
    "1": "add-product",
    "2": "list-products",
    "3": "add-customer",
    "4": "place-order",
    "5": "order-total",
    "6": "customer-orders",
    "7": "exit",
}


class ShellGroup(click.Group):
    """Command group that also resolves the numeric menu aliases."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, MENU_ALIASES.get(cmd_name, cmd_name))


@click.group(cls=ShellGroup)
def shell() -> None:
    """Commands available inside a shop session."""


@shell.command("menu")
def shell_menu() -> None:
    """Show the list of options."""
    click.echo(MENU)


@shell.command("exit")
@pass_session
def shell_exit(session: Session) -> None:
    """End the session."""
    session.running = False
    click.echo("Exiting...")


# Register subcommands
shell.add_command(product_add)
shell.add_command(product_list)
shell.add_command(customer_add)
shell.add_command(customer_orders)
shell.add_command(order_place)
shell.add_command(order_total)


def run_line(session: Session, line: str) -> None:
    """Dispatch one line of input; failures are reported, never raised."""
    try:
        args = shlex.split(line)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        return

    if not args:
        return

    try:
        shell.main(args=args, prog_name="shop", standalone_mode=False, obj=session)
    except click.ClickException as exc:
        logger.debug("Command %r failed: %s", args[0], exc.format_message())
        exc.show()


@click.command()
@click.option("--currency", default=None, help="Currency for product prices [env: SHOP_CURRENCY].")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level [env: SHOP_LOG_LEVEL].",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Also append logs to this file [env: SHOP_LOG_FILE].",
)
def cli(currency: str | None, log_level: str | None, log_file: str | None) -> None:
    """Shop: manage products, customers and orders in one session."""
    try:
        settings = load_settings(currency=currency, log_level=log_level, log_file=log_file)
    except ValueError as exc:
        raise click.ClickException(str(exc))

    setup_logging(settings.log_level_number, settings.log_file)
    session = Session(shop=build_shop(settings))

    stdin = click.get_text_stream("stdin")
    interactive = stdin.isatty()

    click.echo(MENU)
    while session.running:
        if interactive:
            click.echo("Enter your choice: ", nl=False)
        line = stdin.readline()
        if not line:
            break
        run_line(session, line)

    logger.info("Session closed with %d order(s) placed", session.shop.order_count())
