"""End-to-end tests of the interactive shell, driven through CliRunner."""

from click.testing import CliRunner

from shop.infrastructure.cli.main import cli


def _run(*lines: str, args: list[str] | None = None):
    runner = CliRunner()
    return runner.invoke(cli, args or [], input="\n".join(lines) + "\n", env={})


class TestShellSession:

    def test_full_session(self):
        result = _run(
            "add-product Widget $9.99 100",
            "add-customer 'Alice Smith' alice@example.com",
            "place-order alice@example.com Widget 3",
            "place-order alice@example.com Widget 2",
            "order-total alice@example.com Widget",
            "customer-orders alice@example.com",
            "exit",
        )
        assert result.exit_code == 0
        assert "Product added to inventory successfully." in result.output
        assert "Customer added successfully." in result.output
        assert "Order placed successfully. (total $29.97)" in result.output
        assert (
            "Total price of the orders for customer alice@example.com "
            "and product Widget: $49.95"
        ) in result.output
        assert "Orders placed by Alice Smith:" in result.output
        assert "Product: Widget, Quantity: 3" in result.output
        assert "Product: Widget, Quantity: 2" in result.output
        assert "Exiting..." in result.output

    def test_menu_printed_on_start(self):
        result = _run("exit")
        assert "Options:" in result.output
        assert "7. exit" in result.output

    def test_list_products(self):
        result = _run("add-product Widget 5.5 1", "add-product Gadget $2 0", "list-products", "exit")
        assert "Available Products:" in result.output
        assert "Widget - $5.50" in result.output
        assert "Gadget - $2.00" in result.output

    def test_sub_cent_prices_are_shown_as_stored(self):
        result = _run(
            "add-product Widget 1.005 1",
            "add-customer Alice alice@example.com",
            "place-order alice@example.com Widget 2",
            "list-products",
            "order-total alice@example.com Widget",
            "exit",
        )
        assert "Widget - $1.005" in result.output
        assert "and product Widget: $2.010" in result.output

    def test_end_of_input_ends_session(self):
        result = _run("list-products")
        assert result.exit_code == 0
        assert "No products available." in result.output

    def test_commands_after_exit_are_ignored(self):
        result = _run("exit", "add-product Widget 1 1")
        assert result.exit_code == 0
        assert "Product added" not in result.output

    def test_numeric_menu_aliases(self):
        result = _run("1 Widget 3 10", "2", "7")
        assert "Product added to inventory successfully." in result.output
        assert "Widget - $3.00" in result.output
        assert "Exiting..." in result.output

    def test_currency_option(self):
        result = _run("add-product Widget 3 1", "list-products", "exit", args=["--currency", "eur"])
        assert "Widget - 3.00 EUR" in result.output


class TestShellErrors:

    def test_domain_errors_are_reported_and_session_continues(self):
        result = _run(
            "add-customer Alice not-an-email",
            "add-product Widget $abc 1",
            "add-product Widget -1 1",
            "add-product Widget 1 -1",
            "add-product 'Blue Widget' 1 1",
            "add-product Widget 1 1",
            "add-product Widget 2 2",
            "place-order bob@example.com Widget 1",
            "exit",
        )
        assert result.exit_code == 0
        assert "Invalid email format." in result.output
        assert "Invalid price: '$abc'" in result.output
        assert "Product price must be greater than zero." in result.output
        assert "Product quantity must be non-negative." in result.output
        assert "Product name must be alphanumeric." in result.output
        assert "Product with the same name already exists." in result.output
        assert "Customer with the provided email does not exist." in result.output
        assert "Exiting..." in result.output

    def test_unknown_product_reported(self):
        result = _run(
            "add-customer Alice alice@example.com",
            "order-total alice@example.com Gizmo",
            "exit",
        )
        assert "Product with the provided name does not exist." in result.output

    def test_usage_errors_are_reported(self):
        result = _run("place-order alice@example.com Widget three", "frobnicate", "add-customer", "exit")
        assert result.exit_code == 0
        assert "'three' is not a valid integer" in result.output
        assert "No such command 'frobnicate'" in result.output
        assert "Missing argument 'NAME'" in result.output
        assert "Exiting..." in result.output

    def test_unbalanced_quotes_reported(self):
        result = _run("add-customer 'Alice alice@example.com", "exit")
        assert result.exit_code == 0
        assert "Error:" in result.output

    def test_bad_log_level_rejected(self):
        result = _run("exit", args=["--log-level", "LOUD"])
        assert result.exit_code != 0
