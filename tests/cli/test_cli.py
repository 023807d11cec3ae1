"""End-to-end tests for the command-line interface."""

import json
import logging

import pytest
from click.testing import CliRunner

from shop.infrastructure.cli.main import cli

WIDGET = [
    "product", "add",
    "--title", "Widget", "--description", "d", "--code", "A1",
    "--price", "10", "--stock", "5", "--category", "c",
]


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, list(args), env={"SHOP_DATA_DIR": str(tmp_path)})

    yield _run

    # The CLI points the "shop" logger at the runner's temporary stderr.
    shop_logger = logging.getLogger("shop")
    shop_logger.handlers.clear()
    shop_logger.propagate = True


class TestProductCommands:

    def test_add_and_show(self, run, tmp_path):
        result = run(*WIDGET)
        assert result.exit_code == 0, result.output
        assert "Product #1 'Widget' added" in result.output

        shown = run("product", "show", "--id", "1")
        assert "Title:       Widget" in shown.output
        assert json.loads((tmp_path / "products.json").read_text())[0]["code"] == "A1"

    def test_duplicate_code_is_an_error(self, run):
        run(*WIDGET)
        result = run(*WIDGET)
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_list_with_limit(self, run):
        run(*WIDGET)
        run(*[a if a != "A1" else "B2" for a in WIDGET])
        result = run("product", "list", "--limit", "1", "--page", "2")
        assert result.exit_code == 0
        assert "B2" in result.output
        assert "A1" not in result.output
        assert "Page 2 of 2" in result.output

    def test_list_empty(self, run):
        assert "No products found." in run("product", "list").output

    def test_update_parses_json_values(self, run, tmp_path):
        run(*WIDGET)
        result = run("product", "update", "--id", "1", "--set", "price=12.5", "--set", "title=Big Widget")
        assert result.exit_code == 0, result.output

        raw = json.loads((tmp_path / "products.json").read_text())[0]
        assert raw["price"] == 12.5
        assert raw["title"] == "Big Widget"
        assert raw["stock"] == 5

    def test_update_thumbnail_as_plain_string(self, run, tmp_path):
        run(*WIDGET)
        result = run("product", "update", "--id", "1", "--set", "thumbnails=a.png")
        assert result.exit_code == 0, result.output

        raw = json.loads((tmp_path / "products.json").read_text())[0]
        assert raw["thumbnails"] == ["a.png"]

    def test_update_numeric_code_clashes_with_existing(self, run, tmp_path):
        run(*[a if a != "A1" else "123" for a in WIDGET])
        run(*[a if a != "A1" else "B2" for a in WIDGET])

        result = run("product", "update", "--id", "2", "--set", "code=123")
        assert result.exit_code == 1
        assert "already exists" in result.output

        raw = json.loads((tmp_path / "products.json").read_text())
        assert [p["code"] for p in raw] == ["123", "B2"]

    def test_update_bad_assignment(self, run):
        run(*WIDGET)
        result = run("product", "update", "--id", "1", "--set", "price")
        assert result.exit_code == 2

    def test_delete_twice(self, run):
        run(*WIDGET)
        assert run("product", "delete", "--id", "1").exit_code == 0
        result = run("product", "delete", "--id", "1")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCartCommands:

    def test_add_merges_and_show_totals(self, run, tmp_path):
        run(*WIDGET)
        assert "Cart #1 created." in run("cart", "create").output

        run("cart", "add", "--id", "1", "--product", "1", "--quantity", "2")
        result = run("cart", "add", "--id", "1", "--product", "1", "--quantity", "3")
        assert "quantity is now 5" in result.output

        assert json.loads((tmp_path / "carts.json").read_text()) == [
            {"id": 1, "products": [{"product": 1, "quantity": 5}]}
        ]
        shown = run("cart", "show", "--id", "1")
        assert "Widget" in shown.output
        assert "50.0" in shown.output

    def test_add_unknown_product(self, run):
        run("cart", "create")
        result = run("cart", "add", "--id", "1", "--product", "7")
        assert result.exit_code == 1
        assert "Product with ID 7 not found" in result.output

    def test_add_rejects_non_positive_quantity(self, run):
        run(*WIDGET)
        run("cart", "create")
        result = run("cart", "add", "--id", "1", "--product", "1", "--quantity", "0")
        assert result.exit_code == 2

    def test_set_remove_delete(self, run):
        run(*WIDGET)
        run("cart", "create")
        run("cart", "add", "--id", "1", "--product", "1")

        assert "1 line(s), 4 item(s)" in run("cart", "set", "--id", "1", "--product", "1", "--quantity", "4").output
        assert "0 line(s)" in run("cart", "remove", "--id", "1", "--product", "1").output
        assert run("cart", "delete", "--id", "1").exit_code == 0
        assert "No carts found." in run("cart", "list").output
