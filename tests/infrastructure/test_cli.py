"""End-to-end tests for the click CLI against a temporary data directory."""

import logging

import pytest
from click.testing import CliRunner

from pos.config.settings import get_settings
from pos.infrastructure.cli.main import cli


@pytest.fixture
def runner(monkeypatch, tmp_path):
    monkeypatch.setenv("POS_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("LOG_CONSOLE", "false")
    monkeypatch.setenv("POS_TAX_RATE", "0.16")
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.delenv("CLOUDINARY_CLOUD_NAME", raising=False)
    monkeypatch.delenv("CLOUDINARY_UPLOAD_PRESET", raising=False)
    get_settings.cache_clear()
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield CliRunner()
    root.handlers[:] = handlers
    root.setLevel(level)
    get_settings.cache_clear()


def _invoke(runner, *args):
    return runner.invoke(cli, list(args))


def _add(runner, product_id="P1", name="Brake Pad", price="100", stock="10", *extra):
    return _invoke(runner, "product", "add", "--id", product_id, "--name", name,
                   "--price", price, "--stock", stock, *extra)


class TestProductCommands:

    def test_add_and_show(self, runner):
        result = _add(runner, "P1", "Brake Pad", "100", "10", "--category", "Brakes")
        assert result.exit_code == 0, result.output
        assert "Product P1 'Brake Pad' added at MXN 100.00 (stock 10)" in result.output

        shown = _invoke(runner, "product", "show", "--id", "P1")
        assert shown.exit_code == 0
        assert "Brake Pad" in shown.output
        assert "MXN 1000.00" in shown.output
        assert "Brakes" in shown.output

    def test_add_duplicate_fails(self, runner):
        _add(runner)
        result = _add(runner)
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_add_invalid_price_fails(self, runner):
        result = _add(runner, "P1", "Brake Pad", "0")
        assert result.exit_code == 1
        assert "greater than zero" in result.output

    def test_image_without_cloudinary_fails(self, runner, tmp_path):
        image = tmp_path / "pad.jpg"
        image.write_bytes(b"jpg")
        result = _add(runner, "P1", "Brake Pad", "100", "10", "--image", str(image))
        assert result.exit_code == 1
        assert "not configured" in result.output

    def test_list_search_and_low_stock(self, runner):
        _add(runner, "P1", "Brake Pad", "100", "25")
        _add(runner, "P2", "Oil Filter", "50", "3")
        _add(runner, "P3", "Air Filter", "40", "0")

        listed = _invoke(runner, "product", "list")
        assert all(pid in listed.output for pid in ("P1", "P2", "P3"))

        found = _invoke(runner, "product", "search", "filter")
        assert "P2" in found.output and "P3" in found.output
        assert "P1" not in found.output

        low = _invoke(runner, "product", "low-stock")
        assert "P2" in low.output and "LOW" in low.output
        assert "P3" not in low.output

        low_all = _invoke(runner, "product", "low-stock", "--include-out")
        assert "P3" in low_all.output and "OUT" in low_all.output

    def test_empty_list(self, runner):
        result = _invoke(runner, "product", "list")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_update(self, runner):
        _add(runner)
        result = _invoke(runner, "product", "update", "--id", "P1", "--price", "120")
        assert result.exit_code == 0, result.output
        assert "MXN 120.00" in result.output

    def test_delete(self, runner):
        _add(runner)
        result = _invoke(runner, "product", "delete", "--id", "P1", "--yes")
        assert result.exit_code == 0
        shown = _invoke(runner, "product", "show", "--id", "P1")
        assert shown.exit_code == 1
        assert "not found" in shown.output


class TestStockCommands:

    def test_update_and_history(self, runner):
        _add(runner, "P1", "Brake Pad", "100", "10")

        result = _invoke(runner, "stock", "update", "--id", "P1", "--type", "in",
                         "--quantity", "5", "--reason", "Supplier delivery")
        assert result.exit_code == 0, result.output
        assert "is now 15" in result.output

        result = _invoke(runner, "stock", "update", "--id", "P1", "--type", "ADJUSTMENT",
                         "--quantity", "-2", "--reason", "Physical count")
        assert "is now 13" in result.output

        history = _invoke(runner, "stock", "history", "--id", "P1")
        assert history.exit_code == 0
        assert "ADJUSTMENT" in history.output
        assert "Supplier delivery" in history.output

    def test_history_empty(self, runner):
        _add(runner)
        result = _invoke(runner, "stock", "history", "--id", "P1")
        assert "No stock movements recorded." in result.output

    def test_history_after_product_deleted(self, runner):
        _add(runner)
        _invoke(runner, "stock", "update", "--id", "P1", "--type", "IN",
                "--quantity", "4", "--reason", "Supplier delivery")
        _invoke(runner, "product", "delete", "--id", "P1", "--yes")

        history = _invoke(runner, "stock", "history", "--id", "P1")

        assert history.exit_code == 0, history.output
        assert "Supplier delivery" in history.output

    def test_out_beyond_stock_fails(self, runner):
        _add(runner, "P1", "Brake Pad", "100", "2")
        result = _invoke(runner, "stock", "update", "--id", "P1", "--type", "OUT",
                         "--quantity", "3", "--reason", "Damaged")
        assert result.exit_code == 1
        assert "Insufficient stock" in result.output


class TestSaleCommands:

    def test_create_prints_receipt(self, runner):
        _add(runner, "P1", "Brake Pad", "100", "10")
        _add(runner, "P2", "Oil Filter", "50", "5")

        result = _invoke(runner, "sale", "create", "--items", "P1:3,P2:1", "--customer", "Ana")

        assert result.exit_code == 0, result.output
        assert "Customer: Ana" in result.output
        assert "MXN 350.00" in result.output
        assert "MXN 56.00" in result.output

        shown = _invoke(runner, "product", "show", "--id", "P1")
        assert "Stock:           7" in shown.output

        history = _invoke(runner, "stock", "history", "--id", "P1")
        assert "OUT" in history.output
        assert "Sale #" in history.output

    def test_show_sale(self, runner):
        _add(runner)
        created = _invoke(runner, "sale", "create", "--items", "P1:1")
        sale_id = created.output.splitlines()[0].split()[1]

        shown = _invoke(runner, "sale", "show", "--id", sale_id)
        assert shown.exit_code == 0
        assert sale_id in shown.output

    def test_insufficient_stock(self, runner):
        _add(runner, "P1", "Brake Pad", "100", "5")
        result = _invoke(runner, "sale", "create", "--items", "P1:10")
        assert result.exit_code == 1
        assert "available: 5, requested: 10" in result.output

    def test_bad_items_format(self, runner):
        result = _invoke(runner, "sale", "create", "--items", "P1-3")
        assert result.exit_code == 2
        assert "ProductID:Quantity" in result.output

    def test_unknown_sale(self, runner):
        result = _invoke(runner, "sale", "show", "--id", "nope")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestDashboardCommand:

    def test_empty(self, runner):
        result = _invoke(runner, "dashboard")
        assert result.exit_code == 0
        assert "Products:         0" in result.output
        assert "(none)" in result.output

    def test_with_data(self, runner):
        _add(runner, "P1", "Brake Pad", "100", "10")
        _invoke(runner, "sale", "create", "--items", "P1:4")

        result = _invoke(runner, "dashboard")

        assert "Inventory value:  600.00" in result.output
        assert "Low stock:        1" in result.output
        assert "Brake Pad" in result.output
