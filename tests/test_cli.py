"""Tests for the command line."""

import pytest

from textile_ledger.cli import main


class TestCLI:
    def test_financials(self, capsys):
        main(["financials", "1000", "--discount-type", "percentage", "--discount-value", "10", "--gst-rate", "5"])
        out = capsys.readouterr().out
        assert "Discount" in out
        assert out.splitlines()[-1].split()[-1] == "945"

    def test_financials_default_gst(self, capsys):
        main(["financials", "200"])
        out = capsys.readouterr().out
        assert "GST (10%)" in out
        assert out.splitlines()[-1].split()[-1] == "220"

    def test_order_status(self, capsys):
        main(["order-status", "in_progress", "--due", "2026-10-18", "--as-of", "2026-10-19"])
        assert capsys.readouterr().out.strip() == "overdue\tOverdue by 1 day"

    def test_invoice_status_with_balance_cleared(self, capsys):
        main(
            [
                "invoice-status", "open",
                "--due", "2026-10-01",
                "--outstanding", "0",
                "--as-of", "2026-10-19",
            ]
        )
        assert capsys.readouterr().out.strip() == "open\tOpen"

    def test_invalid_status_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["order-status", "shipped", "--as-of", "2026-10-19"])
        assert exc_info.value.code == 2
        assert "shipped" in capsys.readouterr().err

    def test_bad_date(self):
        with pytest.raises(SystemExit):
            main(["order-status", "in_progress", "--due", "someday"])

    @pytest.mark.parametrize(
        "argv",
        [
            ["financials", "abc"],
            ["financials", "100", "--discount-value", "ten"],
            ["financials", "100", "--gst-rate", "NaN"],
            ["invoice-status", "open", "--outstanding", "lots"],
        ],
    )
    def test_bad_number_is_usage_error(self, argv, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2
        assert "not a number" in capsys.readouterr().err

    def test_grouped_number(self, capsys):
        main(["financials", "1,000", "--gst-rate", "0"])
        assert capsys.readouterr().out.splitlines()[-1].split()[-1] == "1,000"

    def test_invalid_settings_exit(self, monkeypatch, capsys):
        monkeypatch.setenv("ENGINE_DUE_SOON_DAYS", "-1")
        with pytest.raises(SystemExit) as exc_info:
            main(["order-status", "in_progress"])
        assert exc_info.value.code == 2
        assert "due_soon_days" in capsys.readouterr().err
