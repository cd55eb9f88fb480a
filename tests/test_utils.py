"""Tests for settings, logging setup and parsing helpers."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from autoledger.config import Settings, load_settings
from autoledger.logging_config import configure_logging
from autoledger.utils.amount_parser import parse_amount, split_signed_amount
from autoledger.utils.date_parser import month_bounds, parse_date


class TestLoadSettings:
    """Environment-driven settings."""

    def test_defaults(self):
        """An empty environment gives the defaults."""
        assert load_settings({}) == Settings()
        assert Settings().control_account == "1100"

    def test_overrides(self):
        """Every variable is read."""
        settings = load_settings(
            {
                "AUTOLEDGER_DB_PATH": "/tmp/books.db",
                "AUTOLEDGER_DATABASE_URL": "postgresql://localhost/books",
                "AUTOLEDGER_CONTROL_ACCOUNT": "1101",
                "AUTOLEDGER_LOG_LEVEL": "debug",
                "AUTOLEDGER_LOG_JSON": "true",
            }
        )
        assert settings.db_path == "/tmp/books.db"
        assert settings.database_url == "postgresql://localhost/books"
        assert settings.control_account == "1101"
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_blank_control_account_falls_back(self):
        """Blank values do not override defaults."""
        assert load_settings({"AUTOLEDGER_CONTROL_ACCOUNT": "  "}).control_account == "1100"


def test_configure_logging_rejects_unknown_level():
    """Unknown level names are refused."""
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("CHATTY")


def test_configure_logging_accepts_json():
    """JSON rendering can be selected."""
    configure_logging("INFO", json=True)
    configure_logging("WARNING")


class TestParseAmount:
    """Amount parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("35", Decimal("35.00")),
            ("1,234.56", Decimal("1234.56")),
            ("R1 234.56", Decimal("1234.56")),
            ("-R35.00", Decimal("-35.00")),
            ("(35.00)", Decimal("-35.00")),
            ("-5000.00", Decimal("-5000.00")),
        ],
    )
    def test_formats(self, text, expected):
        """Common statement formats parse to two-place decimals."""
        assert parse_amount(text) == expected

    def test_invalid(self):
        """Garbage raises ValueError."""
        with pytest.raises(ValueError):
            parse_amount("abc")
        with pytest.raises(ValueError):
            parse_amount("")

    def test_split_signed_amount(self):
        """Negative amounts are debits, positive amounts are credits."""
        assert split_signed_amount(Decimal("-35.00")) == (Decimal("35.00"), Decimal("0.00"))
        assert split_signed_amount(Decimal("15000.00")) == (Decimal("0.00"), Decimal("15000.00"))


class TestParseDate:
    """Date parsing."""

    def test_iso(self):
        """ISO dates parse directly."""
        assert parse_date("2024-03-01") == date(2024, 3, 1)

    def test_day_first(self):
        """Slash dates are read day first, as on bank statements."""
        assert parse_date("01/03/2024") == date(2024, 3, 1)

    def test_relative(self):
        """today and yesterday are supported."""
        assert parse_date("today") == date.today()
        assert parse_date("Yesterday") == date.today() - timedelta(days=1)

    def test_invalid(self):
        """Unparseable text raises ValueError."""
        with pytest.raises(ValueError, match="Could not parse date"):
            parse_date("not a date")

    def test_month_bounds(self):
        """Month bounds cover the whole month."""
        assert month_bounds("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))
        with pytest.raises(ValueError):
            month_bounds("2024-13")
