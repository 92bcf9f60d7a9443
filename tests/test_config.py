import logging

import pytest

from budget_ledger import config
from budget_ledger.domain import MonthRange


def test_default_month_range(monkeypatch):
    monkeypatch.setattr(config, "START_MONTH", "2024-07")
    monkeypatch.setattr(config, "END_MONTH", "2025-06")
    assert config.default_month_range() == MonthRange(2024, 7, 2025, 6)


def test_bad_month_setting(monkeypatch):
    monkeypatch.setattr(config, "START_MONTH", "July")
    with pytest.raises(ValueError):
        config.default_month_range()


def test_opening_balance_override(monkeypatch):
    monkeypatch.setattr(config, "OPENING_BALANCE", None)
    assert config.opening_balance_override() is None
    monkeypatch.setattr(config, "OPENING_BALANCE", "250.5")
    assert config.opening_balance_override() == 250.5
    monkeypatch.setattr(config, "OPENING_BALANCE", "lots")
    with pytest.raises(ValueError):
        config.opening_balance_override()


def test_seed_path_points_at_bundled_file():
    assert config.SEED_PATH.name == "default_categories.json"


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setattr(config, "LOG_LEVEL", "debug")

    config.configure_logging()
    config.configure_logging("info")

    assert [c["level"] for c in calls] == ["DEBUG", "INFO"]
    assert "%(name)s" in calls[0]["format"]
