"""Configuration for the budget ledger.

Defaults live here as module constants; each one can be overridden through
an environment variable.
"""

import logging
import os
from pathlib import Path

from budget_ledger.domain import MonthRange
from budget_ledger.months import parse_month_key

_PACKAGE_ROOT = Path(__file__).parent.resolve()

SEED_PATH = Path(
    os.getenv("BUDGET_LEDGER_SEED_PATH", _PACKAGE_ROOT / "data" / "default_categories.json")
)

START_MONTH = os.getenv("BUDGET_LEDGER_START", "2025-01")
END_MONTH = os.getenv("BUDGET_LEDGER_END", "2025-12")

# None means "use the value stored in the seed file"
OPENING_BALANCE = os.getenv("BUDGET_LEDGER_OPENING_BALANCE")

LOG_LEVEL = os.getenv("BUDGET_LEDGER_LOG_LEVEL", "WARNING")


def default_month_range() -> MonthRange:
    start_year, start_month = parse_month_key(START_MONTH)
    end_year, end_month = parse_month_key(END_MONTH)
    return MonthRange(start_year, start_month, end_year, end_month)


def opening_balance_override() -> float | None:
    if OPENING_BALANCE is None or not OPENING_BALANCE.strip():
        return None
    try:
        return float(OPENING_BALANCE)
    except ValueError as exc:
        raise ValueError(
            f"BUDGET_LEDGER_OPENING_BALANCE must be a number, got {OPENING_BALANCE!r}"
        ) from exc


def configure_logging(level: str | None = None) -> None:
    """Attach a basic stream handler at LOG_LEVEL (or the given level)."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
