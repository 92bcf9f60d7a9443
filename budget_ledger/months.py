import logging
import re
from typing import Tuple

from budget_ledger.domain import BudgetMonth, MonthRange

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MONTH_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def month_key(year: int, month: int) -> str:
    return f"{year}-{month:02d}"


def month_label(year: int, month: int) -> str:
    return f"{MONTH_NAMES[month - 1]} {year}"


def parse_month_key(key: str) -> Tuple[int, int]:
    """Split a 'YYYY-MM' key into (year, month), rejecting anything else."""
    match = MONTH_KEY_PATTERN.fullmatch(key.strip())
    if not match:
        raise ValueError(f"Month key must look like YYYY-MM, got {key!r}")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return year, month


def is_inverted(rng: MonthRange) -> bool:
    return (rng.end_year, rng.end_month) < (rng.start_year, rng.start_month)


def clamp_range(rng: MonthRange) -> MonthRange:
    # pull the end bound up to the start when the user picked them backwards
    if not is_inverted(rng):
        return rng
    return MonthRange(rng.start_year, rng.start_month, rng.start_year, rng.start_month)


def generate_months(rng: MonthRange) -> Tuple[BudgetMonth, ...]:
    """Build the month axis from start to end, both inclusive.

    An inverted range yields an empty axis rather than an error.
    """
    if is_inverted(rng):
        logger.debug("Inverted month range %s, axis is empty", rng)

    months = []
    year, month = rng.start_year, rng.start_month
    while (year, month) <= (rng.end_year, rng.end_month):
        months.append(
            BudgetMonth(
                key=month_key(year, month),
                label=month_label(year, month),
                year=year,
                month=month,
            )
        )
        month += 1
        if month > 12:
            month = 1
            year += 1
    return tuple(months)
