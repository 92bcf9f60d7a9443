from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

INCOME = "income"
EXPENSE = "expense"
CATEGORY_TYPES = (INCOME, EXPENSE)


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    type: str                         # "income" or "expense"
    parent_id: Optional[str] = None   # None for top-level rows
    is_parent: bool = False
    is_placeholder: bool = False
    values: Mapping[str, float] = field(default_factory=dict)  # month key -> amount

    def __post_init__(self):
        # private read-only copy; callers keep no handle on it
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @property
    def is_leaf(self) -> bool:
        return not self.is_parent and not self.is_placeholder

    def value(self, month_key: str) -> float:
        return self.values.get(month_key, 0)

    def with_value(self, month_key: str, value: float) -> "Category":
        return replace(self, values={**self.values, month_key: value})


@dataclass(frozen=True)
class BudgetMonth:
    key: str     # "2025-01"
    label: str   # "January 2025"
    year: int
    month: int


@dataclass(frozen=True)
class MonthRange:
    start_year: int
    start_month: int
    end_year: int
    end_month: int


# One consistent view of the ledger; replaced as a whole on every change.
@dataclass(frozen=True)
class LedgerSnapshot:
    categories: Tuple[Category, ...] = ()
    months: Tuple[BudgetMonth, ...] = ()
    opening_balance: float = 0
