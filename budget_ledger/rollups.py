from functools import reduce

from budget_ledger.domain import EXPENSE, INCOME, LedgerSnapshot
from budget_ledger.functional import safe_category
from budget_ledger.tree import iter_children, iter_leaves

# Everything here is recomputed from the snapshot on each call; nothing is cached.


def subtotal(snap: LedgerSnapshot, parent_id: str, month_key: str) -> float:
    parent = safe_category(snap.categories, parent_id).get_or_else(None)
    if parent is None or not parent.is_parent:
        return 0
    return sum(c.value(month_key) for c in iter_children(snap.categories, parent_id))


def total(snap: LedgerSnapshot, cat_type: str, month_key: str) -> float:
    return sum(c.value(month_key) for c in iter_leaves(snap.categories, cat_type))


def profit_loss(snap: LedgerSnapshot, month_key: str) -> float:
    return total(snap, INCOME, month_key) - total(snap, EXPENSE, month_key)


def opening_balance(snap: LedgerSnapshot, month_key: str) -> float:
    """Balance carried into month_key.

    The first month opens with the stored opening balance; each later month
    opens with the previous month's closing balance. The chain is walked from
    the start of the axis every time. Keys that are not on the axis fall back
    to the stored opening balance.
    """
    keys = [m.key for m in snap.months]
    if month_key not in keys:
        return snap.opening_balance
    earlier = keys[: keys.index(month_key)]
    return reduce(lambda bal, key: bal + profit_loss(snap, key), earlier, snap.opening_balance)


def closing_balance(snap: LedgerSnapshot, month_key: str) -> float:
    return opening_balance(snap, month_key) + profit_loss(snap, month_key)
