from typing import NamedTuple, Optional, Sequence

from budget_ledger.domain import Category
from budget_ledger.tree import find_index

ENTER = "Enter"
TAB = "Tab"
ARROW_DOWN = "ArrowDown"
ARROW_UP = "ArrowUp"


class Cursor(NamedTuple):
    category_id: str
    month_index: int


def _scan(cats: Sequence[Category], start: int, step: int) -> Optional[Category]:
    # first row from start onwards (in step direction) that takes input
    i = start
    while 0 <= i < len(cats):
        if cats[i].is_leaf:
            return cats[i]
        i += step
    return None


def _neighbour(cats: Sequence[Category], cursor: Cursor, step: int) -> Optional[Category]:
    idx = find_index(tuple(cats), cursor.category_id)
    if idx == -1:
        return None
    return _scan(cats, idx + step, step)


def next_row(cats: Sequence[Category], cursor: Cursor) -> Optional[Cursor]:
    target = _neighbour(cats, cursor, 1)
    return Cursor(target.id, 0) if target else None


def next_cell(cursor: Cursor) -> Cursor:
    return Cursor(cursor.category_id, cursor.month_index + 1)


def next_row_same_month(cats: Sequence[Category], cursor: Cursor) -> Optional[Cursor]:
    target = _neighbour(cats, cursor, 1)
    return Cursor(target.id, cursor.month_index) if target else None


def previous_row_same_month(cats: Sequence[Category], cursor: Cursor) -> Optional[Cursor]:
    target = _neighbour(cats, cursor, -1)
    return Cursor(target.id, cursor.month_index) if target else None


def move(
    cats: Sequence[Category], cursor: Cursor, key: str, month_count: int
) -> Optional[Cursor]:
    """Where keyboard focus should go after `key` is pressed at `cursor`.

    Enter jumps to the start of the next editable row, Tab walks right and
    wraps to the next row after the last month, arrows move within the same
    month column. Parent and placeholder rows are skipped. Returns None when
    there is nowhere to go or the key is not a navigation key.
    """
    if key == ENTER:
        return next_row(cats, cursor)
    if key == TAB:
        if cursor.month_index >= month_count - 1:
            return next_row(cats, cursor)
        return next_cell(cursor)
    if key == ARROW_DOWN:
        return next_row_same_month(cats, cursor)
    if key == ARROW_UP:
        return previous_row_same_month(cats, cursor)
    return None
