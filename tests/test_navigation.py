from budget_ledger.domain import Category, EXPENSE, INCOME
from budget_ledger.navigation import (
    ARROW_DOWN, ARROW_UP, ENTER, TAB, Cursor,
    move, next_cell, next_row, next_row_same_month, previous_row_same_month
)

CATS = (
    Category("income-main", "Main Income", INCOME, is_parent=True),
    Category("salary", "Salary", INCOME, parent_id="income-main"),
    Category("bonus", "Bonus", INCOME, parent_id="income-main"),
    Category("income-main-placeholder", "Add new Main Income Category", INCOME,
             parent_id="income-main", is_placeholder=True),
    Category("income-placeholder", "Add new Income Category", INCOME,
             is_parent=True, is_placeholder=True),
    Category("expense-home", "Home", EXPENSE, is_parent=True),
    Category("rent", "Rent", EXPENSE, parent_id="expense-home"),
    Category("expense-home-placeholder", "Add new Home Category", EXPENSE,
             parent_id="expense-home", is_placeholder=True),
    Category("expense-placeholder", "Add new Expense Category", EXPENSE,
             is_parent=True, is_placeholder=True),
)


def test_next_row_adjacent_leaf():
    assert next_row(CATS, Cursor("salary", 4)) == Cursor("bonus", 0)


def test_next_row_skips_parents_and_placeholders():
    assert next_row(CATS, Cursor("bonus", 2)) == Cursor("rent", 0)


def test_next_row_at_end():
    assert next_row(CATS, Cursor("rent", 0)) is None


def test_next_row_from_parent_row():
    assert next_row(CATS, Cursor("expense-home", 0)) == Cursor("rent", 0)


def test_next_cell():
    assert next_cell(Cursor("salary", 3)) == Cursor("salary", 4)


def test_same_month_moves():
    assert next_row_same_month(CATS, Cursor("bonus", 5)) == Cursor("rent", 5)
    assert previous_row_same_month(CATS, Cursor("rent", 5)) == Cursor("bonus", 5)
    assert previous_row_same_month(CATS, Cursor("bonus", 1)) == Cursor("salary", 1)


def test_previous_row_at_top():
    assert previous_row_same_month(CATS, Cursor("salary", 0)) is None


def test_unknown_cursor():
    assert next_row(CATS, Cursor("ghost", 0)) is None
    assert previous_row_same_month(CATS, Cursor("ghost", 0)) is None


def test_move_enter():
    assert move(CATS, Cursor("salary", 6), ENTER, 12) == Cursor("bonus", 0)


def test_move_tab():
    assert move(CATS, Cursor("salary", 6), TAB, 12) == Cursor("salary", 7)
    assert move(CATS, Cursor("salary", 11), TAB, 12) == Cursor("bonus", 0)
    assert move(CATS, Cursor("rent", 11), TAB, 12) is None


def test_move_arrows():
    assert move(CATS, Cursor("bonus", 3), ARROW_DOWN, 12) == Cursor("rent", 3)
    assert move(CATS, Cursor("rent", 3), ARROW_UP, 12) == Cursor("bonus", 3)


def test_move_ignores_other_keys():
    assert move(CATS, Cursor("salary", 0), "Escape", 12) is None
