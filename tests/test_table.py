from budget_ledger.domain import Category, EXPENSE, INCOME, MonthRange
from budget_ledger.services import LedgerService
from budget_ledger.table import budget_table, monthly_summary


def make_service():
    cats = (
        Category("income-main", "Main Income", INCOME, is_parent=True),
        Category("salary", "Salary", INCOME, parent_id="income-main"),
        Category("income-main-placeholder", "Add new Main Income Category", INCOME,
                 parent_id="income-main", is_placeholder=True),
        Category("expense-home", "Home", EXPENSE, is_parent=True),
        Category("rent", "Rent", EXPENSE, parent_id="expense-home"),
    )
    svc = LedgerService(categories=cats, month_range=MonthRange(2025, 1, 2025, 2), opening_balance=50)
    svc.update_value("salary", "2025-01", 1000)
    svc.update_value("rent", "2025-01", 400)
    svc.update_value("rent", "2025-02", 400)
    return svc


def test_budget_table_rows():
    svc = make_service()
    df = budget_table(svc)
    jan, feb = (m.label for m in svc.months)

    assert list(df.index) == [
        "income-main", "salary", "expense-home", "rent",
        "total-income", "total-expense", "profit-loss", "opening-balance", "closing-balance",
    ]
    assert list(df.columns) == ["name", "type", "row", jan, feb]
    assert df.loc["income-main", jan] == 1000
    assert df.loc["income-main", "row"] == "parent"
    assert df.loc["salary", feb] == 0
    assert df.loc["profit-loss", jan] == 600
    assert df.loc["opening-balance", feb] == 650
    assert df.loc["closing-balance", feb] == 250


def test_monthly_summary():
    df = monthly_summary(make_service())

    assert list(df.index) == ["2025-01", "2025-02"]
    assert df.loc["2025-01", "income"] == 1000
    assert df.loc["2025-02", "expense"] == 400
    assert df.loc["2025-02", "opening_balance"] == df.loc["2025-01", "closing_balance"]


def test_empty_axis_tables():
    svc = make_service()
    svc.update_month_range(MonthRange(2025, 3, 2025, 1))
    assert list(budget_table(svc).columns) == ["name", "type", "row"]
    assert monthly_summary(svc).empty
