"""Tabular views of the ledger as pandas DataFrames.

`budget_table` mirrors the editing grid row for row, with the rollup rows
appended underneath. `monthly_summary` gives one row per month.
"""

from typing import Dict, List

import pandas as pd

from budget_ledger.domain import EXPENSE, INCOME
from budget_ledger.services import LedgerService

SUMMARY_ROWS = (
    ("total-income", "Total Income"),
    ("total-expense", "Total Expenses"),
    ("profit-loss", "Profit / Loss"),
    ("opening-balance", "Opening Balance"),
    ("closing-balance", "Closing Balance"),
)


def _summary_value(service: LedgerService, row_id: str, month_key: str) -> float:
    if row_id == "total-income":
        return service.total(INCOME, month_key)
    if row_id == "total-expense":
        return service.total(EXPENSE, month_key)
    if row_id == "profit-loss":
        return service.profit_loss(month_key)
    if row_id == "opening-balance":
        return service.opening_balance_for(month_key)
    return service.closing_balance(month_key)


def budget_table(service: LedgerService) -> pd.DataFrame:
    months = service.months
    rows: List[Dict[str, object]] = []

    for cat in service.categories:
        if cat.is_placeholder:
            continue
        row: Dict[str, object] = {
            "id": cat.id,
            "name": cat.name,
            "type": cat.type,
            "row": "parent" if cat.is_parent else "leaf",
        }
        for m in months:
            row[m.label] = service.subtotal(cat.id, m.key) if cat.is_parent else cat.value(m.key)
        rows.append(row)

    for row_id, label in SUMMARY_ROWS:
        row = {"id": row_id, "name": label, "type": None, "row": "summary"}
        for m in months:
            row[m.label] = _summary_value(service, row_id, m.key)
        rows.append(row)

    columns = ["id", "name", "type", "row"] + [m.label for m in months]
    return pd.DataFrame(rows, columns=columns).set_index("id")


def monthly_summary(service: LedgerService) -> pd.DataFrame:
    rows = [
        {
            "month": m.key,
            "label": m.label,
            "income": service.total(INCOME, m.key),
            "expense": service.total(EXPENSE, m.key),
            "profit_loss": service.profit_loss(m.key),
            "opening_balance": service.opening_balance_for(m.key),
            "closing_balance": service.closing_balance(m.key),
        }
        for m in service.months
    ]
    columns = ["month", "label", "income", "expense", "profit_loss", "opening_balance", "closing_balance"]
    return pd.DataFrame(rows, columns=columns).set_index("month")
