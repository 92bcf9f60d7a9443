import logging
from dataclasses import replace
from typing import Optional, Tuple

from budget_ledger import config, rollups, tree
from budget_ledger.domain import INCOME, BudgetMonth, Category, LedgerSnapshot, MonthRange
from budget_ledger.events import LEDGER_CHANGED, EventBus, Handler, log_change_handler
from budget_ledger.functional import Either, Right, safe_category
from budget_ledger.months import generate_months
from budget_ledger.seed import load_default_categories

logger = logging.getLogger(__name__)


class LedgerService:
    """Facade owning the one authoritative ledger snapshot.

    Every mutation builds a complete new LedgerSnapshot, swaps it in, and then
    publishes LEDGER_CHANGED with the operation name and the new snapshot.
    Mutations that turn out to be no-ops (unknown ids, missing values) leave
    the snapshot untouched and publish nothing.
    """

    def __init__(
        self,
        categories: Optional[Tuple[Category, ...]] = None,
        month_range: Optional[MonthRange] = None,
        opening_balance: Optional[float] = None,
        bus: Optional[EventBus] = None,
    ):
        seeded_balance = 0.0
        if categories is None:
            categories, seeded_balance = load_default_categories()
        if opening_balance is None:
            override = config.opening_balance_override()
            opening_balance = seeded_balance if override is None else override
        self._range = month_range or config.default_month_range()
        self._snapshot = LedgerSnapshot(
            categories=tuple(categories),
            months=generate_months(self._range),
            opening_balance=opening_balance,
        )
        if bus is None:
            bus = EventBus()
            bus.subscribe(LEDGER_CHANGED, log_change_handler)
        self.bus = bus

    # read side
    @property
    def snapshot(self) -> LedgerSnapshot:
        return self._snapshot

    @property
    def categories(self) -> Tuple[Category, ...]:
        return self._snapshot.categories

    @property
    def months(self) -> Tuple[BudgetMonth, ...]:
        return self._snapshot.months

    @property
    def opening_balance(self) -> float:
        return self._snapshot.opening_balance

    @property
    def month_range(self) -> MonthRange:
        return self._range

    def subscribe(self, handler: Handler) -> None:
        self.bus.subscribe(LEDGER_CHANGED, handler)

    def unsubscribe(self, handler: Handler) -> None:
        self.bus.unsubscribe(LEDGER_CHANGED, handler)

    # mutations
    def update_value(self, category_id: str, month_key: str, value: float) -> None:
        cats = tree.update_value(self.categories, category_id, month_key, value)
        self._replace("update_value", categories=cats)

    def apply_to_all(self, category_id: str, month_key: str) -> None:
        cats = tree.apply_to_all(self.categories, self.months, category_id, month_key)
        self._replace("apply_to_all", categories=cats)

    def add_category(
        self, parent_id: str, name: str, cat_type: str, as_new_parent: bool = False
    ) -> Either[dict, Tuple[Category, ...]]:
        result = tree.add_category(self.categories, parent_id, name, cat_type, as_new_parent)
        if result.is_right():
            self._replace("add_category", categories=result.get_or_else(self.categories))
        return result

    def delete_category(self, category_id: str) -> None:
        self._replace("delete_category", categories=tree.delete_category(self.categories, category_id))

    def update_month_range(self, month_range: MonthRange) -> None:
        self._range = month_range
        self._replace("update_month_range", months=generate_months(month_range))

    def set_opening_balance(self, value: float) -> None:
        self._replace("set_opening_balance", opening_balance=value)

    def create_from_placeholder(self, placeholder_id: str, name: str) -> Either[dict, Tuple[Category, ...]]:
        """Run the "add new" flow for a placeholder row.

        A group's placeholder adds a leaf to that group; the top-level
        placeholder of a section adds a whole new group. Any other row is
        ignored, and so is an empty name.
        """
        if not name or not name.strip():
            return Right(self.categories)
        row = safe_category(self.categories, placeholder_id).get_or_else(None)
        if row is None or not row.is_placeholder:
            return Right(self.categories)
        if row.parent_id is None and row.is_parent:
            return self.add_category(row.id, name, row.type, as_new_parent=True)
        if row.parent_id is not None:
            return self.add_category(row.parent_id, name, row.type)
        return Right(self.categories)

    def first_input_category_id(self) -> Optional[str]:
        for c in tree.iter_leaves(self.categories, INCOME):
            return c.id
        return None

    # rollups
    def subtotal(self, category_id: str, month_key: str) -> float:
        return rollups.subtotal(self._snapshot, category_id, month_key)

    def total(self, cat_type: str, month_key: str) -> float:
        return rollups.total(self._snapshot, cat_type, month_key)

    def profit_loss(self, month_key: str) -> float:
        return rollups.profit_loss(self._snapshot, month_key)

    def opening_balance_for(self, month_key: str) -> float:
        return rollups.opening_balance(self._snapshot, month_key)

    def closing_balance(self, month_key: str) -> float:
        return rollups.closing_balance(self._snapshot, month_key)

    def _replace(self, operation: str, **changes) -> None:
        # tree functions hand back the very same tuple when nothing changed
        if changes.get("categories", None) is self._snapshot.categories:
            return
        new_snapshot = replace(self._snapshot, **changes)
        self._snapshot = new_snapshot
        logger.debug("Snapshot replaced by %s", operation)
        self.bus.publish(LEDGER_CHANGED, {"operation": operation, "snapshot": new_snapshot})
