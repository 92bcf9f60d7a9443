import json
import logging
from pathlib import Path
from typing import Tuple

from budget_ledger import config
from budget_ledger.domain import CATEGORY_TYPES, Category

logger = logging.getLogger(__name__)


def load_seed(path: str | Path) -> Tuple[Tuple[Category, ...], float]:
    """Read the starting chart of accounts and opening balance from JSON.

    Raises ValueError for records that do not describe a valid category.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    categories = tuple(_category_from_record(c) for c in data["categories"])
    opening_balance = float(data.get("opening_balance", 0))

    logger.info("Loaded %d categories from %s", len(categories), path)
    return categories, opening_balance


def load_default_categories() -> Tuple[Tuple[Category, ...], float]:
    return load_seed(config.SEED_PATH)


def _category_from_record(record: dict) -> Category:
    try:
        cat = Category(**{**record, "values": dict(record.get("values", {}))})
    except TypeError as exc:
        raise ValueError(f"Invalid category record {record!r}") from exc
    if cat.type not in CATEGORY_TYPES:
        raise ValueError(f"Category {cat.id!r} has unknown type {cat.type!r}")
    return cat
