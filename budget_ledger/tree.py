import logging
import re
from typing import Iterator, Optional, Tuple

from budget_ledger.domain import BudgetMonth, Category
from budget_ledger.functional import Either, Right, check_name_available

logger = logging.getLogger(__name__)

Categories = Tuple[Category, ...]

_WHITESPACE = re.compile(r"\s+")


def slugify(name: str) -> str:
    return _WHITESPACE.sub("-", name.lower())


def parent_id_for(cat_type: str, name: str) -> str:
    return f"{cat_type}-{slugify(name)}"


def placeholder_id_for(cat_type: str, name: str) -> str:
    return f"{parent_id_for(cat_type, name)}-placeholder"


def leaf_id_for(name: str) -> str:
    return f"new-{slugify(name)}"


def find_index(cats: Categories, cat_id: str) -> int:
    for i, c in enumerate(cats):
        if c.id == cat_id:
            return i
    return -1


def iter_children(
    cats: Categories, parent_id: str, include_placeholders: bool = False
) -> Iterator[Category]:
    for c in cats:
        if c.parent_id == parent_id and (include_placeholders or not c.is_placeholder):
            yield c


def get_children(
    cats: Categories, parent_id: str, include_placeholders: bool = False
) -> Categories:
    return tuple(iter_children(cats, parent_id, include_placeholders))


def iter_leaves(cats: Categories, cat_type: Optional[str] = None) -> Iterator[Category]:
    for c in cats:
        if c.is_leaf and (cat_type is None or c.type == cat_type):
            yield c


def insertion_index(cats: Categories, anchor_index: int, cat_type: str) -> int:
    """Position where a new row under cats[anchor_index] goes.

    Scans forward over the anchor's children and stops at the next parent row
    of the same type. New rows land after the last real child, ahead of the
    group's placeholder, so the placeholder stays the last row of the run.
    A top-level "add new group" placeholder keeps its place at the end of its
    section, so new groups go in front of it.
    """
    anchor = cats[anchor_index]
    if anchor.is_placeholder:
        return anchor_index

    last_child = None
    for i in range(anchor_index + 1, len(cats)):
        c = cats[i]
        if c.parent_id == anchor.id:
            last_child = i
        elif c.is_parent and c.type == cat_type:
            break

    if last_child is None:
        return anchor_index + 1
    if cats[last_child].is_placeholder:
        return last_child
    return last_child + 1


def new_rows(parent_id: str, name: str, cat_type: str, as_new_parent: bool) -> Categories:
    if not as_new_parent:
        return (Category(id=leaf_id_for(name), name=name, type=cat_type, parent_id=parent_id),)

    group_id = parent_id_for(cat_type, name)
    return (
        Category(id=group_id, name=name, type=cat_type, is_parent=True),
        Category(
            id=placeholder_id_for(cat_type, name),
            name=f"Add new {name} Category",
            type=cat_type,
            parent_id=group_id,
            is_placeholder=True,
        ),
    )


def add_category(
    cats: Categories, parent_id: str, name: str, cat_type: str, as_new_parent: bool
) -> Either[dict, Categories]:
    """Insert a leaf under parent_id, or a new group plus its placeholder.

    An unknown parent_id leaves the tree as it is. A sibling name clash comes
    back as a Left carrying the error details.
    """
    anchor_index = find_index(cats, parent_id)
    if anchor_index == -1:
        logger.debug("add_category: unknown parent %r, nothing to do", parent_id)
        return Right(cats)

    sibling_parent = None if as_new_parent else parent_id
    checked = check_name_available(cats, name, sibling_parent, cat_type, as_new_parent)
    if checked.is_left():
        logger.info("add_category rejected: %s", checked.get_error()["message"])

    def insert(_name: str) -> Categories:
        at = insertion_index(cats, anchor_index, cat_type)
        rows = new_rows(parent_id, name, cat_type, as_new_parent)
        logger.debug("add_category: inserting %s at %d", [r.id for r in rows], at)
        return cats[:at] + rows + cats[at:]

    return checked.map(insert)


def delete_category(cats: Categories, cat_id: str) -> Categories:
    # children are left in place; they keep a parent_id that no longer resolves
    idx = find_index(cats, cat_id)
    if idx == -1:
        logger.debug("delete_category: unknown category %r", cat_id)
        return cats
    return cats[:idx] + cats[idx + 1:]


def update_value(cats: Categories, cat_id: str, month_key: str, value: float) -> Categories:
    idx = find_index(cats, cat_id)
    if idx == -1:
        logger.debug("update_value: unknown category %r", cat_id)
        return cats
    return cats[:idx] + (cats[idx].with_value(month_key, value),) + cats[idx + 1:]


def apply_to_all(
    cats: Categories, months: Tuple[BudgetMonth, ...], cat_id: str, month_key: str
) -> Categories:
    idx = find_index(cats, cat_id)
    if idx == -1 or month_key not in cats[idx].values:
        logger.debug("apply_to_all: no value for %r at %s", cat_id, month_key)
        return cats

    value = cats[idx].values[month_key]
    result = cats
    for m in months:
        result = update_value(result, cat_id, m.key, value)
    return result
