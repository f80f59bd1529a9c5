"""Distribution percentage maintenance for protein items.

The active protein items of one course and one category split that
category's budget; their distribution percentages must add up to 100.
Every write path (create, delete, category/type/active changes) goes
through rebalance_category.
"""
from typing import Dict, Iterable, List

from feast.domain.MenuItem import MenuItem, ProteinItem


def category_siblings(items: Iterable[MenuItem], course_id: str, category: str) -> List[MenuItem]:
    """Active protein items of `course_id` in `category`, in sort order."""
    siblings = [
        item for item in items
        if isinstance(item, ProteinItem)
        and item.is_active
        and item.course_id == course_id
        and item.category == category
    ]
    siblings.sort(key=lambda item: (item.sort_order, item.name))
    return siblings


def rebalance_category(siblings: List[MenuItem]) -> Dict[str, float]:
    """Split 100% evenly over the siblings.

    Percentages carry two decimals; the rounding remainder goes to the
    first item so the shares always add up to exactly 100.

    Returns:
        Mapping menu item id -> new distribution percentage (empty for no siblings).
    """
    if not siblings:
        return {}
    count = len(siblings)
    share = round(100 / count, 2)
    first = round(100 - share * (count - 1), 2)
    result = {item.id: share for item in siblings}
    result[siblings[0].id] = first
    return result


def needs_rebalance(items: Iterable[MenuItem], percentages: Dict[str, float]) -> bool:
    '''True if any item's stored percentage differs from the rebalanced one.'''
    return any(percentages.get(item.id) != item.distribution_percentage for item in items)


__all__ = ["category_siblings", "rebalance_category", "needs_rebalance"]
