"""Procurement aggregation: purchase-order lines summed per menu item."""
from typing import Dict, Iterable, List

from feast.domain.Procurement import MenuItemProcurement, ProcurementLine


def summarize_procurement(lines: Iterable[ProcurementLine]) -> List[MenuItemProcurement]:
    """Aggregate ordered/received quantities, line counts and suppliers per menu item.

    Lines without a menu item are ignored. Order of first appearance is kept.
    """
    summary: Dict[str, MenuItemProcurement] = {}
    for line in lines:
        if not line.menu_item_id:
            continue
        entry = summary.get(line.menu_item_id)
        if entry is None:
            entry = summary[line.menu_item_id] = MenuItemProcurement(line.menu_item_id)
        entry.total_received_quantity += line.received_quantity
        entry.total_ordered_quantity += line.ordered_quantity
        entry.line_count += 1
        if line.supplier not in entry.suppliers:
            entry.suppliers.append(line.supplier)
    return list(summary.values())


def received_by_menu_item(procurement: Iterable[MenuItemProcurement]) -> Dict[str, float]:
    """Received quantity per menu item id, as consumed by calculate_shopping_list."""
    return {p.menu_item_id: p.total_received_quantity for p in procurement}


__all__ = ["summarize_procurement", "received_by_menu_item"]
