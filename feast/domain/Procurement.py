"""Procurement entities: purchase-order lines linked to menu items and their per-item aggregate."""
from typing import Any, Dict, List, Optional

from feast.utilities.constants import UNKNOWN_NAME


class ProcurementLine:
    def __init__(self, menu_item_id: str, ordered_quantity: float = 0,
                 received_quantity: float = 0, supplier: Optional[str] = None):
        self.menu_item_id = menu_item_id
        self.ordered_quantity = ordered_quantity
        self.received_quantity = received_quantity
        self.supplier = supplier or UNKNOWN_NAME

    @staticmethod
    def from_row(row: Dict[str, Any]) -> "ProcurementLine":
        '''Creates a line from a `purchase_order_lines` row joined with its purchase order.'''
        order = row.get("purchase_orders") or {}
        if isinstance(order, list):
            order = order[0] if order else {}
        return ProcurementLine(
            menu_item_id=row.get("menu_item_id", ""),
            ordered_quantity=float(row.get("ordered_quantity") or 0),
            received_quantity=float(row.get("received_quantity") or 0),
            supplier=order.get("supplier"),
        )


class MenuItemProcurement:
    def __init__(self, menu_item_id: str, total_received_quantity: float = 0,
                 total_ordered_quantity: float = 0, line_count: int = 0,
                 suppliers: Optional[List[str]] = None):
        self.menu_item_id = menu_item_id
        self.total_received_quantity = total_received_quantity
        self.total_ordered_quantity = total_ordered_quantity
        self.line_count = line_count
        self.suppliers = suppliers[:] if suppliers else []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "menuItemId": self.menu_item_id,
            "totalReceivedQuantity": self.total_received_quantity,
            "totalOrderedQuantity": self.total_ordered_quantity,
            "lineCount": self.line_count,
            "suppliers": list(self.suppliers),
        }
