"""Procurement repository: purchase-order lines of an event that reference a menu item."""
from typing import List

from feast.domain.Procurement import ProcurementLine
from feast.infra.supabase_client import SupabaseClient, eq, not_null

LINES = "purchase_order_lines"


class ProcurementRepository:
    def __init__(self, client: SupabaseClient):
        self.client = client

    def lines_for_event(self, event_id: str) -> List[ProcurementLine]:
        rows = self.client.select(
            LINES,
            columns="menu_item_id,ordered_quantity,received_quantity,purchase_orders!inner(event_id,supplier)",
            filters={"purchase_orders.event_id": eq(event_id), "menu_item_id": not_null()},
        )
        return [ProcurementLine.from_row(r) for r in rows]
