"""Menu repository: events, courses and menu items stored in Supabase."""
import logging
from collections import Counter, defaultdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from feast.domain.EventCourse import EventCourse
from feast.domain.MenuEvent import MenuEvent
from feast.domain.MenuItem import MenuItem
from feast.infra.supabase_client import SupabaseClient, eq, in_
from feast.logic.menu.distribution import category_siblings, needs_rebalance, rebalance_category

logger = logging.getLogger(__name__)

EVENTS = "events"
COURSES = "event_courses"
ITEMS = "menu_items"

# Changing any of these moves an item in or out of a category split
_REBALANCE_FIELDS = ("category", "is_active")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class MenuRepository:
    def __init__(self, client: SupabaseClient):
        self.client = client

    # --- Events -------------------------------------------------------------
    def list_events(self) -> List[Tuple[MenuEvent, int]]:
        """All events, newest first, with their number of courses."""
        rows = self.client.select(EVENTS, order="created_at.desc")
        course_rows = self.client.select(COURSES, columns="event_id")
        counts = Counter(r.get("event_id") for r in course_rows)
        return [(MenuEvent.from_row(r), counts.get(r.get("id"), 0)) for r in rows]

    def get_event(self, event_id: str) -> Optional[MenuEvent]:
        row = self.client.select_one(EVENTS, filters={"id": eq(event_id)})
        return MenuEvent.from_row(row) if row else None

    def create_event(self, values: Dict[str, Any]) -> MenuEvent:
        return MenuEvent.from_row(self.client.insert(EVENTS, values))

    def update_event(self, event_id: str, values: Dict[str, Any]) -> Optional[MenuEvent]:
        rows = self.client.update(EVENTS, {**values, "updated_at": _now()}, filters={"id": eq(event_id)})
        return MenuEvent.from_row(rows[0]) if rows else None

    def delete_event(self, event_id: str) -> bool:
        return bool(self.client.delete(EVENTS, filters={"id": eq(event_id)}))

    # --- Courses ------------------------------------------------------------
    def list_courses(self, event_id: str) -> List[EventCourse]:
        rows = self.client.select(COURSES, filters={"event_id": eq(event_id)}, order="sort_order.asc")
        return [EventCourse.from_row(r) for r in rows]

    def get_course(self, course_id: str) -> Optional[EventCourse]:
        row = self.client.select_one(COURSES, filters={"id": eq(course_id)})
        return EventCourse.from_row(row) if row else None

    def create_course(self, event_id: str, values: Dict[str, Any]) -> EventCourse:
        return EventCourse.from_row(self.client.insert(COURSES, {**values, "event_id": event_id}))

    def update_course(self, course_id: str, values: Dict[str, Any]) -> Optional[EventCourse]:
        rows = self.client.update(COURSES, {**values, "updated_at": _now()}, filters={"id": eq(course_id)})
        return EventCourse.from_row(rows[0]) if rows else None

    def delete_course(self, course_id: str) -> bool:
        return bool(self.client.delete(COURSES, filters={"id": eq(course_id)}))

    def get_courses_with_items(self, event_id: str, active_only: bool = True) -> List[EventCourse]:
        """Courses in sort order, each with its menu items (one query per course)."""
        courses = self.list_courses(event_id)
        for course in courses:
            course.menu_items = self.list_items(course.id, active_only=active_only)
        return courses

    # --- Menu items ---------------------------------------------------------
    def list_items(self, course_id: str, active_only: bool = False) -> List[MenuItem]:
        filters = {"course_id": eq(course_id)}
        if active_only:
            filters["is_active"] = eq(True)
        rows = self.client.select(ITEMS, filters=filters, order="sort_order.asc")
        return [MenuItem.from_row(r) for r in rows]

    def get_item(self, item_id: str) -> Optional[MenuItem]:
        row = self.client.select_one(ITEMS, filters={"id": eq(item_id)})
        return MenuItem.from_row(row) if row else None

    def create_item(self, course_id: str, values: Dict[str, Any]) -> MenuItem:
        row = self.client.insert(ITEMS, {**values, "course_id": course_id})
        item = MenuItem.from_row(row)
        if item.item_type == "protein" and item.category:
            self.rebalance(course_id, item.category)
            return self.get_item(item.id) or item
        return item

    def update_item(self, item_id: str, values: Dict[str, Any]) -> Optional[MenuItem]:
        before = self.get_item(item_id)
        if before is None:
            return None
        rows = self.client.update(ITEMS, {**values, "updated_at": _now()}, filters={"id": eq(item_id)})
        if not rows:
            return None
        after = MenuItem.from_row(rows[0])
        if any(f in values for f in _REBALANCE_FIELDS):
            touched = {
                (i.course_id, i.category) for i in (before, after)
                if i.item_type == "protein" and i.category
            }
            for course_id, category in sorted(touched):
                self.rebalance(course_id, category)
            return self.get_item(item_id) or after
        return after

    def delete_item(self, item_id: str) -> bool:
        item = self.get_item(item_id)
        if item is None:
            return False
        self.client.delete(ITEMS, filters={"id": eq(item_id)})
        if item.item_type == "protein" and item.category:
            self.rebalance(item.course_id, item.category)
        return True

    def rebalance(self, course_id: str, category: str) -> Dict[str, float]:
        """Split 100% evenly over the active protein items of a course category."""
        siblings = category_siblings(self.list_items(course_id, active_only=True), course_id, category)
        percentages = rebalance_category(siblings)
        if not needs_rebalance(siblings, percentages):
            return percentages

        ids_by_pct: Dict[float, List[str]] = defaultdict(list)
        for item_id, pct in percentages.items():
            ids_by_pct[pct].append(item_id)
        for pct, ids in ids_by_pct.items():
            self.client.update(ITEMS, {"distribution_percentage": pct}, filters={"id": in_(ids)})
        logger.info("Rebalanced %s items of %s in course %s: %s", len(siblings), category, course_id, percentages)
        return percentages
