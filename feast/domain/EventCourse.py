"""EventCourse domain entity: one course of an event with its grams-per-person target."""
from typing import Any, Dict, List, Optional

from feast.domain.MenuItem import MenuItem


class EventCourse:
    def __init__(self, id: str = "", event_id: str = "", name: str = "", sort_order: int = 0,
                 grams_per_person: float = 0, notes: Optional[str] = None,
                 menu_items: Optional[List[MenuItem]] = None,
                 created_at: Optional[str] = None, updated_at: Optional[str] = None):
        self.id = id
        self.event_id = event_id
        self.name = name
        self.sort_order = sort_order
        self.grams_per_person = grams_per_person
        self.notes = notes
        self.menu_items = menu_items[:] if menu_items else []
        self.created_at = created_at
        self.updated_at = updated_at

    def active_items(self) -> List[MenuItem]:
        return [item for item in self.menu_items if item.is_active]

    def __str__(self) -> str:
        return f"{self.name} - {self.grams_per_person} g/person - {len(self.menu_items)} items"

    __repr__ = __str__

    @staticmethod
    def from_row(row: Dict[str, Any], menu_items: Optional[List[MenuItem]] = None) -> "EventCourse":
        '''Creates an EventCourse from an `event_courses` row, optionally with its items.'''
        grams = row.get("grams_per_person")
        return EventCourse(
            id=row.get("id", ""),
            event_id=row.get("event_id", ""),
            name=row.get("name", ""),
            sort_order=row.get("sort_order") or 0,
            grams_per_person=float(grams) if grams is not None else 0,
            notes=row.get("notes"),
            menu_items=menu_items,
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )

    def to_dict(self, include_items: bool = False) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "eventId": self.event_id,
            "name": self.name,
            "sortOrder": self.sort_order,
            "gramsPerPerson": self.grams_per_person,
            "notes": self.notes,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if include_items:
            data["menuItems"] = [item.to_dict() for item in self.menu_items]
        return data
