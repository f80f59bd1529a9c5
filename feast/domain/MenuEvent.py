"""MenuEvent domain entity: one occasion (bbq, diner, ...) with its expected head count."""
from typing import Any, Dict, Optional


class MenuEvent:
    def __init__(self, id: str = "", name: str = "", event_type: str = "overig",
                 event_date: Optional[str] = None, total_persons: Optional[int] = None,
                 status: str = "draft", notes: Optional[str] = None,
                 created_at: Optional[str] = None, updated_at: Optional[str] = None):
        self.id = id
        self.name = name
        self.event_type = event_type
        self.event_date = event_date
        self.total_persons = total_persons
        self.status = status
        self.notes = notes
        self.created_at = created_at
        self.updated_at = updated_at

    def has_valid_head_count(self) -> bool:
        '''True when the event has a positive number of persons to shop for.'''
        return bool(self.total_persons) and self.total_persons > 0

    def __str__(self) -> str:
        return f"{self.name} ({self.event_type}, {self.status}) - {self.total_persons or 0} persons"

    __repr__ = __str__

    @staticmethod
    def from_row(row: Dict[str, Any]) -> "MenuEvent":
        '''Creates a MenuEvent from an `events` table row.'''
        return MenuEvent(
            id=row.get("id", ""),
            name=row.get("name", ""),
            event_type=row.get("event_type") or "overig",
            event_date=row.get("event_date"),
            total_persons=row.get("total_persons"),
            status=row.get("status") or "draft",
            notes=row.get("notes"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "eventType": self.event_type,
            "eventDate": self.event_date,
            "totalPersons": self.total_persons,
            "status": self.status,
            "notes": self.notes,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
