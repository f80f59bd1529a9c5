"""In-memory stand-ins for the Supabase client and the read-only repositories used by the API tests."""
import copy
import uuid
from typing import Any, Dict, List, Optional

from feast.domain.PersonPreference import PersonPreference
from feast.domain.Procurement import ProcurementLine
from feast.infra.supabase_client import SupabaseError


def _literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _matches(row: Dict[str, Any], filters: Optional[Dict[str, str]]) -> bool:
    for column, expr in (filters or {}).items():
        value = row.get(column)
        if expr.startswith("eq."):
            if _literal(value) != expr[3:]:
                return False
        elif expr.startswith("in.("):
            if _literal(value) not in expr[4:-1].split(","):
                return False
        elif expr == "not.is.null":
            if value is None:
                return False
        elif expr == "is.null":
            if value is not None:
                return False
        else:
            raise ValueError(f"Unsupported filter {expr}")
    return True


class FakeSupabaseClient:
    """Tables are lists of row dicts; supports the filter helpers the repositories use."""

    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None, fail: bool = False):
        self.tables = {name: [dict(r) for r in rows] for name, rows in (tables or {}).items()}
        self.fail = fail
        self.updates: List[tuple] = []

    def _table(self, table: str) -> List[Dict[str, Any]]:
        if self.fail:
            raise SupabaseError("connection refused")
        return self.tables.setdefault(table, [])

    def select(self, table, *, columns="*", filters=None, order=None):
        rows = [copy.deepcopy(r) for r in self._table(table) if _matches(r, filters)]
        if order:
            column, _, direction = order.partition(".")
            rows.sort(key=lambda r: (r.get(column) is None, r.get(column) or 0), reverse=direction == "desc")
        return rows

    def select_one(self, table, *, columns="*", filters=None):
        rows = self.select(table, columns=columns, filters=filters)
        return rows[0] if rows else None

    def insert(self, table, record):
        row = {"id": str(uuid.uuid4()), "created_at": "2026-01-01T00:00:00+00:00", **record}
        self._table(table).append(row)
        return copy.deepcopy(row)

    def update(self, table, values, *, filters):
        changed = []
        for row in self._table(table):
            if _matches(row, filters):
                row.update(values)
                changed.append(copy.deepcopy(row))
        self.updates.append((table, dict(values), dict(filters)))
        return changed

    def delete(self, table, *, filters):
        rows = self._table(table)
        removed = [r for r in rows if _matches(r, filters)]
        self.tables[table] = [r for r in rows if not _matches(r, filters)]
        return removed


class FakePreferenceRepository:
    def __init__(self, persons: List[PersonPreference], total_participants: int = 0):
        self.persons = persons
        self.total_participants = total_participants

    def load_persons(self) -> List[PersonPreference]:
        return list(self.persons)

    def completion_status(self, persons):
        completed = len([p for p in persons if not p.is_partner])
        return {
            "completed": completed,
            "totalParticipants": self.total_participants,
            "totalPersons": len(persons),
            "missingParticipants": [],
        }


class FakeProcurementRepository:
    def __init__(self, lines: Optional[List[ProcurementLine]] = None):
        self.lines = lines or []

    def lines_for_event(self, event_id: str) -> List[ProcurementLine]:
        return list(self.lines)
