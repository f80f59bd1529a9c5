"""Thin Supabase (PostgREST) client on top of httpx.

Filters are passed as PostgREST expressions, built with the helpers below:
    client.select("menu_items", filters={"course_id": eq(course_id), "is_active": eq(True)},
                  order="sort_order.asc")
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

from feast.utilities.config import SUPABASE_KEY, SUPABASE_TIMEOUT, SUPABASE_URL

logger = logging.getLogger(__name__)


class SupabaseError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def eq(value: Any) -> str:
    return f"eq.{_literal(value)}"


def in_(values: Iterable[Any]) -> str:
    return "in.(" + ",".join(_literal(v) for v in values) + ")"


def is_null() -> str:
    return "is.null"


def not_null() -> str:
    return "not.is.null"


class SupabaseClient:
    def __init__(self, url: str = SUPABASE_URL, key: str = SUPABASE_KEY, *,
                 timeout: float = SUPABASE_TIMEOUT, transport: Optional[httpx.BaseTransport] = None):
        if not url or not key:
            raise SupabaseError("Supabase config not found: set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY")
        self._client = httpx.Client(
            base_url=f"{url.rstrip('/')}/rest/v1",
            headers={
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, table: str, *, params: Optional[Dict[str, str]] = None,
                 json: Any = None, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        try:
            resp = self._client.request(method, f"/{table}", params=params, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.error("Supabase %s %s failed: %s", method, table, e)
            raise SupabaseError(f"Request to {table} failed: {e}") from e
        if resp.status_code >= 400:
            try:
                message = resp.json().get("message") or resp.text
            except ValueError:
                message = resp.text
            logger.error("Supabase %s %s returned %s: %s", method, table, resp.status_code, message)
            raise SupabaseError(message, resp.status_code)
        return resp

    @staticmethod
    def _params(filters: Optional[Dict[str, str]], **extra: Optional[str]) -> Dict[str, str]:
        params = dict(filters or {})
        params.update({k: v for k, v in extra.items() if v is not None})
        return params

    def select(self, table: str, *, columns: str = "*", filters: Optional[Dict[str, str]] = None,
               order: Optional[str] = None) -> List[Dict[str, Any]]:
        resp = self._request("GET", table, params=self._params(filters, select=columns, order=order))
        return resp.json() or []

    def select_one(self, table: str, *, columns: str = "*",
                   filters: Optional[Dict[str, str]] = None) -> Optional[Dict[str, Any]]:
        '''First matching row, or None.'''
        resp = self._request("GET", table, params=self._params(filters, select=columns, limit="1"))
        rows = resp.json() or []
        return rows[0] if rows else None

    def insert(self, table: str, record: Dict[str, Any]) -> Dict[str, Any]:
        resp = self._request("POST", table, json=record, headers={"Prefer": "return=representation"})
        rows = resp.json() or []
        if not rows:
            raise SupabaseError(f"Insert into {table} returned no row")
        return rows[0]

    def update(self, table: str, values: Dict[str, Any], *, filters: Dict[str, str]) -> List[Dict[str, Any]]:
        resp = self._request("PATCH", table, params=self._params(filters), json=values,
                             headers={"Prefer": "return=representation"})
        return resp.json() or []

    def delete(self, table: str, *, filters: Dict[str, str]) -> List[Dict[str, Any]]:
        resp = self._request("DELETE", table, params=self._params(filters),
                             headers={"Prefer": "return=representation"})
        return resp.json() or []


__all__ = ["SupabaseClient", "SupabaseError", "eq", "in_", "is_null", "not_null"]
