"""FastAPI dependency providers; tests override these with in-memory repositories."""
from functools import lru_cache

from feast.infra.Menu_Repository import MenuRepository
from feast.infra.Preference_Repository import PreferenceRepository
from feast.infra.Procurement_Repository import ProcurementRepository
from feast.infra.supabase_client import SupabaseClient


@lru_cache(maxsize=1)
def get_supabase_client() -> SupabaseClient:
    return SupabaseClient()


def get_menu_repository() -> MenuRepository:
    return MenuRepository(get_supabase_client())


def get_preference_repository() -> PreferenceRepository:
    return PreferenceRepository(get_supabase_client())


def get_procurement_repository() -> ProcurementRepository:
    return ProcurementRepository(get_supabase_client())
