"""Preference repository: food & drink preferences of participants and their partners."""
import logging
from typing import Any, Dict, List

from feast.domain.PersonPreference import PersonPreference
from feast.infra.supabase_client import SupabaseClient, eq
from feast.utilities.constants import UNKNOWN_NAME

logger = logging.getLogger(__name__)

PREFERENCES = "food_drink_preferences"


def _partner_name(registration: Dict[str, Any]) -> str:
    name = f"{registration.get('partner_first_name') or ''} {registration.get('partner_last_name') or ''}"
    return name.strip() or "Partner"


class PreferenceRepository:
    def __init__(self, client: SupabaseClient):
        self.client = client

    def load_persons(self) -> List[PersonPreference]:
        """Participants ('self') and partners, sorted by name."""
        self_rows = self.client.select(PREFERENCES, columns="*,users(name)",
                                       filters={"person_type": eq("self")})
        partner_rows = self.client.select(PREFERENCES, filters={"person_type": eq("partner")})
        registrations = self.client.select(
            "registrations",
            columns="user_id,partner_first_name,partner_last_name",
            filters={"has_partner": eq(True)},
        )
        partner_names = {r.get("user_id"): _partner_name(r) for r in registrations}

        persons = []
        for row in self_rows:
            user = row.get("users") or {}
            persons.append(PersonPreference.from_row(row, name=user.get("name") or UNKNOWN_NAME))
        for row in partner_rows:
            persons.append(PersonPreference.from_row(row, name=partner_names.get(row.get("user_id"), "Partner")))

        persons.sort(key=lambda p: p.name.lower())
        logger.debug("Loaded %s persons (%s participants)", len(persons), len(self_rows))
        return persons

    def completion_status(self, persons: List[PersonPreference]) -> Dict[str, Any]:
        """How many active participants filled in their preferences, and who is missing."""
        participants = self.client.select(
            "users", columns="id,name",
            filters={"role": eq("participant"), "is_active": eq(True)},
        )
        completed_ids = {p.user_id for p in persons if not p.is_partner}
        missing = [p.get("name") or UNKNOWN_NAME for p in participants if p.get("id") not in completed_ids]
        return {
            "completed": len(completed_ids),
            "totalParticipants": len(participants),
            "totalPersons": len(persons),
            "missingParticipants": missing,
        }
