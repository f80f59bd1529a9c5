from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from feast.api.dependencies import get_preference_repository
from feast.infra.Preference_Repository import PreferenceRepository
from feast.logic.reporting.fb_report import (
    calculate_average_sauces,
    calculate_average_veggies,
    calculate_drink_stats,
    calculate_meat_stats,
    format_wine_preference,
    group_dietary_requirements,
)

router = APIRouter(prefix="/api/admin/fb-report", tags=["fb-report"])


@router.get("")
def get_fb_report(repo: PreferenceRepository = Depends(get_preference_repository)):
    persons = repo.load_persons()
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "completionStatus": repo.completion_status(persons),
        "persons": [{**p.to_dict(), "winePreferenceLabel": format_wine_preference(p.wine_preference)}
                    for p in persons],
        "meatStats": calculate_meat_stats(persons),
        "drinkStats": calculate_drink_stats(persons),
        "dietaryGroups": group_dietary_requirements(persons),
        "averageVeggies": calculate_average_veggies(persons),
        "averageSauces": calculate_average_sauces(persons),
    }
