import logging
from typing import Any, Dict, Tuple

from fastapi import APIRouter, Depends, Response

from feast.api.dependencies import (
    get_menu_repository,
    get_preference_repository,
    get_procurement_repository,
)
from feast.api.errors import api_error
from feast.domain.MenuEvent import MenuEvent
from feast.domain.ShoppingList import ShoppingList
from feast.infra.Menu_Repository import MenuRepository
from feast.infra.pdf_utils import generate_pdf_for_shopping_list
from feast.infra.Preference_Repository import PreferenceRepository
from feast.infra.Procurement_Repository import ProcurementRepository
from feast.logic.menu.calculations import (
    calculate_meat_distribution_breakdown,
    calculate_shopping_list,
    get_average_meat_distribution,
)
from feast.logic.procurement.summary import received_by_menu_item, summarize_procurement

router = APIRouter(prefix="/api/admin/shopping-list", tags=["shopping-list"])
logger = logging.getLogger(__name__)


def _build(event_id: str, menus: MenuRepository, preferences: PreferenceRepository,
           procurement: ProcurementRepository) -> Tuple[MenuEvent, Dict[str, Any], ShoppingList]:
    event = menus.get_event(event_id)
    if event is None:
        raise api_error(404, "Event not found")
    if not event.has_valid_head_count():
        raise api_error(400, "Event has no valid number of persons")

    courses = menus.get_courses_with_items(event_id, active_only=True)
    avg = get_average_meat_distribution(preferences.load_persons())
    received = received_by_menu_item(summarize_procurement(procurement.lines_for_event(event_id)))
    shopping_list = calculate_shopping_list(courses, event.total_persons, avg, received)

    breakdown = []
    for course in courses:
        course_breakdown = calculate_meat_distribution_breakdown(course, event.total_persons, avg)
        if course_breakdown is not None:
            breakdown.append(course_breakdown.to_dict())

    logger.info("Shopping list for %s: %s courses, %s items",
                event.name, len(shopping_list.courses), len(shopping_list.all_items()))
    body = {
        "event": {"id": event.id, "name": event.name, "totalPersons": event.total_persons},
        "averageMeatDistribution": avg.to_dict(),
        "meatDistributionBreakdown": breakdown,
        **shopping_list.to_dict(),
    }
    return event, body, shopping_list


@router.get("/{event_id}")
def get_shopping_list(event_id: str,
                      menus: MenuRepository = Depends(get_menu_repository),
                      preferences: PreferenceRepository = Depends(get_preference_repository),
                      procurement: ProcurementRepository = Depends(get_procurement_repository)):
    _, body, _ = _build(event_id, menus, preferences, procurement)
    return body


@router.get("/{event_id}/pdf")
def export_shopping_list_pdf(event_id: str,
                             menus: MenuRepository = Depends(get_menu_repository),
                             preferences: PreferenceRepository = Depends(get_preference_repository),
                             procurement: ProcurementRepository = Depends(get_procurement_repository)):
    event, _, shopping_list = _build(event_id, menus, preferences, procurement)
    pdf_bytes = generate_pdf_for_shopping_list(event, shopping_list)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=shopping_list_{event.id}.pdf"},
    )
