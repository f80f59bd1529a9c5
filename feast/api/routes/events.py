import logging

from fastapi import APIRouter, Depends

from feast.api.dependencies import get_menu_repository
from feast.api.errors import api_error
from feast.infra.Menu_Repository import MenuRepository
from feast.utilities.validators import CourseInput, EventInput, EventUpdateInput, to_row

router = APIRouter(prefix="/api/admin/events", tags=["events"])
logger = logging.getLogger(__name__)


@router.get("")
def list_events(repo: MenuRepository = Depends(get_menu_repository)):
    events = repo.list_events()
    return {"events": [{**event.to_dict(), "courseCount": count} for event, count in events]}


@router.post("", status_code=201)
def create_event(payload: EventInput, repo: MenuRepository = Depends(get_menu_repository)):
    event = repo.create_event(to_row(payload))
    logger.info("Created event %s (%s)", event.id, event.name)
    return {"event": event.to_dict()}


@router.get("/{event_id}")
def get_event(event_id: str, repo: MenuRepository = Depends(get_menu_repository)):
    """Event with all its courses and their menu items (inactive items included)."""
    event = repo.get_event(event_id)
    if event is None:
        raise api_error(404, "Event not found")
    courses = repo.get_courses_with_items(event_id, active_only=False)
    return {"event": {**event.to_dict(), "courses": [c.to_dict(include_items=True) for c in courses]}}


@router.patch("/{event_id}")
def update_event(event_id: str, payload: EventUpdateInput, repo: MenuRepository = Depends(get_menu_repository)):
    values = to_row(payload, partial=True)
    if not values:
        raise api_error(400, "No fields to update")
    event = repo.update_event(event_id, values)
    if event is None:
        raise api_error(404, "Event not found")
    return {"event": event.to_dict()}


@router.delete("/{event_id}")
def delete_event(event_id: str, repo: MenuRepository = Depends(get_menu_repository)):
    if not repo.delete_event(event_id):
        raise api_error(404, "Event not found")
    return {"success": True, "message": "Event deleted"}


# -------------------- Courses of an event --------------------
@router.get("/{event_id}/courses")
def list_courses(event_id: str, repo: MenuRepository = Depends(get_menu_repository)):
    return {"courses": [c.to_dict() for c in repo.list_courses(event_id)]}


@router.post("/{event_id}/courses", status_code=201)
def create_course(event_id: str, payload: CourseInput, repo: MenuRepository = Depends(get_menu_repository)):
    if repo.get_event(event_id) is None:
        raise api_error(404, "Event not found")
    course = repo.create_course(event_id, to_row(payload))
    return {"course": course.to_dict()}
