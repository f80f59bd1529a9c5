from fastapi import APIRouter, Depends

from feast.api.dependencies import get_menu_repository
from feast.api.errors import api_error
from feast.infra.Menu_Repository import MenuRepository
from feast.utilities.validators import CourseUpdateInput, MenuItemInput, to_row

router = APIRouter(prefix="/api/admin/courses", tags=["courses"])


@router.patch("/{course_id}")
def update_course(course_id: str, payload: CourseUpdateInput, repo: MenuRepository = Depends(get_menu_repository)):
    values = to_row(payload, partial=True)
    if not values:
        raise api_error(400, "No fields to update")
    course = repo.update_course(course_id, values)
    if course is None:
        raise api_error(404, "Course not found")
    return {"course": course.to_dict()}


@router.delete("/{course_id}")
def delete_course(course_id: str, repo: MenuRepository = Depends(get_menu_repository)):
    if not repo.delete_course(course_id):
        raise api_error(404, "Course not found")
    return {"success": True, "message": "Course deleted"}


# -------------------- Menu items of a course --------------------
@router.get("/{course_id}/items")
def list_items(course_id: str, repo: MenuRepository = Depends(get_menu_repository)):
    return {"menuItems": [item.to_dict() for item in repo.list_items(course_id)]}


@router.post("/{course_id}/items", status_code=201)
def create_item(course_id: str, payload: MenuItemInput, repo: MenuRepository = Depends(get_menu_repository)):
    """Create a menu item; protein siblings of the same category are rebalanced."""
    if repo.get_course(course_id) is None:
        raise api_error(404, "Course not found")
    item = repo.create_item(course_id, to_row(payload))
    return {"menuItem": item.to_dict()}
