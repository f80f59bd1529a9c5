from fastapi import APIRouter, Depends

from feast.api.dependencies import get_menu_repository
from feast.api.errors import api_error
from feast.infra.Menu_Repository import MenuRepository
from feast.utilities.validators import MenuItemUpdateInput, check_menu_item_rules, to_row

router = APIRouter(prefix="/api/admin/menu-items", tags=["menu-items"])


@router.patch("/{item_id}")
def update_item(item_id: str, payload: MenuItemUpdateInput, repo: MenuRepository = Depends(get_menu_repository)):
    values = to_row(payload, partial=True)
    if not values:
        raise api_error(400, "No fields to update")

    current = repo.get_item(item_id)
    if current is None:
        raise api_error(404, "Menu item not found")

    # Type rules apply to the item as it will be stored
    problem = check_menu_item_rules(
        current.item_type,
        values.get("category", current.category),
        values.get("distribution_percentage", current.distribution_percentage),
        values.get("grams_per_person", current.grams_per_person),
    )
    if problem:
        raise api_error(400, problem)

    item = repo.update_item(item_id, values)
    if item is None:
        raise api_error(404, "Menu item not found")
    return {"menuItem": item.to_dict()}


@router.delete("/{item_id}")
def delete_item(item_id: str, repo: MenuRepository = Depends(get_menu_repository)):
    if not repo.delete_item(item_id):
        raise api_error(404, "Menu item not found")
    return {"success": True, "message": "Menu item deleted"}
