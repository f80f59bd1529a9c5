"""MenuItem domain entities.

A menu item is a tagged variant keyed by `item_type`:

  protein -> ProteinItem: share of a protein category within the course budget
  side    -> SideItem:    even share of the course budget among the side items
  fixed   -> FixedItem:   its own grams per person, independent of the course

`MenuItem.from_row` dispatches on the discriminant and rejects unknown types.
"""
from typing import Any, Dict, Optional

from feast.utilities.constants import DEFAULT_YIELD_PERCENTAGE


def _to_float(value: Any) -> Optional[float]:
    """NUMERIC columns arrive as strings from PostgREST."""
    if value is None or value == "":
        return None
    return float(value)


class MenuItem:
    item_type = ""

    def __init__(self, id: str = "", course_id: str = "", name: str = "",
                 category: Optional[str] = None,
                 yield_percentage: float = DEFAULT_YIELD_PERCENTAGE,
                 waste_description: Optional[str] = None,
                 unit_weight_grams: Optional[float] = None, unit_label: Optional[str] = None,
                 rounding_grams: Optional[float] = None,
                 distribution_percentage: Optional[float] = None,
                 grams_per_person: Optional[float] = None,
                 purchased_quantity: Optional[float] = None,
                 sort_order: int = 0, is_active: bool = True,
                 created_at: Optional[str] = None, updated_at: Optional[str] = None):
        self.id = id
        self.course_id = course_id
        self.name = name
        self.category = category
        self.yield_percentage = yield_percentage
        self.waste_description = waste_description
        self.unit_weight_grams = unit_weight_grams
        self.unit_label = unit_label
        self.rounding_grams = rounding_grams
        self.distribution_percentage = distribution_percentage
        self.grams_per_person = grams_per_person
        self.purchased_quantity = purchased_quantity
        self.sort_order = sort_order
        self.is_active = is_active
        self.created_at = created_at
        self.updated_at = updated_at

    def __str__(self) -> str:
        return f"{self.name} [{self.item_type}/{self.category or '-'}] yield {self.yield_percentage}%"

    __repr__ = __str__

    @staticmethod
    def from_row(row: Dict[str, Any]) -> "MenuItem":
        '''Creates the MenuItem variant matching the row's item_type.'''
        item_type = row.get("item_type")
        cls = ITEM_CLASSES.get(item_type)
        if cls is None:
            raise ValueError(f"Unknown menu item type: {item_type!r}")
        return cls(
            id=row.get("id", ""),
            course_id=row.get("course_id", ""),
            name=row.get("name", ""),
            category=row.get("category"),
            yield_percentage=_to_float(row.get("yield_percentage")) or DEFAULT_YIELD_PERCENTAGE,
            waste_description=row.get("waste_description"),
            unit_weight_grams=_to_float(row.get("unit_weight_grams")),
            unit_label=row.get("unit_label"),
            rounding_grams=_to_float(row.get("rounding_grams")),
            distribution_percentage=_to_float(row.get("distribution_percentage")),
            grams_per_person=_to_float(row.get("grams_per_person")),
            purchased_quantity=_to_float(row.get("purchased_quantity")),
            sort_order=row.get("sort_order") or 0,
            is_active=row.get("is_active", True) is not False,
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "courseId": self.course_id,
            "name": self.name,
            "itemType": self.item_type,
            "category": self.category,
            "yieldPercentage": self.yield_percentage,
            "wasteDescription": self.waste_description,
            "unitWeightGrams": self.unit_weight_grams,
            "unitLabel": self.unit_label,
            "roundingGrams": self.rounding_grams,
            "distributionPercentage": self.distribution_percentage,
            "gramsPerPerson": self.grams_per_person,
            "purchasedQuantity": self.purchased_quantity,
            "sortOrder": self.sort_order,
            "isActive": self.is_active,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


class ProteinItem(MenuItem):
    item_type = "protein"


class SideItem(MenuItem):
    item_type = "side"


class FixedItem(MenuItem):
    item_type = "fixed"


ITEM_CLASSES: Dict[str, type] = {
    ProteinItem.item_type: ProteinItem,
    SideItem.item_type: SideItem,
    FixedItem.item_type: FixedItem,
}

__all__ = ["MenuItem", "ProteinItem", "SideItem", "FixedItem", "ITEM_CLASSES"]
