"""Computed (non-persisted) shopping list structures: item, course, event totals and breakdowns."""
from typing import Any, Dict, List, Optional


class ShoppingListItem:
    def __init__(self, menu_item_id: str, name: str, item_type: str, category: Optional[str],
                 edible_grams: float, bruto_grams: float, purchase_quantity: float,
                 purchase_units: Optional[int] = None, received_quantity: Optional[float] = None,
                 unit: str = "g", unit_label: Optional[str] = None,
                 calculation: Optional[Dict[str, Any]] = None):
        self.menu_item_id = menu_item_id
        self.name = name
        self.item_type = item_type
        self.category = category
        self.edible_grams = edible_grams
        self.bruto_grams = bruto_grams
        self.purchase_quantity = purchase_quantity
        self.purchase_units = purchase_units
        self.received_quantity = received_quantity
        self.unit = unit
        self.unit_label = unit_label
        self.calculation = calculation or {}

    @property
    def surplus(self) -> Optional[float]:
        '''Received minus purchase quantity (positive = over, negative = short).'''
        if self.received_quantity is None:
            return None
        return self.received_quantity - self.purchase_quantity

    def __str__(self) -> str:
        return f"{self.name} - {self.purchase_quantity:g} {self.unit}"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "menuItemId": self.menu_item_id,
            "name": self.name,
            "itemType": self.item_type,
            "category": self.category,
            "edibleGrams": self.edible_grams,
            "brutoGrams": self.bruto_grams,
            "purchaseQuantity": self.purchase_quantity,
            "purchaseUnits": self.purchase_units,
            "receivedQuantity": self.received_quantity,
            "surplus": self.surplus,
            "unit": self.unit,
            "unitLabel": self.unit_label,
            "calculation": dict(self.calculation),
        }


class ShoppingListTotals:
    def __init__(self, total_edible_grams: float = 0, total_bruto_grams: float = 0,
                 total_purchase_grams: float = 0, total_received_grams: Optional[float] = None,
                 total_surplus_grams: Optional[float] = None,
                 by_item_type: Optional[Dict[str, float]] = None):
        self.total_edible_grams = total_edible_grams
        self.total_bruto_grams = total_bruto_grams
        self.total_purchase_grams = total_purchase_grams
        self.total_received_grams = total_received_grams
        self.total_surplus_grams = total_surplus_grams
        self.by_item_type = by_item_type or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalEdibleGrams": self.total_edible_grams,
            "totalBrutoGrams": self.total_bruto_grams,
            "totalPurchaseGrams": self.total_purchase_grams,
            "totalReceivedGrams": self.total_received_grams,
            "totalSurplusGrams": self.total_surplus_grams,
            "byItemType": dict(self.by_item_type),
        }


class ShoppingListCourse:
    def __init__(self, course_id: str, course_name: str, grams_per_person: float,
                 items: List[ShoppingListItem], subtotal: ShoppingListTotals):
        self.course_id = course_id
        self.course_name = course_name
        self.grams_per_person = grams_per_person
        self.items = items
        self.subtotal = subtotal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "courseId": self.course_id,
            "courseName": self.course_name,
            "gramsPerPerson": self.grams_per_person,
            "items": [item.to_dict() for item in self.items],
            "subtotal": self.subtotal.to_dict(),
        }


class ShoppingList:
    def __init__(self, courses: List[ShoppingListCourse], grand_total: ShoppingListTotals):
        self.courses = courses
        self.grand_total = grand_total

    def all_items(self) -> List[ShoppingListItem]:
        return [item for course in self.courses for item in course.items]

    def __str__(self) -> str:
        return f"Shopping List ({len(self.courses)} courses, {self.grand_total.total_purchase_grams:g} g)"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "courses": [course.to_dict() for course in self.courses],
            "grandTotal": self.grand_total.to_dict(),
        }


class MeatDistributionBreakdown:
    """Per-category view of a protein course for admin display."""

    def __init__(self, course_id: str, course_name: str, total_course_grams: float,
                 categories: List[Dict[str, Any]]):
        self.course_id = course_id
        self.course_name = course_name
        self.total_course_grams = total_course_grams
        self.categories = categories

    def to_dict(self) -> Dict[str, Any]:
        return {
            "courseId": self.course_id,
            "courseName": self.course_name,
            "totalCourseGrams": self.total_course_grams,
            "categories": [dict(c) for c in self.categories],
        }
