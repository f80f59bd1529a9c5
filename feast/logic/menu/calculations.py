"""Menu shopping list calculations.

Pure functions turning an event menu (courses with menu items) and the
attendees' meat distribution preferences into purchase quantities.

Pipeline used by the shopping list endpoint:
    avg = get_average_meat_distribution(persons)
    shopping_list = calculate_shopping_list(courses, total_persons, avg, procurement)
    breakdown = [calculate_meat_distribution_breakdown(c, total_persons, avg) for c in courses]

Per item:
    edible grams -> bruto grams (edible / yield) -> purchase quantity (rounded up
    to whole units or to the rounding step, never down).
"""
import logging
import math
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from feast.domain.Distribution import MeatDistribution
from feast.domain.EventCourse import EventCourse
from feast.domain.MenuItem import FixedItem, MenuItem, ProteinItem, SideItem
from feast.domain.PersonPreference import PersonPreference
from feast.domain.ShoppingList import (
    MeatDistributionBreakdown,
    ShoppingList,
    ShoppingListCourse,
    ShoppingListItem,
    ShoppingListTotals,
)
from feast.utilities.constants import (
    DEFAULT_MEAT_DISTRIBUTION,
    DEFAULT_ROUNDING_GRAMS,
    DEFAULT_UNIT_LABEL,
    PROTEIN_CATEGORIES,
)

logger = logging.getLogger(__name__)

# Quotients this close (relative) to a whole number count as that number, float noise only
_CEIL_REL_TOL = 1e-12


def get_average_meat_distribution(persons: Iterable[PersonPreference]) -> MeatDistribution:
    """Average the meat distribution over the persons that filled one in.

    Persons without a distribution are left out of both the sum and the
    count, so partial submissions do not pull the averages towards zero.
    Falls back to DEFAULT_MEAT_DISTRIBUTION when nobody supplied one.
    """
    supplied = [p.meat_distribution for p in persons if p.meat_distribution is not None]
    if not supplied:
        return MeatDistribution(**DEFAULT_MEAT_DISTRIBUTION)

    totals: Dict[str, float] = defaultdict(float)
    for dist in supplied:
        for category in PROTEIN_CATEGORIES:
            totals[category] += dist.get(category)

    count = len(supplied)
    return MeatDistribution(**{c: totals[c] / count for c in PROTEIN_CATEGORIES})


def _ceil_steps(value: float, step: float) -> int:
    quotient = value / step
    nearest = round(quotient)
    if math.isclose(quotient, nearest, rel_tol=_CEIL_REL_TOL):
        return int(nearest)
    return math.ceil(quotient)


def _bruto(edible_grams: float, menu_item: MenuItem) -> float:
    # Yield must be validated by the caller; 0 raises ZeroDivisionError
    return edible_grams / (menu_item.yield_percentage / 100)


def _purchase(bruto_grams: float, menu_item: MenuItem) -> Tuple[float, Optional[int], str]:
    """Round bruto grams up to what can be bought: (quantity in grams, units, unit)."""
    if menu_item.unit_weight_grams:
        units = _ceil_steps(bruto_grams, menu_item.unit_weight_grams)
        return units * menu_item.unit_weight_grams, units, menu_item.unit_label or DEFAULT_UNIT_LABEL
    rounding = menu_item.rounding_grams or DEFAULT_ROUNDING_GRAMS
    return _ceil_steps(bruto_grams, rounding) * rounding, None, "g"


def _build_item(menu_item: MenuItem, edible_grams: float, calculation: Dict,
                received_quantity: Optional[float]) -> ShoppingListItem:
    bruto_grams = _bruto(edible_grams, menu_item)
    purchase_quantity, purchase_units, unit = _purchase(bruto_grams, menu_item)
    calculation.update({
        "yieldPercentage": menu_item.yield_percentage,
        "brutoGrams": bruto_grams,
        "unitWeightGrams": menu_item.unit_weight_grams,
        "roundingGrams": menu_item.rounding_grams,
        "purchaseUnits": purchase_units,
        "purchaseQuantity": purchase_quantity,
    })
    return ShoppingListItem(
        menu_item_id=menu_item.id,
        name=menu_item.name,
        item_type=menu_item.item_type,
        category=menu_item.category,
        edible_grams=edible_grams,
        bruto_grams=bruto_grams,
        purchase_quantity=purchase_quantity,
        purchase_units=purchase_units,
        received_quantity=received_quantity,
        unit=unit,
        unit_label=menu_item.unit_label,
        calculation=calculation,
    )


def calculate_protein_item(menu_item: MenuItem, total_course_grams: float,
                           avg_distribution: MeatDistribution,
                           received_quantity: Optional[float] = None) -> ShoppingListItem:
    """Protein share: course grams x category % x the item's distribution % within its category."""
    if not isinstance(menu_item, ProteinItem):
        raise ValueError("Item type must be protein")
    if menu_item.category not in PROTEIN_CATEGORIES:
        logger.warning("Protein item %s has unknown category %r; using a 0%% share",
                       menu_item.name, menu_item.category)

    category_pct = avg_distribution.get(menu_item.category)
    category_grams = total_course_grams * (category_pct / 100)
    # A lone item without a distribution takes the whole category
    distribution_pct = menu_item.distribution_percentage
    if distribution_pct is None:
        distribution_pct = 100.0
    edible_grams = category_grams * (distribution_pct / 100)

    calculation = {
        "totalCourseGrams": total_course_grams,
        "categoryPercentage": category_pct,
        "categoryGrams": category_grams,
        "distributionPercentage": distribution_pct,
        "itemEdibleGrams": edible_grams,
    }
    return _build_item(menu_item, edible_grams, calculation, received_quantity)


def calculate_side_item(menu_item: MenuItem, total_course_grams: float, number_of_sides: int,
                        received_quantity: Optional[float] = None) -> ShoppingListItem:
    """Side share: the course grams split evenly over the course's side items."""
    if not isinstance(menu_item, SideItem):
        raise ValueError("Item type must be side")
    if number_of_sides <= 0:
        raise ValueError("Number of sides must be greater than 0")

    edible_grams = total_course_grams / number_of_sides
    calculation = {
        "totalCourseGrams": total_course_grams,
        "numberOfSides": number_of_sides,
        "perItemGrams": edible_grams,
    }
    return _build_item(menu_item, edible_grams, calculation, received_quantity)


def calculate_fixed_item(menu_item: MenuItem, total_persons: int,
                         received_quantity: Optional[float] = None) -> ShoppingListItem:
    """Own portion: persons x the item's grams per person.

    Always used for fixed items; protein and side items that carry their own
    grams per person are computed the same way instead of taking a share of
    the course.
    """
    grams_per_person = menu_item.grams_per_person or 0
    edible_grams = total_persons * grams_per_person
    calculation = {
        "gramsPerPerson": grams_per_person,
        "totalPersons": total_persons,
        "itemEdibleGrams": edible_grams,
    }
    return _build_item(menu_item, edible_grams, calculation, received_quantity)


def _has_own_portion(menu_item: MenuItem) -> bool:
    return isinstance(menu_item, FixedItem) or bool(menu_item.grams_per_person)


def _received_for(menu_item: MenuItem, procurement: Optional[Dict[str, float]]) -> Optional[float]:
    if procurement and menu_item.id in procurement:
        return procurement[menu_item.id]
    return menu_item.purchased_quantity


def _totals(items: List[ShoppingListItem]) -> ShoppingListTotals:
    by_item_type: Dict[str, float] = defaultdict(float)
    for item in items:
        by_item_type[item.item_type] += item.purchase_quantity

    with_received = [item for item in items if item.received_quantity is not None]
    received = surplus = None
    if with_received:
        received = sum(item.received_quantity for item in with_received)
        surplus = sum(item.surplus for item in with_received)

    return ShoppingListTotals(
        total_edible_grams=sum(item.edible_grams for item in items),
        total_bruto_grams=sum(item.bruto_grams for item in items),
        total_purchase_grams=sum(item.purchase_quantity for item in items),
        total_received_grams=received,
        total_surplus_grams=surplus,
        by_item_type=dict(by_item_type),
    )


def calculate_course_shopping_list(course: EventCourse, total_persons: int,
                                   avg_distribution: MeatDistribution,
                                   procurement: Optional[Dict[str, float]] = None) -> ShoppingListCourse:
    """Shopping list for one course; inactive items are skipped."""
    total_persons = total_persons or 0
    total_course_grams = total_persons * course.grams_per_person
    active = course.active_items()
    number_of_sides = sum(1 for item in active if isinstance(item, SideItem) and not _has_own_portion(item))

    items: List[ShoppingListItem] = []
    for menu_item in active:
        received = _received_for(menu_item, procurement)
        if _has_own_portion(menu_item):
            items.append(calculate_fixed_item(menu_item, total_persons, received))
        elif isinstance(menu_item, ProteinItem):
            items.append(calculate_protein_item(menu_item, total_course_grams, avg_distribution, received))
        elif isinstance(menu_item, SideItem):
            items.append(calculate_side_item(menu_item, total_course_grams, number_of_sides, received))
        else:
            raise TypeError(f"Unsupported menu item variant: {type(menu_item).__name__}")

    return ShoppingListCourse(
        course_id=course.id,
        course_name=course.name,
        grams_per_person=course.grams_per_person,
        items=items,
        subtotal=_totals(items),
    )


def calculate_shopping_list(courses: Iterable[EventCourse], total_persons: int,
                            avg_distribution: MeatDistribution,
                            procurement: Optional[Dict[str, float]] = None) -> ShoppingList:
    """Shopping list for a whole event.

    Args:
        courses: Courses with their menu items.
        total_persons: Head count of the event.
        avg_distribution: Result of get_average_meat_distribution.
        procurement: Optional received quantity per menu item id.

    Returns:
        ShoppingList whose grand total is the sum of the course subtotals.
    """
    course_lists = [
        calculate_course_shopping_list(course, total_persons, avg_distribution, procurement)
        for course in courses
    ]

    all_items = [item for course in course_lists for item in course.items]
    received_totals = _totals(all_items)

    by_item_type: Dict[str, float] = defaultdict(float)
    for course in course_lists:
        for item_type, grams in course.subtotal.by_item_type.items():
            by_item_type[item_type] += grams

    grand_total = ShoppingListTotals(
        total_edible_grams=sum(c.subtotal.total_edible_grams for c in course_lists),
        total_bruto_grams=sum(c.subtotal.total_bruto_grams for c in course_lists),
        total_purchase_grams=sum(c.subtotal.total_purchase_grams for c in course_lists),
        total_received_grams=received_totals.total_received_grams,
        total_surplus_grams=received_totals.total_surplus_grams,
        by_item_type=dict(by_item_type),
    )
    return ShoppingList(courses=course_lists, grand_total=grand_total)


def calculate_meat_distribution_breakdown(course: EventCourse, total_persons: int,
                                          avg_distribution: MeatDistribution) -> Optional[MeatDistributionBreakdown]:
    """Per protein category: share, person equivalents and grams for one course.

    Returns None for courses without active protein items.
    """
    if not any(isinstance(item, ProteinItem) for item in course.active_items()):
        return None

    total_persons = total_persons or 0
    total_course_grams = total_persons * course.grams_per_person
    categories = []
    for category in PROTEIN_CATEGORIES:
        pct = avg_distribution.get(category)
        if pct <= 0:
            continue
        grams_needed = total_course_grams * (pct / 100)
        categories.append({
            "category": category,
            "percentage": pct,
            "persons": total_persons * (pct / 100),
            "gramsNeeded": grams_needed,
            "kilograms": grams_needed / 1000,
        })

    return MeatDistributionBreakdown(
        course_id=course.id,
        course_name=course.name,
        total_course_grams=total_course_grams,
        categories=categories,
    )


def format_purchase_quantity(item: ShoppingListItem) -> str:
    """Display form: unit counts as integers, weights in kilograms with two decimals."""
    if item.purchase_units is not None:
        return f"{item.purchase_units} {item.unit}"
    return f"{item.purchase_quantity / 1000:.2f} kg"


__all__ = [
    "get_average_meat_distribution",
    "calculate_protein_item",
    "calculate_side_item",
    "calculate_fixed_item",
    "calculate_course_shopping_list",
    "calculate_shopping_list",
    "calculate_meat_distribution_breakdown",
    "format_purchase_quantity",
]
