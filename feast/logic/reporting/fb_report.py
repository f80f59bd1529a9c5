"""Food & beverage report aggregations.

Pure functions over PersonPreference lists; results are plain dicts ready
for JSON.

Meat statistics weigh every person by their own percentages:
  A: 50% beef, 50% chicken / B: 100% vegetarian / C: 40% pork, 30% beef, 30% fish
  beef weighted count = 0.5 + 0 + 0.3 = 0.8 persons -> 26.67% of 3 persons, 0.16 kg at 200 g
"""
import math
from collections import defaultdict
from typing import Any, Dict, List, Optional

from feast.domain.PersonPreference import PersonPreference
from feast.utilities.constants import (
    CONTAINER_SIZES,
    PORTION_SIZES,
    PROTEIN_CATEGORIES,
    WINE_DRINKER_THRESHOLD,
)


def calculate_meat_stats(persons: List[PersonPreference]) -> Dict[str, Any]:
    """Weighted count, percentage and kilograms per protein category.

    Returns structure:
    {
      'totalPersons': int,
      'totalKg': float,
      'categories': { 'pork': { 'weightedCount': float, 'percentage': float, 'kg': float }, ... }
    }
    """
    total_persons = len(persons)
    categories = {c: {"weightedCount": 0.0, "percentage": 0.0, "kg": 0.0} for c in PROTEIN_CATEGORIES}
    if total_persons == 0:
        return {"totalPersons": 0, "totalKg": 0.0, "categories": categories}

    for person in persons:
        dist = person.meat_distribution
        if dist is None:
            continue
        for category in PROTEIN_CATEGORIES:
            categories[category]["weightedCount"] += dist.get(category) / 100

    for stat in categories.values():
        stat["percentage"] = stat["weightedCount"] / total_persons * 100
        stat["kg"] = stat["weightedCount"] * PORTION_SIZES["meat"] / 1000

    return {
        "totalPersons": total_persons,
        "totalKg": sum(stat["kg"] for stat in categories.values()),
        "categories": categories,
    }


def _wine_stats(persons: List[PersonPreference]) -> Dict[str, Any]:
    drinkers = [p for p in persons if p.drink_distribution.wine > WINE_DRINKER_THRESHOLD]
    total_drinkers = sum(p.drink_distribution.wine / 100 for p in drinkers)
    bottles = math.ceil(total_drinkers * PORTION_SIZES["wine"] / CONTAINER_SIZES["wine_glasses_per_bottle"])

    red_weight = white_weight = 0.0
    for p in drinkers:
        weight = p.drink_distribution.wine / 100
        # 0 = all red, 100 = all white
        white_share = 0.5 if p.wine_preference is None else p.wine_preference / 100
        red_weight += weight * (1 - white_share)
        white_weight += weight * white_share

    total_weight = red_weight + white_weight
    red_pct = red_weight / total_weight * 100 if total_weight > 0 else 50.0
    red_bottles = math.ceil(bottles * red_pct / 100)
    return {
        "totalDrinkers": total_drinkers,
        "bottles": bottles,
        "red": {"bottles": red_bottles, "percentage": red_pct},
        "white": {"bottles": bottles - red_bottles, "percentage": 100 - red_pct},
    }


def _beer_stats(persons: List[PersonPreference]) -> Dict[str, Any]:
    drinkers = [p for p in persons if p.drink_distribution.beer > 0]
    total_drinkers = sum(p.drink_distribution.beer / 100 for p in drinkers)
    bottles = math.ceil(total_drinkers * PORTION_SIZES["beer"])

    pils = sum(1 for p in drinkers if p.beer_type == "pils")
    speciaal = sum(1 for p in drinkers if p.beer_type == "speciaal")
    typed = pils + speciaal
    pils_pct = pils / typed * 100 if typed > 0 else 50.0
    return {
        "totalDrinkers": total_drinkers,
        "bottles": bottles,
        "crates": math.ceil(bottles / CONTAINER_SIZES["beer_crate"]),
        "pils": {"count": pils, "percentage": pils_pct},
        "speciaal": {"count": speciaal, "percentage": 100 - pils_pct},
    }


def _soft_drink_stats(persons: List[PersonPreference]) -> Dict[str, Any]:
    drinkers = [p for p in persons if p.drink_distribution.soft_drinks > 0]
    breakdown: Dict[str, int] = defaultdict(int)
    for p in drinkers:
        preference = p.soft_drink_preference
        if preference == "overige" and p.soft_drink_other:
            preference = p.soft_drink_other.strip().lower()
        if preference:
            breakdown[preference] += 1
    return {
        "totalDrinkers": sum(p.drink_distribution.soft_drinks / 100 for p in drinkers),
        "breakdown": dict(breakdown),
    }


def _water_stats(persons: List[PersonPreference]) -> Dict[str, int]:
    return {
        "sparkling": sum(1 for p in persons if p.water_preference == "sparkling"),
        "flat": sum(1 for p in persons if p.water_preference == "flat"),
    }


def _bubbles_stats(persons: List[PersonPreference]) -> Dict[str, Any]:
    starters = [p for p in persons if p.starts_with_bubbles is True]
    champagne = sum(1 for p in starters if p.bubble_type == "champagne")
    prosecco = sum(1 for p in starters if p.bubble_type == "prosecco")
    return {
        "total": len(starters),
        "champagne": {
            "count": champagne,
            "bottles": math.ceil(champagne * PORTION_SIZES["bubbles"] / CONTAINER_SIZES["champagne_glasses_per_bottle"]),
        },
        "prosecco": {
            "count": prosecco,
            "bottles": math.ceil(prosecco * PORTION_SIZES["bubbles"] / CONTAINER_SIZES["prosecco_glasses_per_bottle"]),
        },
    }


def calculate_drink_stats(persons: List[PersonPreference]) -> Dict[str, Any]:
    return {
        "wine": _wine_stats(persons),
        "beer": _beer_stats(persons),
        "softDrinks": _soft_drink_stats(persons),
        "water": _water_stats(persons),
        "bubbles": _bubbles_stats(persons),
    }


def group_dietary_requirements(persons: List[PersonPreference]) -> Dict[str, List[Dict[str, Any]]]:
    """Classify free-text dietary requirements by keyword (allergies win over vegan over vegetarian)."""
    groups: Dict[str, List[Dict[str, Any]]] = {"allergies": [], "vegetarian": [], "vegan": [], "other": []}
    for person in persons:
        text = (person.dietary_requirements or "").strip()
        if not text:
            continue
        lower = text.lower()
        entry = {"name": person.name, "isPartner": person.is_partner}
        if "allergi" in lower or "intolerant" in lower:
            groups["allergies"].append({**entry, "details": text})
        elif "vegan" in lower:
            groups["vegan"].append(entry)
        elif "vegetar" in lower:
            groups["vegetarian"].append(entry)
        else:
            groups["other"].append({**entry, "details": text})
    return groups


def format_wine_preference(preference: Optional[float]) -> str:
    """Slider value (0 = red, 100 = white) as e.g. '70% rood / 30% wit'."""
    if preference is None:
        return "-"
    return f"{100 - preference:g}% rood / {preference:g}% wit"


def calculate_average_veggies(persons: List[PersonPreference]) -> float:
    if not persons:
        return 0.0
    return sum(p.veggies_preference for p in persons) / len(persons)


def calculate_average_sauces(persons: List[PersonPreference]) -> float:
    if not persons:
        return 0.0
    return sum(p.sauces_preference for p in persons) / len(persons)


__all__ = [
    "calculate_meat_stats",
    "calculate_drink_stats",
    "group_dietary_requirements",
    "format_wine_preference",
    "calculate_average_veggies",
    "calculate_average_sauces",
]
