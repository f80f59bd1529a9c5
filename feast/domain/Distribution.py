"""Typed value objects for the JSON distribution columns of food_drink_preferences."""
from typing import Any, Dict, Optional

from feast.utilities.constants import PROTEIN_CATEGORIES


def _pct(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


class MeatDistribution:
    """Percentages per protein category; missing categories count as 0."""

    def __init__(self, pork: float = 0, beef: float = 0, chicken: float = 0,
                 game: float = 0, fish: float = 0, vegetarian: float = 0):
        self.pork = pork
        self.beef = beef
        self.chicken = chicken
        self.game = game
        self.fish = fish
        self.vegetarian = vegetarian

    def get(self, category: str) -> float:
        if category not in PROTEIN_CATEGORIES:
            return 0.0
        return getattr(self, category)

    def total(self) -> float:
        return sum(self.get(c) for c in PROTEIN_CATEGORIES)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MeatDistribution):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return ", ".join(f"{c}: {self.get(c):g}%" for c in PROTEIN_CATEGORIES)

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Optional[Dict[str, Any]]) -> Optional["MeatDistribution"]:
        '''Returns None when the person did not fill in a distribution.'''
        if not isinstance(data, dict) or not data:
            return None
        return MeatDistribution(**{c: _pct(data.get(c)) for c in PROTEIN_CATEGORIES})

    def to_dict(self) -> Dict[str, float]:
        return {c: self.get(c) for c in PROTEIN_CATEGORIES}


class DrinkDistribution:
    def __init__(self, soft_drinks: float = 0, wine: float = 0, beer: float = 0):
        self.soft_drinks = soft_drinks
        self.wine = wine
        self.beer = beer

    @staticmethod
    def from_dict(data: Optional[Dict[str, Any]]) -> "DrinkDistribution":
        d = data if isinstance(data, dict) else {}
        return DrinkDistribution(
            soft_drinks=_pct(d.get("softDrinks", d.get("soft_drinks"))),
            wine=_pct(d.get("wine")),
            beer=_pct(d.get("beer")),
        )

    def to_dict(self) -> Dict[str, float]:
        return {"softDrinks": self.soft_drinks, "wine": self.wine, "beer": self.beer}
