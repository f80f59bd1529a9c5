"""PersonPreference: food & drink preferences of one attending person (participant or partner)."""
from typing import Any, Dict, Optional

from feast.domain.Distribution import DrinkDistribution, MeatDistribution


class PersonPreference:
    def __init__(self, name: str = "", person_type: str = "self", user_id: str = "",
                 dietary_requirements: Optional[str] = None,
                 meat_distribution: Optional[MeatDistribution] = None,
                 veggies_preference: float = 3, sauces_preference: float = 3,
                 starts_with_bubbles: Optional[bool] = None, bubble_type: Optional[str] = None,
                 drink_distribution: Optional[DrinkDistribution] = None,
                 soft_drink_preference: Optional[str] = None, soft_drink_other: str = "",
                 water_preference: Optional[str] = None, wine_preference: Optional[float] = None,
                 beer_type: Optional[str] = None):
        self.name = name
        self.person_type = person_type
        self.user_id = user_id
        self.dietary_requirements = dietary_requirements
        self.meat_distribution = meat_distribution
        self.veggies_preference = veggies_preference
        self.sauces_preference = sauces_preference
        self.starts_with_bubbles = starts_with_bubbles
        self.bubble_type = bubble_type
        self.drink_distribution = drink_distribution or DrinkDistribution()
        self.soft_drink_preference = soft_drink_preference
        self.soft_drink_other = soft_drink_other
        self.water_preference = water_preference
        self.wine_preference = wine_preference
        self.beer_type = beer_type

    @property
    def is_partner(self) -> bool:
        return self.person_type == "partner"

    def __str__(self) -> str:
        return f"{self.name} ({self.person_type}) - {self.meat_distribution or 'no distribution'}"

    __repr__ = __str__

    @staticmethod
    def from_row(row: Dict[str, Any], name: Optional[str] = None) -> "PersonPreference":
        '''Creates a PersonPreference from a `food_drink_preferences` row.'''
        veggies = row.get("veggies_preference")
        sauces = row.get("sauces_preference")
        return PersonPreference(
            name=name or row.get("user_id", ""),
            person_type=row.get("person_type") or "self",
            user_id=row.get("user_id", ""),
            dietary_requirements=row.get("dietary_requirements") or None,
            meat_distribution=MeatDistribution.from_dict(row.get("meat_distribution")),
            veggies_preference=veggies if veggies is not None else 3,
            sauces_preference=sauces if sauces is not None else 3,
            starts_with_bubbles=row.get("starts_with_bubbles"),
            bubble_type=row.get("bubble_type"),
            drink_distribution=DrinkDistribution.from_dict(row.get("drink_distribution")),
            soft_drink_preference=row.get("soft_drink_preference"),
            soft_drink_other=row.get("soft_drink_other") or "",
            water_preference=row.get("water_preference"),
            wine_preference=row.get("wine_preference"),
            beer_type=row.get("beer_type"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "personType": self.person_type,
            "userId": self.user_id,
            "dietaryRequirements": self.dietary_requirements,
            "meatDistribution": self.meat_distribution.to_dict() if self.meat_distribution else None,
            "veggiesPreference": self.veggies_preference,
            "saucesPreference": self.sauces_preference,
            "startsWithBubbles": self.starts_with_bubbles,
            "bubbleType": self.bubble_type,
            "drinkDistribution": self.drink_distribution.to_dict(),
            "softDrinkPreference": self.soft_drink_preference,
            "softDrinkOther": self.soft_drink_other,
            "waterPreference": self.water_preference,
            "winePreference": self.wine_preference,
            "beerType": self.beer_type,
        }
