from typing import Final

# Menu items bought by weight are rounded up to this many grams unless they carry their own step
DEFAULT_ROUNDING_GRAMS: Final[int] = 100
DEFAULT_YIELD_PERCENTAGE: Final[float] = 100.0
DEFAULT_UNIT_LABEL: Final[str] = "stuks"

# Keys of the meat_distribution JSON column (fish and vegetarian included)
PROTEIN_CATEGORIES: Final[tuple[str, ...]] = (
    "pork",
    "beef",
    "chicken",
    "game",
    "fish",
    "vegetarian",
)

MENU_ITEM_CATEGORIES: Final[tuple[str, ...]] = PROTEIN_CATEGORIES + (
    "fruit",
    "vegetables",
    "salad",
    "bread",
    "sauce",
    "dairy",
    "other",
)

ITEM_TYPES: Final[tuple[str, ...]] = ("protein", "side", "fixed")
EVENT_TYPES: Final[tuple[str, ...]] = ("bbq", "diner", "lunch", "borrel", "receptie", "overig")
EVENT_STATUSES: Final[tuple[str, ...]] = ("draft", "active", "completed", "cancelled")

# Used when nobody filled in a meat distribution
DEFAULT_MEAT_DISTRIBUTION: Final[dict[str, float]] = {
    "pork": 20,
    "beef": 20,
    "chicken": 20,
    "game": 10,
    "fish": 15,
    "vegetarian": 15,
}

# F&B report portions per person
PORTION_SIZES: Final[dict[str, int]] = {
    "meat": 200,  # grams
    "wine": 2,  # glasses
    "beer": 2,  # bottles
    "soft_drink": 2,  # glasses
    "bubbles": 1,  # glass
}

CONTAINER_SIZES: Final[dict[str, int]] = {
    "wine_glasses_per_bottle": 6,
    "beer_crate": 24,
    "champagne_glasses_per_bottle": 6,
    "prosecco_glasses_per_bottle": 6,
}

# Wine drinkers below this share are ignored in the bottle count
WINE_DRINKER_THRESHOLD: Final[int] = 10

UNKNOWN_NAME: Final[str] = "Onbekend"
