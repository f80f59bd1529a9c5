import unittest

from feast.domain.PersonPreference import PersonPreference
from feast.logic.reporting.fb_report import (
    calculate_average_sauces,
    calculate_average_veggies,
    calculate_drink_stats,
    calculate_meat_stats,
    format_wine_preference,
    group_dietary_requirements,
)


def person(name, **row):
    return PersonPreference.from_row({"user_id": name, **row}, name=name)


class TestMeatStats(unittest.TestCase):

    def test_weighted_counts(self):
        persons = [
            person("A", meat_distribution={"beef": 50, "chicken": 50}),
            person("B", meat_distribution={"vegetarian": 100}),
            person("C", meat_distribution={"pork": 40, "beef": 30, "fish": 30}),
        ]
        stats = calculate_meat_stats(persons)
        beef = stats["categories"]["beef"]
        self.assertEqual(stats["totalPersons"], 3)
        self.assertAlmostEqual(beef["weightedCount"], 0.8)
        self.assertAlmostEqual(beef["percentage"], 26.6667, places=3)
        self.assertAlmostEqual(beef["kg"], 0.16)
        self.assertAlmostEqual(stats["totalKg"], 0.6)
        self.assertEqual(stats["categories"]["game"]["weightedCount"], 0)

    def test_no_persons(self):
        stats = calculate_meat_stats([])
        self.assertEqual(stats["totalKg"], 0)
        self.assertEqual(len(stats["categories"]), 6)


class TestDrinkStats(unittest.TestCase):

    def setUp(self):
        self.persons = [
            person("A", drink_distribution={"wine": 50, "beer": 50}, wine_preference=0, beer_type="pils",
                   water_preference="sparkling", starts_with_bubbles=True, bubble_type="champagne"),
            person("B", drink_distribution={"wine": 100}, wine_preference=100,
                   water_preference="flat", starts_with_bubbles=True, bubble_type="prosecco"),
            person("C", drink_distribution={"wine": 5, "beer": 100, "softDrinks": 0}, beer_type="speciaal"),
            person("D", drink_distribution={"softDrinks": 100}, soft_drink_preference="overige",
                   soft_drink_other=" Ginger Ale ", starts_with_bubbles=False),
            person("E", drink_distribution={"softDrinks": 50}, soft_drink_preference="cola"),
        ]

    def test_wine(self):
        wine = calculate_drink_stats(self.persons)["wine"]
        self.assertAlmostEqual(wine["totalDrinkers"], 1.5)
        self.assertEqual(wine["bottles"], 1)
        self.assertAlmostEqual(wine["red"]["percentage"], 33.3333, places=3)
        self.assertEqual(wine["red"]["bottles"] + wine["white"]["bottles"], 1)

    def test_beer(self):
        beer = calculate_drink_stats(self.persons)["beer"]
        self.assertAlmostEqual(beer["totalDrinkers"], 1.5)
        self.assertEqual(beer["bottles"], 3)
        self.assertEqual(beer["crates"], 1)
        self.assertEqual(beer["pils"], {"count": 1, "percentage": 50})
        self.assertEqual(beer["speciaal"]["count"], 1)

    def test_soft_drinks_water_and_bubbles(self):
        stats = calculate_drink_stats(self.persons)
        self.assertEqual(stats["softDrinks"]["breakdown"], {"ginger ale": 1, "cola": 1})
        self.assertAlmostEqual(stats["softDrinks"]["totalDrinkers"], 1.5)
        self.assertEqual(stats["water"], {"sparkling": 1, "flat": 1})
        self.assertEqual(stats["bubbles"]["total"], 2)
        self.assertEqual(stats["bubbles"]["champagne"], {"count": 1, "bottles": 1})
        self.assertEqual(stats["bubbles"]["prosecco"], {"count": 1, "bottles": 1})

    def test_no_drinkers(self):
        stats = calculate_drink_stats([])
        self.assertEqual(stats["wine"]["bottles"], 0)
        self.assertEqual(stats["wine"]["red"]["percentage"], 50)
        self.assertEqual(stats["beer"]["crates"], 0)


class TestDietaryAndAverages(unittest.TestCase):

    def test_group_dietary_requirements(self):
        persons = [
            person("A", dietary_requirements="Allergie voor noten"),
            person("B", dietary_requirements="Veganist"),
            person("C", dietary_requirements="vegetarisch", person_type="partner"),
            person("D", dietary_requirements="geen varkensvlees"),
            person("E", dietary_requirements="   "),
            person("F"),
        ]
        groups = group_dietary_requirements(persons)
        self.assertEqual(groups["allergies"], [{"name": "A", "isPartner": False, "details": "Allergie voor noten"}])
        self.assertEqual(groups["vegan"], [{"name": "B", "isPartner": False}])
        self.assertEqual(groups["vegetarian"], [{"name": "C", "isPartner": True}])
        self.assertEqual(groups["other"][0]["details"], "geen varkensvlees")

    def test_format_wine_preference(self):
        self.assertEqual(format_wine_preference(30), "70% rood / 30% wit")
        self.assertEqual(format_wine_preference(0), "100% rood / 0% wit")
        self.assertEqual(format_wine_preference(None), "-")

    def test_averages(self):
        persons = [person("A", veggies_preference=5, sauces_preference=1), person("B")]
        self.assertEqual(calculate_average_veggies(persons), 4)
        self.assertEqual(calculate_average_sauces(persons), 2)
        self.assertEqual(calculate_average_veggies([]), 0)


if __name__ == "__main__":
    unittest.main()
