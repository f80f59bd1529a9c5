import unittest

from feast.domain.Distribution import MeatDistribution
from feast.domain.PersonPreference import PersonPreference
from feast.logic.menu.calculations import get_average_meat_distribution
from feast.utilities.constants import DEFAULT_MEAT_DISTRIBUTION


def person(name, meat=None):
    return PersonPreference.from_row({"user_id": name, "meat_distribution": meat}, name=name)


class TestAverageMeatDistribution(unittest.TestCase):

    def test_nobody_filled_in_uses_default(self):
        avg = get_average_meat_distribution([])
        self.assertEqual(avg.to_dict(), {k: float(v) for k, v in DEFAULT_MEAT_DISTRIBUTION.items()})
        avg = get_average_meat_distribution([person("a"), person("b", {})])
        self.assertEqual(avg, MeatDistribution(**DEFAULT_MEAT_DISTRIBUTION))

    def test_persons_without_distribution_are_left_out(self):
        avg = get_average_meat_distribution([person("a", {"beef": 100}), person("b")])
        self.assertEqual(avg.beef, 100)
        self.assertEqual(avg.chicken, 0)
        self.assertEqual(avg.total(), 100)

    def test_average_over_persons(self):
        avg = get_average_meat_distribution([
            person("a", {"beef": 100}),
            person("b", {"chicken": 50, "fish": 50}),
        ])
        self.assertAlmostEqual(avg.beef, 50)
        self.assertAlmostEqual(avg.chicken, 25)
        self.assertAlmostEqual(avg.fish, 25)
        self.assertEqual(avg.pork, 0)

    def test_missing_and_invalid_keys_count_as_zero(self):
        avg = get_average_meat_distribution([person("a", {"pork": "40", "beef": None, "lamb": 60})])
        self.assertEqual(avg.pork, 40)
        self.assertEqual(avg.beef, 0)
        self.assertEqual(avg.get("lamb"), 0)

    def test_drink_distribution_accepts_both_key_styles(self):
        p = PersonPreference.from_row({"drink_distribution": {"soft_drinks": 30, "wine": 70}})
        self.assertEqual(p.drink_distribution.soft_drinks, 30)
        self.assertEqual(p.drink_distribution.to_dict(), {"softDrinks": 30, "wine": 70, "beer": 0})


if __name__ == "__main__":
    unittest.main()
