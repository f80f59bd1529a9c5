import unittest

from feast.domain.Distribution import MeatDistribution
from feast.domain.EventCourse import EventCourse
from feast.domain.MenuItem import ProteinItem, SideItem
from feast.logic.menu.calculations import calculate_meat_distribution_breakdown
from feast.logic.menu.distribution import category_siblings, needs_rebalance, rebalance_category
from feast.utilities.constants import DEFAULT_MEAT_DISTRIBUTION


class TestMeatDistributionBreakdown(unittest.TestCase):

    def test_breakdown_per_category(self):
        course = EventCourse(id="c1", name="BBQ", grams_per_person=300,
                             menu_items=[ProteinItem(id="p1", name="Steak", category="beef")])
        breakdown = calculate_meat_distribution_breakdown(course, 20, MeatDistribution(beef=70, chicken=30))

        self.assertEqual(breakdown.total_course_grams, 6000)
        data = breakdown.to_dict()
        self.assertEqual([c["category"] for c in data["categories"]], ["beef", "chicken"])
        beef = data["categories"][0]
        self.assertEqual(beef["percentage"], 70)
        self.assertAlmostEqual(beef["persons"], 14)
        self.assertAlmostEqual(beef["gramsNeeded"], 4200)
        self.assertAlmostEqual(beef["kilograms"], 4.2)

    def test_default_distribution_lists_all_categories(self):
        course = EventCourse(id="c1", name="BBQ", grams_per_person=250,
                             menu_items=[ProteinItem(id="p1", name="Worst", category="pork")])
        breakdown = calculate_meat_distribution_breakdown(course, 10, MeatDistribution(**DEFAULT_MEAT_DISTRIBUTION))
        self.assertEqual(len(breakdown.categories), 6)
        self.assertAlmostEqual(sum(c["gramsNeeded"] for c in breakdown.categories), 2500)

    def test_course_without_active_protein(self):
        course = EventCourse(id="c1", name="Dessert", grams_per_person=150, menu_items=[
            SideItem(id="s1", name="Ijs"),
            ProteinItem(id="p1", name="Steak", category="beef", is_active=False),
        ])
        self.assertIsNone(calculate_meat_distribution_breakdown(course, 10, MeatDistribution(beef=100)))


class TestRebalanceCategory(unittest.TestCase):

    def setUp(self):
        self.items = [
            ProteinItem(id="b2", course_id="c1", name="Entrecote", category="beef", sort_order=2,
                        distribution_percentage=100),
            ProteinItem(id="b1", course_id="c1", name="Picanha", category="beef", sort_order=1),
            ProteinItem(id="b3", course_id="c1", name="Burger", category="beef", sort_order=3),
            ProteinItem(id="k1", course_id="c1", name="Kip", category="chicken", distribution_percentage=100),
            ProteinItem(id="b4", course_id="c1", name="Oud", category="beef", is_active=False),
            ProteinItem(id="b5", course_id="c2", name="Andere gang", category="beef"),
            SideItem(id="s1", course_id="c1", name="Sla", category="beef"),
        ]

    def test_siblings_are_active_proteins_of_course_and_category(self):
        siblings = category_siblings(self.items, "c1", "beef")
        self.assertEqual([s.id for s in siblings], ["b1", "b2", "b3"])

    def test_three_way_split_sums_to_100(self):
        shares = rebalance_category(category_siblings(self.items, "c1", "beef"))
        self.assertEqual(shares, {"b1": 33.34, "b2": 33.33, "b3": 33.33})
        self.assertAlmostEqual(sum(shares.values()), 100)

    def test_single_and_empty(self):
        self.assertEqual(rebalance_category(category_siblings(self.items, "c1", "chicken")), {"k1": 100})
        self.assertEqual(rebalance_category([]), {})

    def test_needs_rebalance(self):
        chicken = category_siblings(self.items, "c1", "chicken")
        self.assertFalse(needs_rebalance(chicken, rebalance_category(chicken)))
        beef = category_siblings(self.items, "c1", "beef")
        self.assertTrue(needs_rebalance(beef, rebalance_category(beef)))


if __name__ == "__main__":
    unittest.main()
