import unittest
from datetime import date

from lifedash.schemas.records import Goal, Priority, Project
from lifedash.services.list_ordering import SortKey, next_order, sort_records


def goal(gid, name="Goal", order=0, deadline=None, importance=5):
    return Goal(id=gid, name=name, order=order, deadline=deadline,
                priority=Priority(importance=importance))


class SortRecordsTest(unittest.TestCase):
    def setUp(self):
        self.goals = [
            goal("a", name="banana", order=2, deadline=date(2024, 6, 1), importance=3),
            goal("b", name="Apple", order=0, deadline=date(2024, 1, 1), importance=9),
            goal("c", name="cherry", order=1, deadline=None, importance=5),
        ]

    def ids(self, records):
        return [r.id for r in records]

    def test_default_uses_manual_order(self):
        self.assertEqual(self.ids(sort_records(self.goals, "default")), ["b", "c", "a"])

    def test_priority_high_and_low(self):
        self.assertEqual(self.ids(sort_records(self.goals, SortKey.priority_high)), ["b", "c", "a"])
        self.assertEqual(self.ids(sort_records(self.goals, "priority-low")), ["a", "c", "b"])

    def test_deadline_ascending_with_undated_last(self):
        self.assertEqual(self.ids(sort_records(self.goals, "deadline")), ["b", "a", "c"])

    def test_name_is_case_insensitive(self):
        self.assertEqual(self.ids(sort_records(self.goals, "name")), ["b", "a", "c"])

    def test_name_folds_accents(self):
        records = [Project(id="1", name="zebra"), Project(id="2", name="Éclair"), Project(id="3", name="eagle")]
        self.assertEqual(self.ids(sort_records(records, "name")), ["3", "2", "1"])

    def test_ties_keep_incoming_order(self):
        records = [goal("x", name="Same"), goal("y", name="Same"), goal("z", name="Same")]
        self.assertEqual(self.ids(sort_records(records, "name")), ["x", "y", "z"])
        self.assertEqual(self.ids(sort_records(records, "priority-high")), ["x", "y", "z"])
        self.assertEqual(self.ids(sort_records(records, "priority-low")), ["x", "y", "z"])

    def test_case_variants_order_deterministically(self):
        records = [goal("x", name="Apple"), goal("y", name="apple"), goal("z", name="Banana")]
        self.assertEqual(self.ids(sort_records(records, "name")), ["y", "x", "z"])
        self.assertEqual(self.ids(sort_records(list(reversed(records)), "name")), ["y", "x", "z"])

    def test_accent_variants_order_deterministically(self):
        records = [Project(id="1", name="éclair"), Project(id="2", name="Eclair"), Project(id="3", name="eclair")]
        self.assertEqual(self.ids(sort_records(records, "name")), ["3", "2", "1"])

    def test_source_and_order_values_untouched(self):
        before = [(g.id, g.order) for g in self.goals]
        sort_records(self.goals, "name")
        sort_records(self.goals, "priority-high")
        self.assertEqual([(g.id, g.order) for g in self.goals], before)

    def test_unknown_key_rejected(self):
        with self.assertRaises(ValueError):
            sort_records(self.goals, "colour")


class NextOrderTest(unittest.TestCase):
    def test_empty_collection_starts_at_zero(self):
        self.assertEqual(next_order([]), 0)

    def test_max_plus_one(self):
        self.assertEqual(next_order([goal("a", order=3), goal("b", order=7), goal("c", order=1)]), 8)


if __name__ == "__main__":
    unittest.main()
