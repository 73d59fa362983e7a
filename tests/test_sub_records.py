import unittest
from datetime import datetime

import pytz

from lifedash.schemas.records import Goal, Milestone, Note, Todo, TodoGroup
from lifedash.services import sub_records


class NoteHelpersTest(unittest.TestCase):
    def test_blank_text_makes_no_note(self):
        for text in ("", "   ", "\n\t", None):
            self.assertIsNone(sub_records.make_note(text))

    def test_note_text_is_trimmed(self):
        note = sub_records.make_note("  call the dentist  ")
        self.assertEqual(note.text, "call the dentist")
        self.assertTrue(note.id)

    def test_new_note_goes_first(self):
        now = datetime(2024, 1, 1, tzinfo=pytz.utc)
        older = Note(id="old", text="first", created_at=now)
        newer = sub_records.make_note("second")
        notes = sub_records.with_note([older], newer)
        self.assertEqual([n.id for n in notes], [newer.id, "old"])

    def test_ids_are_unique(self):
        ids = {sub_records.make_note("x").id for _ in range(50)}
        self.assertEqual(len(ids), 50)


class MilestoneHelpersTest(unittest.TestCase):
    def test_default_milestone_name(self):
        self.assertEqual(sub_records.make_milestone().name, "New Milestone")
        self.assertEqual(sub_records.make_milestone("  ").name, "New Milestone")
        self.assertEqual(sub_records.make_milestone("Research").name, "Research")

    def test_toggle_returns_new_list(self):
        original = [Milestone(id="m1"), Milestone(id="m2")]
        toggled = sub_records.toggle_milestone(original, "m2")
        self.assertEqual([m.completed for m in toggled], [False, True])
        self.assertEqual([m.completed for m in original], [False, False])


class CascadeDeleteTest(unittest.TestCase):
    def test_goal_cascade_lists_sub_records_and_image(self):
        now = datetime(2024, 1, 1, tzinfo=pytz.utc)
        goal = Goal(
            id="g1",
            image_ref="goals/g1/pic.png",
            milestones=[Milestone(id="m1"), Milestone(id="m2")],
            notes=[Note(id="n1", text="hi", created_at=now)],
        )
        result = sub_records.cascade_delete(goal)
        self.assertEqual(result.record_id, "g1")
        self.assertEqual(result.milestone_ids, ["m1", "m2"])
        self.assertEqual(result.note_ids, ["n1"])
        self.assertEqual(result.blob_paths, ["goals/g1/pic.png"])
        self.assertEqual(result.sub_record_count, 3)

    def test_todo_group_cascade_includes_todo_notes(self):
        now = datetime(2024, 1, 1, tzinfo=pytz.utc)
        group = TodoGroup(
            id="t1",
            title="Monday, January 1, 2024",
            created_at=now,
            todos=[
                Todo(id="a", text="one", notes=[Note(id="n1", text="x", created_at=now)]),
                Todo(id="b", text="two"),
            ],
        )
        result = sub_records.cascade_delete(group)
        self.assertEqual(result.todo_ids, ["a", "b"])
        self.assertEqual(result.note_ids, ["n1"])
        self.assertEqual(result.blob_paths, [])


if __name__ == "__main__":
    unittest.main()
