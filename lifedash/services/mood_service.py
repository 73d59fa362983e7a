# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

from typing import Optional

from lifedash.schemas.records import MOOD_LEVELS, MoodEntry, mood_level
from lifedash.services import sub_records
from lifedash.services.tracker_service import TrackerService, serialized
from lifedash.utils.time_utils import now_utc


class MoodService(TrackerService):
    collection = "moodEntries"
    model = MoodEntry
    order_field = "createdAt"
    descending = True  # newest entry first

    @staticmethod
    def levels():
        return list(MOOD_LEVELS)

    @serialized
    def add_entry(self, level_id: int):
        level = mood_level(level_id)
        return self._create(MoodEntry(mood_level=level.id, created_at=now_utc()))

    def list_filtered(self, level_id: Optional[int] = None) -> list:
        entries = self.store.records()
        if level_id is None:
            return list(entries)
        return [e for e in entries if e.mood_level == level_id]

    @serialized
    def add_note(self, entry_id: str, text: Optional[str]):
        if sub_records.clean_text(text) is None:
            return None
        entry = self.get(entry_id)
        if entry is None:
            return None
        note = sub_records.make_note(text)
        return self._update(entry_id, {"notes": sub_records.with_note(entry.notes, note)})

    @serialized
    def delete_note(self, entry_id: str, note_id: str):
        entry = self.get(entry_id)
        if entry is None or not sub_records.contains_item(entry.notes, note_id):
            return None
        return self._update(entry_id, {"notes": sub_records.without_item(entry.notes, note_id)})

    @serialized
    def delete(self, entry_id: str):
        return self._delete(entry_id)
