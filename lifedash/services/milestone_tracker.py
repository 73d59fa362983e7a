# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from typing import List, Optional

from lifedash.schemas.records import Milestone
from lifedash.services import sub_records
from lifedash.services.list_ordering import sort_records
from lifedash.services.status_derivation import derive_status
from lifedash.services.tracker_service import TrackerService, serialized

logger = logging.getLogger(__name__)


class MilestoneTrackerService(TrackerService):
    """Records with milestones, notes and an optional image (goals and projects)."""

    def list_sorted(self, sort_key="default") -> list:
        return sort_records(self.store.records(), sort_key)

    @serialized
    def rename(self, record_id: str, name: str):
        return self._update(record_id, {"name": name})

    @serialized
    def delete(self, record_id: str):
        return self._delete(record_id)

    # ---------------------- MILESTONES ----------------------
    def _set_milestones(self, record_id: str, milestones: List[Milestone]):
        # Status is a cached projection of the milestones; write both together
        return self._update(record_id, {
            "milestones": milestones,
            "status": derive_status(milestones),
        })

    @serialized
    def add_milestone(self, record_id: str, name: Optional[str] = None):
        record = self.get(record_id)
        if record is None:
            return None
        milestones = [*record.milestones, sub_records.make_milestone(name)]
        return self._set_milestones(record_id, milestones)

    @serialized
    def rename_milestone(self, record_id: str, milestone_id: str, name: str):
        record = self.get(record_id)
        if record is None or not sub_records.contains_item(record.milestones, milestone_id):
            return None
        return self._update(record_id, {
            "milestones": sub_records.rename_milestone(record.milestones, milestone_id, name),
        })

    @serialized
    def toggle_milestone(self, record_id: str, milestone_id: str):
        record = self.get(record_id)
        if record is None or not sub_records.contains_item(record.milestones, milestone_id):
            return None
        return self._set_milestones(
            record_id, sub_records.toggle_milestone(record.milestones, milestone_id)
        )

    @serialized
    def delete_milestone(self, record_id: str, milestone_id: str):
        record = self.get(record_id)
        if record is None or not sub_records.contains_item(record.milestones, milestone_id):
            return None
        return self._set_milestones(
            record_id, sub_records.without_item(record.milestones, milestone_id)
        )

    # ---------------------- NOTES ----------------------
    @serialized
    def add_note(self, record_id: str, text: Optional[str]):
        if sub_records.clean_text(text) is None:
            return None
        record = self.get(record_id)
        if record is None:
            return None
        note = sub_records.make_note(text)
        return self._update(record_id, {"notes": sub_records.with_note(record.notes, note)})

    @serialized
    def delete_note(self, record_id: str, note_id: str):
        record = self.get(record_id)
        if record is None or not sub_records.contains_item(record.notes, note_id):
            return None
        return self._update(record_id, {"notes": sub_records.without_item(record.notes, note_id)})

    # ---------------------- IMAGE ----------------------
    @serialized
    def set_image_ref(self, record_id: str, image_ref: Optional[str]):
        return self._update(record_id, {"image_ref": image_ref})

    @serialized
    def remove_image(self, record_id: str):
        record = self.get(record_id)
        if record is None or not record.image_ref:
            return None
        updated = self.set_image_ref(record_id, None)
        if updated is not None:
            self.delete_blobs([record.image_ref])
        return updated
