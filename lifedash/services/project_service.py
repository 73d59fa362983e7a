# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

from typing import Optional

from lifedash.schemas.records import Project
from lifedash.services import sub_records
from lifedash.services.list_ordering import SortKey, next_order
from lifedash.services.milestone_tracker import MilestoneTrackerService
from lifedash.services.tracker_service import serialized

PROJECT_SORT_KEYS = (SortKey.default, SortKey.name)


class ProjectService(MilestoneTrackerService):
    collection = "projects"
    model = Project

    @serialized
    def add_project(self, name: Optional[str] = None):
        project = Project(order=next_order(self.store.records()))
        name = sub_records.clean_text(name)
        if name:
            project.name = name
        return self._create(project)

    def list_sorted(self, sort_key="default") -> list:
        if SortKey(sort_key) not in PROJECT_SORT_KEYS:
            raise ValueError(f"Projects cannot be sorted by {sort_key}")
        return super().list_sorted(sort_key)
