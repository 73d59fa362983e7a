# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

from datetime import date
from typing import Optional

from lifedash.schemas.records import Goal, Priority
from lifedash.services import sub_records
from lifedash.services.list_ordering import next_order
from lifedash.services.milestone_tracker import MilestoneTrackerService
from lifedash.services.tracker_service import serialized
from lifedash.utils.time_utils import today


class GoalService(MilestoneTrackerService):
    collection = "goals"
    model = Goal

    @serialized
    def add_goal(self, name: Optional[str] = None, deadline: Optional[date] = None):
        goal = Goal(
            deadline=deadline or today(),
            order=next_order(self.store.records()),
        )
        name = sub_records.clean_text(name)
        if name:
            goal.name = name
        return self._create(goal)

    @serialized
    def set_deadline(self, goal_id: str, deadline: date):
        return self._update(goal_id, {"deadline": deadline})

    @serialized
    def update_priority(self, goal_id: str, **ratings):
        """Changes any subset of importance / urgency / effort / impact."""
        goal = self.get(goal_id)
        if goal is None:
            return None
        ratings = {k: v for k, v in ratings.items() if v is not None}
        # Re-validate so a bad rating never reaches the store
        priority = Priority.model_validate({**goal.priority.model_dump(), **ratings})
        return self._update(goal_id, {"priority": priority})
