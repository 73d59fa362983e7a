# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

from typing import Sequence

from lifedash.schemas.records import Milestone, Status


def derive_status(milestones: Sequence[Milestone]) -> Status:
    """
    Completed when every milestone is done, In Progress when some are,
    Not Started otherwise. An empty list counts as Completed.
    """
    # NOTE: the empty-list case is vacuously "all complete"; kept as-is.
    if all(m.completed for m in milestones):
        return Status.completed
    if any(m.completed for m in milestones):
        return Status.in_progress
    return Status.not_started


def progress_percent(milestones: Sequence[Milestone]) -> float:
    if not milestones:
        return 0.0
    done = sum(1 for m in milestones if m.completed)
    return done / len(milestones) * 100
