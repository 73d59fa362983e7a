# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

"""
Record and sub-record shapes as stored in the document store.

Documents use camelCase keys so they stay readable by the web client;
attributes are snake_case on the Python side.
"""

import enum
from datetime import date, datetime
from typing import Annotated, List, Optional

import pytz
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


def _utc_timestamp(value: datetime) -> str:
    # Always microseconds and "Z", so stored timestamps sort as strings
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    return value.astimezone(pytz.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


Timestamp = Annotated[datetime, PlainSerializer(_utc_timestamp, return_type=str, when_used="json")]


class DocumentModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        """Document body for the gateway. The id lives outside the body."""
        return self.model_dump(mode="json", by_alias=True, exclude={"id"})


class Status(str, enum.Enum):
    not_started = "Not Started"
    in_progress = "In Progress"
    completed = "Completed"


# ---------------------- SUB-RECORDS ----------------------
class Milestone(DocumentModel):
    id: str
    name: str = "New Milestone"
    completed: bool = False


class Note(DocumentModel):
    id: str
    text: str
    created_at: Timestamp


class Priority(DocumentModel):
    importance: int = Field(5, ge=1, le=10)
    urgency: int = Field(5, ge=1, le=10)
    effort: int = Field(5, ge=1, le=10)
    impact: int = Field(5, ge=1, le=10)


# ---------------------- GOALS / PROJECTS ----------------------
class MilestoneRecord(DocumentModel):
    id: Optional[str] = None
    name: str
    status: Status = Status.not_started
    image_ref: Optional[str] = None
    milestones: List[Milestone] = []
    notes: List[Note] = []
    order: int = 0


class Project(MilestoneRecord):
    name: str = "New Project"


class Goal(MilestoneRecord):
    name: str = "New Goal"
    deadline: Optional[date] = None
    priority: Priority = Field(default_factory=Priority)


# ---------------------- MOOD ----------------------
class MoodLevel(BaseModel):
    id: int
    label: str
    emoji: str
    color: str


MOOD_LEVELS = (
    MoodLevel(id=5, label="Excellent", emoji="😃", color="bg-green-500"),
    MoodLevel(id=4, label="Good", emoji="🙂", color="bg-blue-500"),
    MoodLevel(id=3, label="Neutral", emoji="😐", color="bg-yellow-500"),
    MoodLevel(id=2, label="Poor", emoji="🙁", color="bg-orange-500"),
    MoodLevel(id=1, label="Bad", emoji="😞", color="bg-red-500"),
)


def mood_level(level_id: int) -> MoodLevel:
    for level in MOOD_LEVELS:
        if level.id == level_id:
            return level
    raise ValueError(f"Unknown mood level: {level_id}")


class MoodEntry(DocumentModel):
    id: Optional[str] = None
    mood_level: int = Field(..., ge=1, le=5)
    created_at: Timestamp
    notes: List[Note] = []


# ---------------------- LIFE BALANCE ----------------------
class LifeBalanceCategory(DocumentModel):
    id: Optional[str] = None
    name: str
    value: int = Field(5, ge=0, le=10)


# ---------------------- TO-DO ----------------------
class Todo(DocumentModel):
    id: str
    text: str
    completed: bool = False
    notes: List[Note] = []


class TodoGroup(DocumentModel):
    id: Optional[str] = None
    title: str
    created_at: Timestamp
    todos: List[Todo] = []
