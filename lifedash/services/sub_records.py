# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

"""
Helpers for notes, milestones and todos owned by a parent record.

Every helper returns a new list and leaves its input untouched, so the
result can be written back as the replacement for one field path.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence

import pytz

from lifedash.schemas.records import Milestone, Note, Todo


def new_id() -> str:
    return uuid.uuid4().hex


def clean_text(text: Optional[str]) -> Optional[str]:
    """Trimmed text, or None when nothing is left."""
    if text is None:
        return None
    text = text.strip()
    return text or None


def make_note(text: Optional[str], now: Optional[datetime] = None) -> Optional[Note]:
    text = clean_text(text)
    if text is None:
        return None
    return Note(id=new_id(), text=text, created_at=now or datetime.now(pytz.utc))


def with_note(notes: Sequence[Note], note: Note) -> List[Note]:
    # Newest first
    return [note, *notes]


def without_item(items: Sequence, item_id: str) -> List:
    return [item for item in items if item.id != item_id]


def contains_item(items: Sequence, item_id: str) -> bool:
    return any(item.id == item_id for item in items)


# ---------------------- MILESTONES ----------------------
def make_milestone(name: Optional[str] = None) -> Milestone:
    name = clean_text(name)
    if name is None:
        return Milestone(id=new_id())
    return Milestone(id=new_id(), name=name)


def rename_milestone(milestones: Sequence[Milestone], milestone_id: str, name: str) -> List[Milestone]:
    return [
        m.model_copy(update={"name": name}) if m.id == milestone_id else m
        for m in milestones
    ]


def toggle_milestone(milestones: Sequence[Milestone], milestone_id: str) -> List[Milestone]:
    return [
        m.model_copy(update={"completed": not m.completed}) if m.id == milestone_id else m
        for m in milestones
    ]


# ---------------------- TODOS ----------------------
def make_todo(text: Optional[str]) -> Optional[Todo]:
    text = clean_text(text)
    if text is None:
        return None
    return Todo(id=new_id(), text=text)


def update_todo(todos: Sequence[Todo], todo_id: str, **changes) -> List[Todo]:
    return [t.model_copy(update=changes) if t.id == todo_id else t for t in todos]


# ---------------------- CASCADE ----------------------
@dataclass
class CascadeResult:
    """What disappears together with a deleted parent record."""
    record_id: Optional[str]
    milestone_ids: List[str] = field(default_factory=list)
    note_ids: List[str] = field(default_factory=list)
    todo_ids: List[str] = field(default_factory=list)
    blob_paths: List[str] = field(default_factory=list)

    @property
    def sub_record_count(self) -> int:
        return len(self.milestone_ids) + len(self.note_ids) + len(self.todo_ids)


def cascade_delete(record) -> CascadeResult:
    """
    Collects every sub-record and blob owned by `record`. Sub-records are
    embedded in the parent document, so deleting the document discards
    them; blobs live elsewhere and must be deleted by the caller.
    """
    result = CascadeResult(record_id=getattr(record, "id", None))

    for milestone in getattr(record, "milestones", None) or []:
        result.milestone_ids.append(milestone.id)
    for note in getattr(record, "notes", None) or []:
        result.note_ids.append(note.id)
    for todo in getattr(record, "todos", None) or []:
        result.todo_ids.append(todo.id)
        result.note_ids.extend(n.id for n in todo.notes)

    image_ref = getattr(record, "image_ref", None)
    if image_ref:
        result.blob_paths.append(image_ref)
    return result
