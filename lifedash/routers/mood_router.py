# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from lifedash.routers.common import ensure_applied, ensure_created, get_trackers, present, require_text
from lifedash.schemas.records import mood_level
from lifedash.schemas.requests import MoodEntryCreateRequest, TextRequest
from lifedash.services import sub_records
from lifedash.services.mood_service import MoodService

router = APIRouter(prefix="/mood", tags=["Mood"])


def get_mood_service(request: Request) -> MoodService:
    return get_trackers(request).mood


def present_entry(entry) -> dict:
    data = present(entry)
    # 😃 Label, emoji and color travel with the entry
    data["mood"] = mood_level(entry.mood_level).model_dump()
    return data


@router.get("/levels")
def list_levels():
    return [level.model_dump() for level in MoodService.levels()]


@router.get("")
def list_entries(level: Optional[int] = Query(None, ge=1, le=5),
                 service: MoodService = Depends(get_mood_service)):
    """Newest first; `level` keeps only entries of that mood."""
    return [present_entry(e) for e in service.list_filtered(level)]


@router.post("", status_code=201)
def add_entry(body: MoodEntryCreateRequest, service: MoodService = Depends(get_mood_service)):
    entry = ensure_created(service.add_entry(body.mood_level), "mood entry")
    return present_entry(entry)


@router.post("/{entry_id}/notes", status_code=201)
def add_note(entry_id: str, body: TextRequest, service: MoodService = Depends(get_mood_service)):
    require_text(body.text, "Note")
    result = service.add_note(entry_id, body.text)
    return present_entry(ensure_applied(result, service.get(entry_id) is not None, "Mood entry"))


@router.delete("/{entry_id}/notes/{note_id}")
def delete_note(entry_id: str, note_id: str, service: MoodService = Depends(get_mood_service)):
    result = service.delete_note(entry_id, note_id)
    entry = service.get(entry_id)
    exists = entry is not None and sub_records.contains_item(entry.notes, note_id)
    return present_entry(ensure_applied(result, exists, "Note"))


@router.delete("/{entry_id}")
def delete_entry(entry_id: str, service: MoodService = Depends(get_mood_service)):
    existed = service.get(entry_id) is not None
    cascade = ensure_applied(service.delete(entry_id), existed, "Mood entry")
    return {"status": "deleted", "id": entry_id, "removedSubRecords": cascade.sub_record_count}
