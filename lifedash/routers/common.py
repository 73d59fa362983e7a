# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

"""
Pieces shared by the tracker routers: service lookup, turning a
service's `None` into the right HTTP error, and response shapes.
"""

from typing import Callable, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile

from lifedash.schemas.requests import MilestoneCreateRequest, RenameRequest, TextRequest
from lifedash.services import sub_records
from lifedash.services.image_service import attach_image, is_image
from lifedash.services.milestone_tracker import MilestoneTrackerService
from lifedash.services.priority_scoring import format_score, priority_score
from lifedash.services.status_derivation import progress_percent
from lifedash.services.trackers import Trackers


def get_trackers(request: Request) -> Trackers:
    return request.app.state.trackers


# ---------------------- RESULT CHECKS ----------------------
def require_text(text: Optional[str], what: str = "Text") -> str:
    cleaned = sub_records.clean_text(text)
    if cleaned is None:
        raise HTTPException(status_code=400, detail=f"{what} must not be blank")
    return cleaned


def ensure_applied(result, exists: bool, what: str):
    """
    None from a service means the target was missing or the write did
    not go through. Missing is a 404; a failed write is retryable.
    """
    if result is not None:
        return result
    if not exists:
        raise HTTPException(status_code=404, detail=f"{what} not found")
    raise HTTPException(status_code=503, detail="Sync failed, please retry")


def ensure_created(result, what: str):
    if result is None:
        raise HTTPException(status_code=503, detail=f"Could not create {what}, please retry")
    return result


# ---------------------- RESPONSES ----------------------
def image_url(request: Request, image_ref: Optional[str]) -> Optional[str]:
    blob_store = get_trackers(request).blob_store
    if not image_ref or blob_store is None:
        return None
    return blob_store.get_object_url(image_ref)


def present_project(request: Request, project) -> dict:
    data = project.model_dump(mode="json", by_alias=True)
    data["progress"] = progress_percent(project.milestones)
    data["imageUrl"] = image_url(request, project.image_ref)
    return data


def present_goal(request: Request, goal) -> dict:
    data = present_project(request, goal)
    score = priority_score(goal.priority)
    data["priorityScore"] = score
    data["priorityLabel"] = format_score(score)
    return data


def present(record) -> dict:
    return record.model_dump(mode="json", by_alias=True)


# ---------------------- MILESTONE / NOTE / IMAGE ROUTES ----------------------
def add_milestone_routes(router: APIRouter, get_service: Callable, present_record: Callable, what: str):
    """Routes shared by goals and projects, mounted under /{record_id}."""

    def _exists(service: MilestoneTrackerService, record_id: str, milestone_id: str = None) -> bool:
        record = service.get(record_id)
        if record is None:
            return False
        return milestone_id is None or sub_records.contains_item(record.milestones, milestone_id)

    @router.post("/{record_id}/milestones", status_code=201)
    def add_milestone(record_id: str, body: MilestoneCreateRequest, request: Request,
                      service: MilestoneTrackerService = Depends(get_service)):
        result = service.add_milestone(record_id, body.name)
        return present_record(request, ensure_applied(result, _exists(service, record_id), what))

    @router.patch("/{record_id}/milestones/{milestone_id}")
    def rename_milestone(record_id: str, milestone_id: str, body: RenameRequest, request: Request,
                         service: MilestoneTrackerService = Depends(get_service)):
        name = require_text(body.name, "Name")
        result = service.rename_milestone(record_id, milestone_id, name)
        return present_record(request, ensure_applied(
            result, _exists(service, record_id, milestone_id), "Milestone"))

    @router.post("/{record_id}/milestones/{milestone_id}/toggle")
    def toggle_milestone(record_id: str, milestone_id: str, request: Request,
                         service: MilestoneTrackerService = Depends(get_service)):
        result = service.toggle_milestone(record_id, milestone_id)
        return present_record(request, ensure_applied(
            result, _exists(service, record_id, milestone_id), "Milestone"))

    @router.delete("/{record_id}/milestones/{milestone_id}")
    def delete_milestone(record_id: str, milestone_id: str, request: Request,
                         service: MilestoneTrackerService = Depends(get_service)):
        result = service.delete_milestone(record_id, milestone_id)
        return present_record(request, ensure_applied(
            result, _exists(service, record_id, milestone_id), "Milestone"))

    @router.post("/{record_id}/notes", status_code=201)
    def add_note(record_id: str, body: TextRequest, request: Request,
                 service: MilestoneTrackerService = Depends(get_service)):
        require_text(body.text, "Note")
        result = service.add_note(record_id, body.text)
        return present_record(request, ensure_applied(result, _exists(service, record_id), what))

    @router.delete("/{record_id}/notes/{note_id}")
    def delete_note(record_id: str, note_id: str, request: Request,
                    service: MilestoneTrackerService = Depends(get_service)):
        result = service.delete_note(record_id, note_id)
        record = service.get(record_id)
        exists = record is not None and sub_records.contains_item(record.notes, note_id)
        return present_record(request, ensure_applied(result, exists, "Note"))

    @router.put("/{record_id}/image")
    def upload_image(record_id: str, request: Request, file: UploadFile = File(...),
                     service: MilestoneTrackerService = Depends(get_service)):
        if not is_image(file.content_type):
            raise HTTPException(status_code=415, detail="Only image uploads are accepted")
        data = file.file.read()
        if not data:
            raise HTTPException(status_code=400, detail="Empty upload")
        result = attach_image(service, record_id, file.filename, data, file.content_type)
        return present_record(request, ensure_applied(result, _exists(service, record_id), what))

    @router.delete("/{record_id}/image")
    def remove_image(record_id: str, request: Request,
                     service: MilestoneTrackerService = Depends(get_service)):
        record = service.get(record_id)
        if record is not None and not record.image_ref:
            return present_record(request, record)
        result = service.remove_image(record_id)
        return present_record(request, ensure_applied(result, record is not None, what))

    return router
