# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, Request

from lifedash.routers.common import ensure_applied, ensure_created, get_trackers, present, require_text
from lifedash.schemas.requests import TextRequest
from lifedash.services import sub_records
from lifedash.services.todo_service import TodoService

router = APIRouter(prefix="/todos", tags=["To-Dos"])


def get_todo_service(request: Request) -> TodoService:
    return get_trackers(request).todos


def _todo_exists(service: TodoService, group_id: str, todo_id: str) -> bool:
    _, todo = service.find_todo(group_id, todo_id)
    return todo is not None


@router.get("")
def list_groups(service: TodoService = Depends(get_todo_service)):
    return [present(g) for g in service.list()]


@router.post("", status_code=201)
def add_group(service: TodoService = Depends(get_todo_service)):
    return present(ensure_created(service.add_group(), "to-do group"))


@router.delete("/{group_id}")
def delete_group(group_id: str, service: TodoService = Depends(get_todo_service)):
    existed = service.get(group_id) is not None
    cascade = ensure_applied(service.delete_group(group_id), existed, "To-do group")
    return {"status": "deleted", "id": group_id, "removedSubRecords": cascade.sub_record_count}


# ---------------------- TODOS ----------------------
@router.post("/{group_id}/items", status_code=201)
def add_todo(group_id: str, body: TextRequest, service: TodoService = Depends(get_todo_service)):
    require_text(body.text, "Task")
    result = service.add_todo(group_id, body.text)
    return present(ensure_applied(result, service.get(group_id) is not None, "To-do group"))


@router.patch("/{group_id}/items/{todo_id}")
def edit_todo(group_id: str, todo_id: str, body: TextRequest,
              service: TodoService = Depends(get_todo_service)):
    require_text(body.text, "Task")
    result = service.update_todo_text(group_id, todo_id, body.text)
    return present(ensure_applied(result, _todo_exists(service, group_id, todo_id), "To-do"))


@router.post("/{group_id}/items/{todo_id}/toggle")
def toggle_todo(group_id: str, todo_id: str, service: TodoService = Depends(get_todo_service)):
    result = service.toggle_todo(group_id, todo_id)
    return present(ensure_applied(result, _todo_exists(service, group_id, todo_id), "To-do"))


@router.delete("/{group_id}/items/{todo_id}")
def delete_todo(group_id: str, todo_id: str, service: TodoService = Depends(get_todo_service)):
    result = service.delete_todo(group_id, todo_id)
    return present(ensure_applied(result, _todo_exists(service, group_id, todo_id), "To-do"))


# ---------------------- TODO NOTES ----------------------
@router.post("/{group_id}/items/{todo_id}/notes", status_code=201)
def add_todo_note(group_id: str, todo_id: str, body: TextRequest,
                  service: TodoService = Depends(get_todo_service)):
    require_text(body.text, "Note")
    result = service.add_todo_note(group_id, todo_id, body.text)
    return present(ensure_applied(result, _todo_exists(service, group_id, todo_id), "To-do"))


@router.delete("/{group_id}/items/{todo_id}/notes/{note_id}")
def delete_todo_note(group_id: str, todo_id: str, note_id: str,
                     service: TodoService = Depends(get_todo_service)):
    result = service.delete_todo_note(group_id, todo_id, note_id)
    _, todo = service.find_todo(group_id, todo_id)
    exists = todo is not None and sub_records.contains_item(todo.notes, note_id)
    return present(ensure_applied(result, exists, "Note"))
