# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Request

from lifedash.routers.common import (
    add_milestone_routes,
    ensure_applied,
    ensure_created,
    get_trackers,
    present_project,
    require_text,
)
from lifedash.schemas.requests import ProjectCreateRequest, RenameRequest
from lifedash.services.project_service import ProjectService

router = APIRouter(prefix="/projects", tags=["Projects"])


def get_project_service(request: Request) -> ProjectService:
    return get_trackers(request).projects


@router.get("")
def list_projects(request: Request, sort: Literal["default", "name"] = "default",
                  service: ProjectService = Depends(get_project_service)):
    return [present_project(request, p) for p in service.list_sorted(sort)]


@router.post("", status_code=201)
def add_project(body: ProjectCreateRequest, request: Request,
                service: ProjectService = Depends(get_project_service)):
    project = ensure_created(service.add_project(name=body.name), "project")
    return present_project(request, project)


@router.get("/{project_id}")
def get_project(project_id: str, request: Request,
                service: ProjectService = Depends(get_project_service)):
    project = service.get(project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return present_project(request, project)


@router.patch("/{project_id}")
def rename_project(project_id: str, body: RenameRequest, request: Request,
                   service: ProjectService = Depends(get_project_service)):
    result = service.rename(project_id, require_text(body.name, "Name"))
    return present_project(request, ensure_applied(result, service.get(project_id) is not None, "Project"))


@router.delete("/{project_id}")
def delete_project(project_id: str, service: ProjectService = Depends(get_project_service)):
    existed = service.get(project_id) is not None
    cascade = ensure_applied(service.delete(project_id), existed, "Project")
    return {
        "status": "deleted",
        "id": project_id,
        "removedSubRecords": cascade.sub_record_count,
    }


add_milestone_routes(router, get_project_service, present_project, "Project")
