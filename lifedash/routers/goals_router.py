# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, HTTPException, Request

from lifedash.routers.common import (
    add_milestone_routes,
    ensure_applied,
    ensure_created,
    get_trackers,
    present_goal,
    require_text,
)
from lifedash.schemas.requests import GoalCreateRequest, GoalUpdateRequest, PriorityUpdateRequest
from lifedash.services.goal_service import GoalService
from lifedash.services.list_ordering import SortKey

router = APIRouter(prefix="/goals", tags=["Goals"])


def get_goal_service(request: Request) -> GoalService:
    return get_trackers(request).goals


@router.get("")
def list_goals(request: Request, sort: SortKey = SortKey.default,
               service: GoalService = Depends(get_goal_service)):
    """Goals in the chosen order. Sorting never touches the stored `order`."""
    return [present_goal(request, g) for g in service.list_sorted(sort)]


@router.post("", status_code=201)
def add_goal(body: GoalCreateRequest, request: Request,
             service: GoalService = Depends(get_goal_service)):
    goal = ensure_created(service.add_goal(name=body.name, deadline=body.deadline), "goal")
    return present_goal(request, goal)


@router.get("/{goal_id}")
def get_goal(goal_id: str, request: Request, service: GoalService = Depends(get_goal_service)):
    goal = service.get(goal_id)
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return present_goal(request, goal)


@router.patch("/{goal_id}")
def update_goal(goal_id: str, body: GoalUpdateRequest, request: Request,
                service: GoalService = Depends(get_goal_service)):
    goal = service.get(goal_id)
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")

    if body.name is not None:
        goal = ensure_applied(service.rename(goal_id, require_text(body.name, "Name")), True, "Goal")
    if body.deadline is not None:
        goal = ensure_applied(service.set_deadline(goal_id, body.deadline), True, "Goal")
    return present_goal(request, goal)


@router.patch("/{goal_id}/priority")
def update_priority(goal_id: str, body: PriorityUpdateRequest, request: Request,
                    service: GoalService = Depends(get_goal_service)):
    result = service.update_priority(goal_id, **body.model_dump())
    return present_goal(request, ensure_applied(result, service.get(goal_id) is not None, "Goal"))


@router.delete("/{goal_id}")
def delete_goal(goal_id: str, service: GoalService = Depends(get_goal_service)):
    existed = service.get(goal_id) is not None
    cascade = ensure_applied(service.delete(goal_id), existed, "Goal")
    return {
        "status": "deleted",
        "id": goal_id,
        "removedSubRecords": cascade.sub_record_count,
    }


add_milestone_routes(router, get_goal_service, present_goal, "Goal")
