# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, HTTPException, Request

from lifedash.routers.common import ensure_applied, get_trackers, present, require_text
from lifedash.schemas.requests import CategoryCreateRequest, CategoryValueRequest
from lifedash.services.life_balance_service import LifeBalanceService

router = APIRouter(prefix="/life-balance", tags=["Life Balance"])


def get_life_balance_service(request: Request) -> LifeBalanceService:
    return get_trackers(request).life_balance


@router.get("")
def list_categories(service: LifeBalanceService = Depends(get_life_balance_service)):
    service.seed_defaults()
    return [present(c) for c in service.list()]


@router.post("", status_code=201)
def add_category(body: CategoryCreateRequest, service: LifeBalanceService = Depends(get_life_balance_service)):
    name = require_text(body.name, "Category name")
    if service.find(name) is not None:
        raise HTTPException(status_code=409, detail=f"Category '{name}' already exists")

    category = service.add_category(name, body.value)
    if category is None:
        raise HTTPException(status_code=503, detail="Could not create category, please retry")
    return present(category)


@router.patch("/{name:path}")
def set_value(name: str, body: CategoryValueRequest,
              service: LifeBalanceService = Depends(get_life_balance_service)):
    result = service.set_value(name, body.value)
    return present(ensure_applied(result, service.find(name) is not None, "Category"))


@router.delete("/{name:path}")
def delete_category(name: str, service: LifeBalanceService = Depends(get_life_balance_service)):
    existed = service.find(name) is not None
    ensure_applied(service.delete_category(name), existed, "Category")
    return {"status": "deleted", "name": name}
