# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.



from fastapi import APIRouter, Request

from lifedash.routers.common import get_trackers

router = APIRouter(tags=["Infra"])


@router.get("/health")
def health_check(request: Request):
    trackers = get_trackers(request)
    # ✅ A store is "loaded" once its first snapshot arrived
    details = {name: service.store.loaded for name, service in trackers.all()}
    return {
        "status": "ok" if all(details.values()) else "partial",
        "gateway": type(trackers.gateway).__name__,
        "blob_store": type(trackers.blob_store).__name__ if trackers.blob_store else None,
        "details": details,
    }
