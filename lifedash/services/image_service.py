# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import mimetypes
import os
import uuid
from typing import Optional

from lifedash.services.milestone_tracker import MilestoneTrackerService
from lifedash.utils.blob_store import BlobStoreError

logger = logging.getLogger(__name__)


def is_image(content_type: Optional[str]) -> bool:
    return bool(content_type) and content_type.startswith("image/")


def blob_path(collection: str, record_id: str, filename: Optional[str], content_type: Optional[str]) -> str:
    ext = os.path.splitext(filename or "")[1].lower()
    if not ext and content_type:
        ext = mimetypes.guess_extension(content_type) or ""
    return f"{collection}/{record_id}/{uuid.uuid4().hex}{ext}"


def attach_image(service: MilestoneTrackerService, record_id: str, filename: Optional[str],
                 data: bytes, content_type: Optional[str]):
    """
    Two steps: store the blob, then point the record at it.
    If the second step fails the blob stays behind; nothing is rolled back.
    """
    if not is_image(content_type) or not data:
        return None

    record = service.get(record_id)
    if record is None or service.blob_store is None:
        return None

    path = blob_path(service.collection, record_id, filename, content_type)
    try:
        service.blob_store.put_object(path, data, content_type=content_type)
    except BlobStoreError as e:
        logger.error(f"🛑 Image upload failed for {service.collection}/{record_id}: {e}", exc_info=True)
        return None

    with service.write_lock:
        current = service.get(record_id)
        replaced = current.image_ref if current is not None else None
        updated = service.set_image_ref(record_id, path)
    if updated is None:
        logger.warning(f"⚠️ Uploaded {path} but could not attach it to {record_id}")
        return None

    # Replaced image is no longer referenced
    if replaced and replaced != path:
        service.delete_blobs([replaced])

    logger.info(f"🖼️ Attached {path} to {service.collection}/{record_id}")
    return updated
