# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

"""
Shared write path for every tracker.

Mutations are sent as partial updates of the touched top-level fields.
Each one is applied to the local store first and reverted when the
gateway rejects it. Failed writes are logged and the operation returns
None; so does any operation whose target record is not in the store.

Mutations of one service run one at a time under `write_lock`, from
reading the current record to the gateway write, so concurrent requests
never build on the same stale list.
"""

import functools
import logging
import threading
from typing import Dict, Iterable, Optional

from lifedash.services.record_store import RecordStore
from lifedash.services.sub_records import CascadeResult, cascade_delete
from lifedash.utils.blob_store import BlobStore, BlobStoreError
from lifedash.utils.sync_gateway import GatewayError, SyncGateway

logger = logging.getLogger(__name__)


def serialized(method):
    """Holds the service's write lock for the whole read-modify-write."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self.write_lock:
            return method(self, *args, **kwargs)
    return wrapper


class TrackerService:
    collection = None
    model = None
    order_field = "order"
    descending = False

    def __init__(self, gateway: SyncGateway, blob_store: Optional[BlobStore] = None):
        self.gateway = gateway
        self.blob_store = blob_store
        self.write_lock = threading.RLock()
        self.store = RecordStore(gateway, self.collection, self.model,
                                 order_field=self.order_field, descending=self.descending)

    def start(self):
        self.store.start()

    def stop(self):
        self.store.stop()

    def list(self) -> list:
        return list(self.store.records())

    def get(self, record_id: str):
        return self.store.get(record_id)

    # ---------------------- WRITE PATH ----------------------
    def _document_fields(self, record, changes: Dict) -> Dict:
        document = record.to_document()
        aliases = [self.model.model_fields[name].alias or name for name in changes]
        return {alias: document[alias] for alias in aliases}

    @serialized
    def _create(self, record):
        try:
            record_id = self.gateway.add_record(self.collection, record.to_document())
        except GatewayError as e:
            logger.error(f"🛑 Failed to add {self.model.__name__}: {e}", exc_info=True)
            return None

        logger.info(f"✅ Added {self.model.__name__} {record_id}")
        return self.store.get(record_id) or record.model_copy(update={"id": record_id})

    @serialized
    def _update(self, record_id: str, changes: Dict):
        previous = self.store.apply_optimistic(record_id, changes)
        if previous is None:
            logger.info(f"⚠️ {self.model.__name__} {record_id} not found; nothing to update")
            return None

        fields = self._document_fields(previous.model_copy(update=changes), changes)
        try:
            self.gateway.update_record(self.collection, record_id, fields)
        except GatewayError as e:
            logger.error(f"🛑 Failed to update {self.model.__name__} {record_id}: {e}", exc_info=True)
            self.store.revert(previous)
            return None

        return self.store.get(record_id)

    @serialized
    def _delete(self, record_id: str) -> Optional[CascadeResult]:
        removed = self.store.discard_optimistic(record_id)
        if removed is None:
            logger.info(f"⚠️ {self.model.__name__} {record_id} not found; nothing to delete")
            return None

        index, record = removed
        cascade = cascade_delete(record)
        try:
            self.gateway.delete_record(self.collection, record_id)
        except GatewayError as e:
            logger.error(f"🛑 Failed to delete {self.model.__name__} {record_id}: {e}", exc_info=True)
            self.store.restore(index, record)
            return None

        self.delete_blobs(cascade.blob_paths)
        logger.info(
            f"🗑️ Deleted {self.model.__name__} {record_id} with {cascade.sub_record_count} sub-records"
        )
        return cascade

    def delete_blobs(self, paths: Iterable[str]):
        if self.blob_store is None:
            return
        for path in paths:
            try:
                self.blob_store.delete_object(path)
            except BlobStoreError as e:
                logger.warning(f"⚠️ Could not delete blob {path}: {e}")
