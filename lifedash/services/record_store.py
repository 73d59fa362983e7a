# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

"""
Observer store holding the local view of one remote collection.

A gateway snapshot always replaces the whole view. Between snapshots the
services may apply a change optimistically and revert it if the write
fails; the next snapshot from the gateway settles the final state.
"""

import logging
import threading
from typing import Callable, Dict, Iterable, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from lifedash.utils.sync_gateway import SyncGateway

logger = logging.getLogger(__name__)

Listener = Callable[[tuple], None]


def reduce_snapshot(documents: Iterable[dict], model: Type[BaseModel]) -> tuple:
    records = []
    for doc in documents:
        try:
            records.append(model.model_validate(doc))
        except ValidationError as e:
            logger.warning(f"⚠️ Skipping malformed {model.__name__} document {doc.get('id')}: {e}")
    return tuple(records)


class RecordStore:
    def __init__(self, gateway: SyncGateway, collection: str, model: Type[BaseModel],
                 order_field: str = "order", descending: bool = False):
        self.gateway = gateway
        self.collection = collection
        self.model = model
        self.order_field = order_field
        self.descending = descending

        self._records: tuple = ()
        self._listeners = []
        self._lock = threading.Lock()
        self._unsubscribe = None
        self.loaded = False

    # ---------------------- SUBSCRIPTION ----------------------
    def start(self):
        if self._unsubscribe is None:
            self._unsubscribe = self.gateway.subscribe(
                self.collection, self.order_field, self._on_snapshot, descending=self.descending
            )

    def stop(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_snapshot(self, documents):
        self.loaded = True
        self._replace(reduce_snapshot(documents, self.model))

    def _replace(self, records: tuple):
        with self._lock:
            self._records = records
        for listener in list(self._listeners):
            listener(records)

    def add_listener(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def remove():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    # ---------------------- READS ----------------------
    def records(self) -> tuple:
        with self._lock:
            return self._records

    def get(self, record_id: str):
        for record in self.records():
            if record.id == record_id:
                return record
        return None

    # ---------------------- OPTIMISTIC CHANGES ----------------------
    def apply_optimistic(self, record_id: str, changes: Dict) -> Optional[BaseModel]:
        """Merges `changes` into the local record; returns the record as it was."""
        previous = self.get(record_id)
        if previous is None:
            return None
        updated = previous.model_copy(update=changes)
        self._replace(tuple(updated if r.id == record_id else r for r in self.records()))
        return previous

    def revert(self, previous: BaseModel):
        records = self.records()
        if any(r.id == previous.id for r in records):
            self._replace(tuple(previous if r.id == previous.id else r for r in records))

    def discard_optimistic(self, record_id: str) -> Optional[Tuple[int, BaseModel]]:
        records = self.records()
        for index, record in enumerate(records):
            if record.id == record_id:
                self._replace(records[:index] + records[index + 1:])
                return index, record
        return None

    def restore(self, index: int, record: BaseModel):
        records = self.records()
        if any(r.id == record.id for r in records):
            return
        self._replace(records[:index] + (record,) + records[index:])
