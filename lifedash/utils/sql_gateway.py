# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import threading
import uuid
from collections import defaultdict
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lifedash.models.database import Base, SessionLocal
from lifedash.models.document import Document
from lifedash.utils.sync_gateway import GatewayError, Snapshot, SnapshotCallback, SyncGateway, Unsubscribe

logger = logging.getLogger(__name__)


def _order_key(order_field):
    def key(doc):
        value = doc.get(order_field)
        return (value is None, value if value is not None else 0)
    return key


class SqlDocumentGateway(SyncGateway):
    """
    Keeps each record as a JSON row in the `documents` table and pushes a
    fresh snapshot to in-process subscribers after every committed write.
    """

    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory
        self._subscribers = defaultdict(list)
        self._lock = threading.Lock()

    def create_tables(self):
        Base.metadata.create_all(bind=self.session_factory.kw["bind"])

    # ---------------------- READS ----------------------
    def snapshot(self, collection: str, order_field: str, descending: bool = False) -> Snapshot:
        db: Session = self.session_factory()
        try:
            rows = (
                db.query(Document)
                .filter(Document.collection == collection)
                .order_by(Document.seq)
                .all()
            )
            docs = [dict(row.payload, id=row.doc_id) for row in rows]
        except SQLAlchemyError as e:
            raise GatewayError(f"Failed to read collection '{collection}'") from e
        finally:
            db.close()

        return sorted(docs, key=_order_key(order_field), reverse=descending)

    def subscribe(self, collection: str, order_field: str, callback: SnapshotCallback,
                  descending: bool = False) -> Unsubscribe:
        entry = (order_field, descending, callback)
        with self._lock:
            self._subscribers[collection].append(entry)

        # ✅ Like a live query: deliver the current state right away
        callback(self.snapshot(collection, order_field, descending))

        def unsubscribe():
            with self._lock:
                if entry in self._subscribers[collection]:
                    self._subscribers[collection].remove(entry)

        return unsubscribe

    def _notify(self, collection: str):
        with self._lock:
            subscribers = list(self._subscribers[collection])

        for order_field, descending, callback in subscribers:
            try:
                callback(self.snapshot(collection, order_field, descending))
            except Exception as e:
                logger.error(f"🛑 Snapshot listener for '{collection}' failed: {e}", exc_info=True)

    # ---------------------- WRITES ----------------------
    def add_record(self, collection: str, fields: Dict[str, Any]) -> str:
        doc_id = uuid.uuid4().hex
        db: Session = self.session_factory()
        try:
            db.add(Document(collection=collection, doc_id=doc_id, payload=dict(fields)))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise GatewayError(f"Failed to add record to '{collection}'") from e
        finally:
            db.close()

        self._notify(collection)
        return doc_id

    def update_record(self, collection: str, record_id: str, fields: Dict[str, Any]) -> None:
        db: Session = self.session_factory()
        try:
            row = db.query(Document).filter(
                Document.collection == collection,
                Document.doc_id == record_id
            ).first()
            if not row:
                raise GatewayError(f"No document {collection}/{record_id}")

            # Reassign so SQLAlchemy sees the change
            row.payload = {**row.payload, **fields}
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise GatewayError(f"Failed to update {collection}/{record_id}") from e
        finally:
            db.close()

        self._notify(collection)

    def delete_record(self, collection: str, record_id: str) -> None:
        db: Session = self.session_factory()
        try:
            (
                db.query(Document)
                .filter(Document.collection == collection, Document.doc_id == record_id)
                .delete(synchronize_session=False)
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise GatewayError(f"Failed to delete {collection}/{record_id}") from e
        finally:
            db.close()

        self._notify(collection)
