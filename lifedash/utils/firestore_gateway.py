# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from typing import Any, Dict

from google.api_core.exceptions import GoogleAPICallError
from google.cloud.firestore import Query

from lifedash.utils.sync_gateway import GatewayError, SnapshotCallback, SyncGateway, Unsubscribe

logger = logging.getLogger(__name__)


class FirestoreGateway(SyncGateway):
    """Live collections backed by Cloud Firestore through firebase_admin."""

    def __init__(self, client):
        self.client = client

    def subscribe(self, collection: str, order_field: str, callback: SnapshotCallback,
                  descending: bool = False) -> Unsubscribe:
        direction = Query.DESCENDING if descending else Query.ASCENDING
        query = self.client.collection(collection).order_by(order_field, direction=direction)

        # ⚠️ Runs on Firestore's listener thread
        def on_snapshot(docs, changes, read_time):
            callback([dict(doc.to_dict() or {}, id=doc.id) for doc in docs])

        watch = query.on_snapshot(on_snapshot)
        logger.info(f"📡 Subscribed to '{collection}' ordered by {order_field}")
        return watch.unsubscribe

    def add_record(self, collection: str, fields: Dict[str, Any]) -> str:
        try:
            _, ref = self.client.collection(collection).add(fields)
        except GoogleAPICallError as e:
            raise GatewayError(f"Failed to add record to '{collection}'") from e
        return ref.id

    def update_record(self, collection: str, record_id: str, fields: Dict[str, Any]) -> None:
        try:
            self.client.collection(collection).document(record_id).update(fields)
        except GoogleAPICallError as e:
            raise GatewayError(f"Failed to update {collection}/{record_id}") from e

    def delete_record(self, collection: str, record_id: str) -> None:
        try:
            self.client.collection(collection).document(record_id).delete()
        except GoogleAPICallError as e:
            raise GatewayError(f"Failed to delete {collection}/{record_id}") from e
