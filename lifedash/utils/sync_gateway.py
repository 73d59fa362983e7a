# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List

# One snapshot is the whole collection, each document carrying its "id"
Snapshot = List[Dict[str, Any]]
SnapshotCallback = Callable[[Snapshot], None]
Unsubscribe = Callable[[], None]


class GatewayError(Exception):
    """A read or write against the document store did not go through."""


class SyncGateway(ABC):
    @abstractmethod
    def subscribe(self, collection: str, order_field: str, callback: SnapshotCallback,
                  descending: bool = False) -> Unsubscribe:
        """Delivers full-collection snapshots until the returned callable is invoked."""
        pass

    @abstractmethod
    def add_record(self, collection: str, fields: Dict[str, Any]) -> str:
        """Stores a new document and returns its generated id."""
        pass

    @abstractmethod
    def update_record(self, collection: str, record_id: str, fields: Dict[str, Any]) -> None:
        """Replaces the given top-level fields of one document."""
        pass

    @abstractmethod
    def delete_record(self, collection: str, record_id: str) -> None:
        pass
