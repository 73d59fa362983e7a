# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from typing import Optional

from lifedash.schemas.records import LifeBalanceCategory
from lifedash.services import sub_records
from lifedash.services.tracker_service import TrackerService, serialized

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = (
    ("Health", 8),
    ("Relationships", 7),
    ("Career", 6),
    ("Finance", 5),
    ("Growth", 7),
    ("Leisure", 6),
)


class LifeBalanceService(TrackerService):
    """Radar categories. The category name is the identifier users see and edit by."""

    collection = "lifeBalance"
    model = LifeBalanceCategory
    order_field = "name"

    def __init__(self, gateway, blob_store=None):
        super().__init__(gateway, blob_store)
        self._seeded = False

    def find(self, name: str) -> Optional[LifeBalanceCategory]:
        for category in self.store.records():
            if category.name == name:
                return category
        return None

    @serialized
    def seed_defaults(self) -> int:
        """Fills an empty collection with the starter categories, once."""
        # Wait for the first snapshot so an existing collection is never re-seeded
        if self._seeded or not self.store.loaded or self.store.records():
            return 0
        self._seeded = True

        added = 0
        for name, value in DEFAULT_CATEGORIES:
            if self._create(LifeBalanceCategory(name=name, value=value)) is not None:
                added += 1
        logger.info(f"🌱 Seeded {added} life-balance categories")
        return added

    @serialized
    def add_category(self, name: Optional[str], value: int = 5):
        name = sub_records.clean_text(name)
        if name is None:
            return None
        if self.find(name) is not None:
            logger.info(f"⚠️ Category '{name}' already exists")
            return None
        return self._create(LifeBalanceCategory(name=name, value=value))

    @serialized
    def set_value(self, name: str, value: int):
        category = self.find(name)
        if category is None:
            return None
        # Bounds check before anything reaches the store
        LifeBalanceCategory(name=name, value=value)
        return self._update(category.id, {"value": value})

    @serialized
    def delete_category(self, name: str):
        category = self.find(name)
        if category is None:
            return None
        return self._delete(category.id)
