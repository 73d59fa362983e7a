# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import time
from typing import Optional

from lifedash.services.goal_service import GoalService
from lifedash.services.life_balance_service import LifeBalanceService
from lifedash.services.mood_service import MoodService
from lifedash.services.project_service import ProjectService
from lifedash.services.todo_service import TodoService
from lifedash.utils.blob_store import BlobStore
from lifedash.utils.sync_gateway import SyncGateway

logger = logging.getLogger(__name__)


class Trackers:
    """One service, and so one collection subscription, per tracker."""

    def __init__(self, gateway: SyncGateway, blob_store: Optional[BlobStore] = None):
        self.gateway = gateway
        self.blob_store = blob_store
        self.goals = GoalService(gateway, blob_store)
        self.projects = ProjectService(gateway, blob_store)
        self.mood = MoodService(gateway, blob_store)
        self.life_balance = LifeBalanceService(gateway, blob_store)
        self.todos = TodoService(gateway, blob_store)

    def all(self):
        return [
            ("Goals", self.goals),
            ("Projects", self.projects),
            ("Mood", self.mood),
            ("LifeBalance", self.life_balance),
            ("Todos", self.todos),
        ]

    def start(self):
        logger.info("📡 Starting tracker subscriptions...")
        for name, service in self.all():
            start = time.time()
            service.start()
            duration = round(time.time() - start, 2)
            logger.info(f"✅ {name} subscribed in {duration} sec.")

    def stop(self):
        for name, service in self.all():
            try:
                service.stop()
            except Exception as e:
                logger.error(f"🛑 {name} unsubscribe failed: {e}", exc_info=True)
