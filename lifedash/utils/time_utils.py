# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

from datetime import date, datetime
from typing import Optional

import pytz

from lifedash import config


def dashboard_tz():
    return pytz.timezone(config.DASHBOARD_TIMEZONE)


def now_utc() -> datetime:
    return datetime.now(pytz.utc)


def today() -> date:
    return datetime.now(dashboard_tz()).date()


def day_title(moment: Optional[datetime] = None) -> str:
    """e.g. "Monday, January 1, 2024" in the dashboard's timezone."""
    moment = moment or now_utc()
    if moment.tzinfo is not None:
        moment = moment.astimezone(dashboard_tz())
    return f"{moment:%A}, {moment:%B} {moment.day}, {moment.year}"
