# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

from lifedash.schemas.records import Priority

# Relative weight of each rated criterion; sums to 1.0
PRIORITY_WEIGHTS = {
    "importance": 0.4,
    "urgency": 0.3,
    "effort": 0.2,
    "impact": 0.1,
}


def priority_score(priority: Priority) -> float:
    """
    Weighted sum of the four ratings.
    With every rating in [1, 10] the score stays in [1.0, 10.0].
    """
    total = sum(getattr(priority, name) * weight for name, weight in PRIORITY_WEIGHTS.items())
    # Drop binary noise such as 5.800000000000001
    return round(total, 10)


def format_score(score: float) -> str:
    return f"{score:.2f}"
