# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

import enum
import unicodedata
from typing import List, Sequence, Tuple, TypeVar

from lifedash.services.priority_scoring import priority_score

R = TypeVar("R")


class SortKey(str, enum.Enum):
    default = "default"
    priority_high = "priority-high"
    priority_low = "priority-low"
    deadline = "deadline"
    name = "name"


def collation_key(text: str) -> Tuple[str, str]:
    """
    Accent- and case-folded first, so "éclair" sorts with "eclair".
    Names that fold equal fall back to plain letters before accented
    ones and lowercase before uppercase, as a locale compare does.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold(), text.swapcase()


def _score(record) -> float:
    priority = getattr(record, "priority", None)
    return priority_score(priority) if priority is not None else 0.0


def _deadline_key(record):
    deadline = getattr(record, "deadline", None)
    # Undated records go last
    return (deadline is None, deadline.isoformat() if deadline else "")


def sort_records(records: Sequence[R], key) -> List[R]:
    """
    Returns a new ordered list; the source sequence and the stored
    `order` values are never touched. Python's sort is stable, so
    ties keep their incoming order.
    """
    key = SortKey(key)

    if key == SortKey.priority_high:
        return sorted(records, key=_score, reverse=True)
    if key == SortKey.priority_low:
        return sorted(records, key=_score)
    if key == SortKey.deadline:
        return sorted(records, key=_deadline_key)
    if key == SortKey.name:
        return sorted(records, key=lambda r: collation_key(r.name))
    return sorted(records, key=lambda r: r.order)


def next_order(records: Sequence) -> int:
    if not records:
        return 0
    return max(r.order for r in records) + 1
