# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.


from datetime import date
from typing import Optional

from pydantic import Field

from lifedash.schemas.records import DocumentModel


class GoalCreateRequest(DocumentModel):
    name: Optional[str] = None
    deadline: Optional[date] = None


class GoalUpdateRequest(DocumentModel):
    name: Optional[str] = None
    deadline: Optional[date] = None


class PriorityUpdateRequest(DocumentModel):
    importance: Optional[int] = Field(None, ge=1, le=10)
    urgency: Optional[int] = Field(None, ge=1, le=10)
    effort: Optional[int] = Field(None, ge=1, le=10)
    impact: Optional[int] = Field(None, ge=1, le=10)


class ProjectCreateRequest(DocumentModel):
    name: Optional[str] = None


class RenameRequest(DocumentModel):
    name: str


class MilestoneCreateRequest(DocumentModel):
    name: Optional[str] = None


class TextRequest(DocumentModel):
    text: str


class MoodEntryCreateRequest(DocumentModel):
    mood_level: int = Field(..., ge=1, le=5)


class CategoryCreateRequest(DocumentModel):
    name: str
    value: int = Field(5, ge=0, le=10)


class CategoryValueRequest(DocumentModel):
    value: int = Field(..., ge=0, le=10)
