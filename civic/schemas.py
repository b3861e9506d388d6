"""
Request/response models for the public JSON API.

Input models mirror the insert shape of each entity kind: everything except
the identifier and the server-derived fields. Unknown keys are ignored, so a
client-supplied announcement ``date`` never reaches the store.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


# -------------------------- inputs --------------------------
class IssueCreate(_CamelModel):
    category: str
    description: str
    location: str
    photo_url: Optional[str] = None


class AnnouncementCreate(_CamelModel):
    title: str
    category: str
    description: str


class EventCreate(_CamelModel):
    title: str
    date: datetime
    time: str
    location: str
    description: str


class DiscussionCreate(_CamelModel):
    author: str
    content: str
    parent_id: Optional[str] = None


# -------------------------- outputs --------------------------
class IssueOut(_CamelModel):
    id: str
    category: str
    description: str
    location: str
    photo_url: Optional[str]
    status: str
    created_at: datetime


class AnnouncementOut(_CamelModel):
    id: str
    title: str
    category: str
    description: str
    date: datetime


class EventOut(_CamelModel):
    id: str
    title: str
    date: datetime
    time: str
    location: str
    description: str


class DiscussionOut(_CamelModel):
    id: str
    author: str
    content: str
    timestamp: datetime
    parent_id: Optional[str]


class DiscussionThreadOut(_CamelModel):
    discussion: DiscussionOut
    replies: List[DiscussionOut]
