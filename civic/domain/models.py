"""
Entity records and their builders.

Each ``build_*`` function takes validated input plus the server-side values
(identifier, clock reading) and returns the fully populated, immutable
entity. The split between client-supplied and server-derived fields lives
here and nowhere else.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from civic.core.utils import blank_to_none
from civic.schemas import AnnouncementCreate, DiscussionCreate, EventCreate, IssueCreate

ISSUE_STATUS_PENDING = "pending"


@dataclass(frozen=True)
class Issue:
    id: str
    category: str
    description: str
    location: str
    photo_url: Optional[str]
    status: str
    created_at: datetime


@dataclass(frozen=True)
class Announcement:
    id: str
    title: str
    category: str
    description: str
    date: datetime


@dataclass(frozen=True)
class Event:
    id: str
    title: str
    date: datetime
    time: str
    location: str
    description: str


@dataclass(frozen=True)
class Discussion:
    id: str
    author: str
    content: str
    timestamp: datetime
    parent_id: Optional[str]


def _aware(value: datetime) -> datetime:
    # naive client datetimes are read as UTC so they compare with seeded ones
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def build_issue(data: IssueCreate, *, id: str, now: datetime) -> Issue:
    return Issue(
        id=id,
        category=data.category,
        description=data.description,
        location=data.location,
        photo_url=blank_to_none(data.photo_url),
        status=ISSUE_STATUS_PENDING,
        created_at=now,
    )


def build_announcement(data: AnnouncementCreate, *, id: str, now: datetime) -> Announcement:
    return Announcement(
        id=id,
        title=data.title,
        category=data.category,
        description=data.description,
        date=now,
    )


def build_event(data: EventCreate, *, id: str) -> Event:
    """Events carry no server-derived field besides the identifier."""
    return Event(
        id=id,
        title=data.title,
        date=_aware(data.date),
        time=data.time,
        location=data.location,
        description=data.description,
    )


def build_discussion(data: DiscussionCreate, *, id: str, now: datetime) -> Discussion:
    return Discussion(
        id=id,
        author=data.author,
        content=data.content,
        timestamp=now,
        parent_id=blank_to_none(data.parent_id),
    )
