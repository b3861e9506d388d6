"""In-memory store for issues, announcements, events and discussions."""
from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from civic.core.utils import new_id, utcnow
from civic.domain.models import (
    Announcement,
    Discussion,
    Event,
    Issue,
    build_announcement,
    build_discussion,
    build_event,
    build_issue,
)
from civic.schemas import AnnouncementCreate, DiscussionCreate, EventCreate, IssueCreate

from .seed import seed_repository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Collection(Generic[T]):
    """Identifier -> entity mapping guarded by its own lock."""

    def __init__(self, kind: str, sort_key: Callable[[T], datetime], *, newest_first: bool) -> None:
        self.kind = kind
        self._items: Dict[str, T] = {}
        self._sort_key = sort_key
        self._newest_first = newest_first
        self._lock = threading.Lock()

    def add(self, id: str, entity: T) -> T:
        with self._lock:
            self._items[id] = entity
        return entity

    def get(self, id: str) -> Optional[T]:
        with self._lock:
            return self._items.get(id)

    def ordered(self) -> List[T]:
        with self._lock:
            snapshot = list(self._items.values())
        # sorted() is stable, with reverse=True as well, so equal keys keep insertion order
        return sorted(snapshot, key=self._sort_key, reverse=self._newest_first)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class MemoryRepository:
    """List/get/create helpers per entity kind. Data lives for the process lifetime."""

    def __init__(
        self,
        *,
        seed: bool = False,
        clock: Callable[[], datetime] = utcnow,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self.clock = clock
        self.id_factory = id_factory
        self.issues: Collection[Issue] = Collection("issue", lambda i: i.created_at, newest_first=True)
        self.announcements: Collection[Announcement] = Collection("announcement", lambda a: a.date, newest_first=True)
        self.events: Collection[Event] = Collection("event", lambda e: e.date, newest_first=False)
        self.discussions: Collection[Discussion] = Collection("discussion", lambda d: d.timestamp, newest_first=True)
        if seed:
            seed_repository(self)

    def _store(self, collection: Collection[T], entity: T) -> T:
        collection.add(entity.id, entity)  # type: ignore[attr-defined]
        logger.info("created %s %s", collection.kind, entity.id)  # type: ignore[attr-defined]
        return entity

    # -------------------------- issues --------------------------
    def list_issues(self) -> List[Issue]:
        return self.issues.ordered()

    def get_issue(self, id: str) -> Optional[Issue]:
        return self.issues.get(id)

    def create_issue(self, data: IssueCreate) -> Issue:
        return self._store(self.issues, build_issue(data, id=self.id_factory(), now=self.clock()))

    # -------------------------- announcements --------------------------
    def list_announcements(self) -> List[Announcement]:
        return self.announcements.ordered()

    def get_announcement(self, id: str) -> Optional[Announcement]:
        return self.announcements.get(id)

    def create_announcement(self, data: AnnouncementCreate) -> Announcement:
        return self._store(self.announcements, build_announcement(data, id=self.id_factory(), now=self.clock()))

    # -------------------------- events --------------------------
    def list_events(self) -> List[Event]:
        return self.events.ordered()

    def get_event(self, id: str) -> Optional[Event]:
        return self.events.get(id)

    def create_event(self, data: EventCreate) -> Event:
        return self._store(self.events, build_event(data, id=self.id_factory()))

    # -------------------------- discussions --------------------------
    def list_discussions(self) -> List[Discussion]:
        return self.discussions.ordered()

    def get_discussion(self, id: str) -> Optional[Discussion]:
        return self.discussions.get(id)

    def create_discussion(self, data: DiscussionCreate) -> Discussion:
        return self._store(self.discussions, build_discussion(data, id=self.id_factory(), now=self.clock()))
