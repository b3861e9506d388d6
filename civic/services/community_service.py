"""Community use cases (issue reports, announcements, events, discussions)."""

from __future__ import annotations

import logging
from typing import List

from civic.domain.models import Announcement, Discussion, Event, Issue
from civic.domain.threads import DiscussionThread, build_threads
from civic.repositories.memory_repository import MemoryRepository
from civic.schemas import AnnouncementCreate, DiscussionCreate, EventCreate, IssueCreate

logger = logging.getLogger(__name__)


class CommunityError(Exception):
    """Base exception for community workflows."""


class EntityNotFoundError(CommunityError):
    """Raised when an identifier does not resolve in its collection."""

    def __init__(self, kind: str, id: str) -> None:
        super().__init__(f"{kind.capitalize()} {id} not found")
        self.kind = kind
        self.id = id


class CommunityService:
    """Orchestrates the repository for the HTTP layer."""

    def __init__(self, repository: MemoryRepository) -> None:
        self.repository = repository

    def _require(self, kind: str, id: str, entity):
        if entity is None:
            logger.debug("%s %s not found", kind, id)
            raise EntityNotFoundError(kind, id)
        return entity

    # -------------------------- issues --------------------------
    def list_issues(self) -> List[Issue]:
        return self.repository.list_issues()

    def get_issue(self, id: str) -> Issue:
        return self._require("issue", id, self.repository.get_issue(id))

    def report_issue(self, data: IssueCreate) -> Issue:
        return self.repository.create_issue(data)

    # -------------------------- announcements --------------------------
    def list_announcements(self) -> List[Announcement]:
        return self.repository.list_announcements()

    def get_announcement(self, id: str) -> Announcement:
        return self._require("announcement", id, self.repository.get_announcement(id))

    def publish_announcement(self, data: AnnouncementCreate) -> Announcement:
        return self.repository.create_announcement(data)

    # -------------------------- events --------------------------
    def list_events(self) -> List[Event]:
        return self.repository.list_events()

    def get_event(self, id: str) -> Event:
        return self._require("event", id, self.repository.get_event(id))

    def schedule_event(self, data: EventCreate) -> Event:
        return self.repository.create_event(data)

    # -------------------------- discussions --------------------------
    def list_discussions(self) -> List[Discussion]:
        return self.repository.list_discussions()

    def get_discussion(self, id: str) -> Discussion:
        return self._require("discussion", id, self.repository.get_discussion(id))

    def post_discussion(self, data: DiscussionCreate) -> Discussion:
        discussion = self.repository.create_discussion(data)
        if discussion.parent_id and self.repository.get_discussion(discussion.parent_id) is None:
            # accepted as-is; the thread view shows it at the top level
            logger.warning("discussion %s replies to unknown parent %s", discussion.id, discussion.parent_id)
        return discussion

    def discussion_threads(self) -> List[DiscussionThread]:
        return build_threads(self.repository.list_discussions())
