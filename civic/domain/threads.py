"""Domain helpers for grouping discussions into one-level threads."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from .models import Discussion


@dataclass
class DiscussionThread:
    discussion: Discussion
    replies: List[Discussion] = field(default_factory=list)


def build_threads(discussions: Iterable[Discussion]) -> List[DiscussionThread]:
    """
    Group an ordered sequence of discussions into top-level posts and their
    direct replies. Input order is kept for both levels.

    A post whose parent is unknown is shown at the top level. Replies to
    replies are not nested and do not appear in the result.
    """
    items = list(discussions)
    known = {d.id for d in items}
    threads: List[DiscussionThread] = []
    by_id: dict[str, DiscussionThread] = {}
    for item in items:
        # orphans are promoted here; the discussions page filters them out instead
        if item.parent_id is None or item.parent_id not in known:
            thread = DiscussionThread(discussion=item)
            threads.append(thread)
            by_id[item.id] = thread
    for item in items:
        if item.id in by_id:
            continue
        parent = by_id.get(item.parent_id or "")
        if parent is not None:
            parent.replies.append(item)
    return threads
