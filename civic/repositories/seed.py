"""
Fixed demo dataset loaded when a repository is constructed with ``seed=True``.

Dates are relative to construction time so the demo always shows recent
announcements and upcoming events.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from civic.domain.models import Announcement, Discussion, Event

if TYPE_CHECKING:
    from .memory_repository import MemoryRepository

logger = logging.getLogger(__name__)

ANNOUNCEMENTS = [
    (
        "Road Maintenance Schedule",
        "Infrastructure",
        "Scheduled maintenance on Main Street between 5th and 8th Avenue will begin next Monday. "
        "Please expect delays and use alternative routes during peak hours.",
        timedelta(days=-2),
    ),
    (
        "Community Clean-up Drive",
        "Environment",
        "Join us this Saturday for our monthly community clean-up initiative. Meet at Central Park at 9 AM. "
        "Gloves and bags will be provided.",
        timedelta(days=-3),
    ),
    (
        "New Recycling Guidelines",
        "Environment",
        "Updated recycling guidelines are now in effect. Please review the new sorting procedures to help us "
        "reduce contamination and improve recycling rates.",
        timedelta(days=-5),
    ),
    (
        "Town Hall Meeting Announcement",
        "Community",
        "Mayor will host a town hall meeting next Thursday at 7 PM at the Community Center. "
        "Topics include budget planning and upcoming projects.",
        timedelta(days=-7),
    ),
]

EVENTS = [
    (
        "Farmers Market",
        timedelta(days=3),
        "8:00 AM - 2:00 PM",
        "City Square",
        "Weekly farmers market featuring fresh local produce, artisan goods, and live music. "
        "Support local farmers and enjoy the community atmosphere.",
    ),
    (
        "Youth Sports Registration",
        timedelta(days=7),
        "10:00 AM - 4:00 PM",
        "Recreation Center",
        "Register your children for spring sports programs including soccer, basketball, and baseball. "
        "Ages 5-14 welcome.",
    ),
    (
        "Public Safety Workshop",
        timedelta(days=10),
        "6:30 PM - 8:30 PM",
        "Fire Station #2",
        "Learn essential safety skills including fire safety, first aid basics, and emergency preparedness. "
        "Free to all residents.",
    ),
]


def seed_repository(repo: "MemoryRepository") -> None:
    now = repo.clock()

    for title, category, description, offset in ANNOUNCEMENTS:
        entity = Announcement(
            id=repo.id_factory(),
            title=title,
            category=category,
            description=description,
            date=now + offset,
        )
        repo.announcements.add(entity.id, entity)

    for title, offset, time, location, description in EVENTS:
        entity = Event(
            id=repo.id_factory(),
            title=title,
            date=now + offset,
            time=time,
            location=location,
            description=description,
        )
        repo.events.add(entity.id, entity)

    # two top-level posts, the first with one reply
    opener = Discussion(
        id=repo.id_factory(),
        author="Sarah Johnson",
        content="Has anyone noticed the new bike lanes on Oak Street? "
        "They're a great addition to our community infrastructure!",
        timestamp=now - timedelta(hours=4),
        parent_id=None,
    )
    reply = Discussion(
        id=repo.id_factory(),
        author="Mike Chen",
        content="Absolutely! I've been using them for my morning commute. Much safer than before.",
        timestamp=now - timedelta(hours=3),
        parent_id=opener.id,
    )
    garden = Discussion(
        id=repo.id_factory(),
        author="Emily Rodriguez",
        content="What are everyone's thoughts on the proposed community garden project?",
        timestamp=now - timedelta(hours=2),
        parent_id=None,
    )
    for entity in (opener, reply, garden):
        repo.discussions.add(entity.id, entity)

    logger.info(
        "seeded %d announcements, %d events, %d discussions",
        len(repo.announcements),
        len(repo.events),
        len(repo.discussions),
    )
