from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from civic.routers.dependencies import get_community_service, limit_creates, not_found
from civic.schemas import AnnouncementCreate, AnnouncementOut
from civic.services.community_service import CommunityService, EntityNotFoundError

router = APIRouter(prefix="/api/announcements", tags=["announcements"])


@router.get("", response_model=List[AnnouncementOut])
def list_announcements(svc: CommunityService = Depends(get_community_service)):
    return svc.list_announcements()


@router.post("", response_model=AnnouncementOut, status_code=201, dependencies=[Depends(limit_creates)])
def create_announcement(payload: AnnouncementCreate, svc: CommunityService = Depends(get_community_service)):
    # any "date" in the body was dropped by the schema; publication time is server-side
    return svc.publish_announcement(payload)


@router.get("/{announcement_id}", response_model=AnnouncementOut)
def get_announcement(announcement_id: str, svc: CommunityService = Depends(get_community_service)):
    try:
        return svc.get_announcement(announcement_id)
    except EntityNotFoundError as exc:
        raise not_found(exc)
