from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from civic.routers.dependencies import get_community_service, limit_creates, not_found
from civic.schemas import EventCreate, EventOut
from civic.services.community_service import CommunityService, EntityNotFoundError

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=List[EventOut])
def list_events(svc: CommunityService = Depends(get_community_service)):
    return svc.list_events()


@router.post("", response_model=EventOut, status_code=201, dependencies=[Depends(limit_creates)])
def create_event(payload: EventCreate, svc: CommunityService = Depends(get_community_service)):
    return svc.schedule_event(payload)


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: str, svc: CommunityService = Depends(get_community_service)):
    try:
        return svc.get_event(event_id)
    except EntityNotFoundError as exc:
        raise not_found(exc)
