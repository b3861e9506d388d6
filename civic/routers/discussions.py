from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from civic.routers.dependencies import get_community_service, limit_creates, not_found
from civic.schemas import DiscussionCreate, DiscussionOut, DiscussionThreadOut
from civic.services.community_service import CommunityService, EntityNotFoundError

router = APIRouter(prefix="/api/discussions", tags=["discussions"])


@router.get("", response_model=List[DiscussionOut])
def list_discussions(svc: CommunityService = Depends(get_community_service)):
    return svc.list_discussions()


@router.post("", response_model=DiscussionOut, status_code=201, dependencies=[Depends(limit_creates)])
def create_discussion(payload: DiscussionCreate, svc: CommunityService = Depends(get_community_service)):
    return svc.post_discussion(payload)


# declared before the id route so "threads" is not read as an identifier
@router.get("/threads", response_model=List[DiscussionThreadOut])
def discussion_threads(svc: CommunityService = Depends(get_community_service)):
    return svc.discussion_threads()


@router.get("/{discussion_id}", response_model=DiscussionOut)
def get_discussion(discussion_id: str, svc: CommunityService = Depends(get_community_service)):
    try:
        return svc.get_discussion(discussion_id)
    except EntityNotFoundError as exc:
        raise not_found(exc)
