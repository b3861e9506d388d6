from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from civic.routers.dependencies import get_community_service, limit_creates, not_found
from civic.schemas import IssueCreate, IssueOut
from civic.services.community_service import CommunityService, EntityNotFoundError

router = APIRouter(prefix="/api/issues", tags=["issues"])


@router.get("", response_model=List[IssueOut])
def list_issues(svc: CommunityService = Depends(get_community_service)):
    return svc.list_issues()


@router.post("", response_model=IssueOut, status_code=201, dependencies=[Depends(limit_creates)])
def create_issue(payload: IssueCreate, svc: CommunityService = Depends(get_community_service)):
    return svc.report_issue(payload)


@router.get("/{issue_id}", response_model=IssueOut)
def get_issue(issue_id: str, svc: CommunityService = Depends(get_community_service)):
    try:
        return svc.get_issue(issue_id)
    except EntityNotFoundError as exc:
        raise not_found(exc)
