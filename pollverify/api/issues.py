from typing import List
from fastapi import APIRouter, Depends, status
from pollverify.api.deps import get_store, get_manager
from pollverify.core.store import CheckInStore
from pollverify.schemas.issue import IssueCreate, IssueResponse, IssueResolve
from pollverify.websocket.events import create_issue_event
from pollverify.websocket.manager import ConnectionManager

router = APIRouter()


@router.get("/issues", response_model=List[IssueResponse])
async def list_issues(store: CheckInStore = Depends(get_store)):
    return store.list_issues()


@router.post("/issues", response_model=IssueResponse, status_code=status.HTTP_201_CREATED)
async def report_issue(
    issue_data: IssueCreate,
    store: CheckInStore = Depends(get_store),
    manager: ConnectionManager = Depends(get_manager)
):
    """Report a problem at the polling place"""
    issue = store.create_issue(issue_data)
    await manager.publish(create_issue_event(issue))
    return issue


@router.put("/issues/{issue_id}/resolve", response_model=IssueResponse)
async def resolve_issue(
    issue_id: int,
    resolve: IssueResolve,
    store: CheckInStore = Depends(get_store),
    manager: ConnectionManager = Depends(get_manager)
):
    """Resolve an issue; resolution time is recorded in whole minutes"""
    issue = store.resolve_issue(issue_id, resolve.user_id)
    await manager.publish(create_issue_event(issue))
    return issue
