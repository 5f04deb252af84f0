from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel
from typing import List
from uuid import UUID

from account_service.api.error import raise_for_error
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.notifications import (
    ListNotificationsUseCase,
    MarkReadCommand,
    MarkReadResponse,
    MarkReadUseCase,
    NotificationsPage,
    UnreadCountResponse,
    UnreadCountUseCase,
)
from account_service.depends import get_account_session, get_unit_of_work

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", status_code=status.HTTP_200_OK, response_model=NotificationsPage)
async def list_notifications(
    page: int = Query(0, ge=0, description="Zero-based page number"),
    items_per_page: int = Query(20, ge=1, le=100),
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    """Notifications of the signed-in account, newest first"""
    result = await ListNotificationsUseCase(uow).execute(session, page, items_per_page)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/unread-count", status_code=status.HTTP_200_OK, response_model=UnreadCountResponse)
async def unread_count(
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    result = await UnreadCountUseCase(uow).execute(session)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class MarkReadRequest(BaseModel):
    ids: List[UUID]


@router.post("/read", status_code=status.HTTP_200_OK, response_model=MarkReadResponse)
async def mark_read(
    request: MarkReadRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    result = await MarkReadUseCase(uow).execute(session, MarkReadCommand(ids=request.ids))
    if result.is_err():
        raise_for_error(result.error)
    return result.value
