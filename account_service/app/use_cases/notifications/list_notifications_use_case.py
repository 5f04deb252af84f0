from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.current_account import load_current_account
from account_service.domain import errors
from account_service.libs.result import Error, Result, Return
from .dtos import NotificationInfo, NotificationsPage
from .pagination import page_count, page_window

MAX_PAGE_LINKS = 10


class ListNotificationsUseCase:
    """Pages through the signed-in account's notifications, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session: AccountSession, page: int = 0, items_per_page: int = 20
    ) -> Result[NotificationsPage]:
        if page < 0 or items_per_page < 1:
            return Return.err(Error(errors.INVALID_INPUT, "Invalid page"))

        async with self.uow:
            account = await load_current_account(self.uow, session)
            if account is None:
                return Return.err(errors.not_authenticated())

            total = await self.uow.notifications.count_by_account_id(account.id)
            pages = page_count(total, items_per_page)
            page = min(page, pages - 1)
            items = await self.uow.notifications.get_page(
                account.id, offset=page * items_per_page, limit=items_per_page
            )

            return Return.ok(
                NotificationsPage(
                    notifications=[NotificationInfo.from_entity(n) for n in items],
                    total=total,
                    page=page,
                    items_per_page=items_per_page,
                    page_count=pages,
                    last_page=pages - 1,
                    first=page <= 0,
                    last=page >= pages - 1,
                    links=page_window(page, pages, MAX_PAGE_LINKS),
                )
            )
