from typing import Optional

from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.entities import Account


async def load_current_account(uow: UnitOfWork, session: AccountSession) -> Optional[Account]:
    """
    Resolve the signed-in account of a session.

    A session pointing at an account that no longer exists is reset and
    treated as anonymous. Must be called inside ``async with uow``.
    """
    account_id = session.account_id
    if account_id is None:
        return None

    account = await uow.accounts.get_by_id(account_id)
    if account is None:
        session.reset()
    return account
