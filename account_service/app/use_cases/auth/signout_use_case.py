from account_service.app.services.event_logger import EventLogger
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.libs.result import Result, Return
from .dtos import SignoutResponse


class SignoutUseCase:
    """Clears the session; logs only when someone was actually signed in"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: AccountSession) -> Result[SignoutResponse]:
        account_id = session.account_id
        if account_id is not None:
            async with self.uow:
                await EventLogger(self.uow).record(account_id, "sign-out success", session.remote)
                await self.uow.commit()

        session.reset()
        return Return.ok(SignoutResponse(status="signed_out"))
