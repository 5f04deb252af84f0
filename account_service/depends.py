from fastapi import BackgroundTasks, Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from account_service.adapter.services.background_mailer import BackgroundMailer
from account_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from account_service.app.services.mailer import Mailer
from account_service.app.services.reference_data import ReferenceData
from account_service.app.services.session import AccountSession

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_remote_address(request: Request) -> str:
    return request.client.host if request.client else ""


def get_account_session(request: Request) -> AccountSession:
    """
    Dependency wrapping the cookie-backed session of the request.

    Writes through to ``request.session``; SessionMiddleware signs and
    sends it back with the response.
    """
    return AccountSession(request.session, remote=get_remote_address(request))


def get_reference_data(request: Request) -> ReferenceData:
    return request.app.state.reference_data


def get_mailer(request: Request, background_tasks: BackgroundTasks) -> Mailer:
    return BackgroundMailer(background_tasks, request.app.state.mail_transport)


def get_token_ttl(request: Request) -> int:
    return int(request.app.state.config.TOKEN_TTL_SECONDS)
