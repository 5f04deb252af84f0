import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.adapter.services.mail_transport import MailTransport
from account_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from account_service.app.services.reference_data import ReferenceData
from account_service.depends import get_unit_of_work


class OutboxTransport(MailTransport):
    """Keeps delivered messages in memory"""

    def __init__(self):
        self.messages = []

    def deliver(self, message):
        self.messages.append(message)

    def ticket(self, marker):
        """Value following ``marker`` in the newest message"""
        body = self.messages[-1].body
        return body.split(marker, 1)[1].split()[0]


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def outbox():
    return OutboxTransport()


@pytest_asyncio.fixture
async def client(db_session, outbox):
    from account_service.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)
    # ASGITransport does not run the lifespan
    app.state.reference_data = ReferenceData.defaults()
    app.state.mail_transport = outbox

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
