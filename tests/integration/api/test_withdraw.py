from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select

from account_service.domain.entities import Account, Contact, EventLog, Notification, Token
from tests.fixtures.accounts import signin, signup


@pytest.mark.asyncio
async def test_withdraw_removes_account_data(client: AsyncClient, db_session):
    data = await signup(client)
    account_id = UUID(data["account"]["id"])
    await client.post("/settings/contacts", json={"schema_name": "tel", "address": "+1 555-0100"})
    await client.post(f"/settings/contacts/{data['contact']['id']}/confirm")

    response = await client.post("/auth/withdraw", json={"confirmed": True})

    assert response.status_code == 200
    assert response.json() == {"status": "withdrawn"}
    for entity in (Contact, Token, Notification):
        rows = (await db_session.exec(select(entity).where(entity.account_id == account_id))).all()
        assert rows == []
    assert (await db_session.exec(select(Account).where(Account.id == account_id))).first() is None

    # The event log keeps the record
    events = (await db_session.exec(
        select(EventLog).where(EventLog.message == "withdraw success")
    )).all()
    assert [e.account_id for e in events] == [account_id]

    assert (await client.get("/settings/account")).status_code == 401
    assert (await signin(client, "alice")).status_code == 401


@pytest.mark.asyncio
async def test_withdraw_needs_confirmation(client: AsyncClient):
    await signup(client)

    response = await client.post("/auth/withdraw", json={})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Please check if you really want to withdraw."
    assert (await client.get("/settings/account")).status_code == 200


@pytest.mark.asyncio
async def test_withdraw_requires_signin(client: AsyncClient):
    response = await client.post("/auth/withdraw", json={"confirmed": True})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_name_and_address_reusable_after_withdraw(client: AsyncClient):
    await signup(client)
    await client.post("/auth/withdraw", json={"confirmed": True})

    await signup(client)
