import pytest
from httpx import AsyncClient

from tests.fixtures.accounts import signin, signup


@pytest.mark.asyncio
async def test_get_account(client: AsyncClient):
    await signup(client)

    response = await client.get("/settings/account")

    assert response.status_code == 200
    data = response.json()
    assert data["account"]["name"] == "alice"
    assert [c["uri"] for c in data["contacts"]] == ["mailto:alice@example.com"]
    assert data["permissions"] == []


@pytest.mark.asyncio
async def test_update_account(client: AsyncClient):
    await signup(client)

    response = await client.put(
        "/settings/account", json={"language": "ja", "timezone": "Asia/Tokyo"}
    )

    assert response.status_code == 200
    assert response.json()["language"] == "ja"
    assert response.json()["timezone"] == "Asia/Tokyo"


@pytest.mark.asyncio
async def test_update_account_unknown_timezone(client: AsyncClient):
    await signup(client)

    response = await client.put(
        "/settings/account", json={"language": "ja", "timezone": "Pacific/Atlantis"}
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_password(client: AsyncClient):
    await signup(client)

    wrong = await client.post("/settings/password", json={
        "current_password": "guess",
        "new_password1": "next-one",
        "new_password2": "next-one",
    })
    assert wrong.status_code == 400
    assert wrong.json()["error"]["message"] == "invalid password"

    mismatch = await client.post("/settings/password", json={
        "current_password": "s3cret!",
        "new_password1": "next-one",
        "new_password2": "next-two",
    })
    assert mismatch.status_code == 400
    assert mismatch.json()["error"]["message"] == "new passwords are not same"

    ok = await client.post("/settings/password", json={
        "current_password": "s3cret!",
        "new_password1": "next-one",
        "new_password2": "next-one",
    })
    assert ok.status_code == 200

    await client.post("/auth/signout")
    assert (await signin(client, "alice", "next-one")).status_code == 200


@pytest.mark.asyncio
async def test_settings_require_signin(client: AsyncClient):
    assert (await client.get("/settings/account")).status_code == 401
    response = await client.put("/settings/account", json={"language": "en", "timezone": "UTC"})
    assert response.status_code == 401
