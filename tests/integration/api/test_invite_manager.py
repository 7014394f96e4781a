from uuid import uuid4

import pytest
from sqlmodel import select

from gymhub.domain.entities import Invitation


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_invite_manager(client, owner):
    subaccount_id = owner["gym"]["subaccount"]["id"]

    response = await client.post(
        "/invitations",
        json={"email": "a@x.com", "subaccount_id": subaccount_id, "message": "Join us"},
        headers=bearer(owner["access_token"]),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "a@x.com"
    assert body["role"] == "MANAGER"
    assert body["subaccount"]["name"] == "Downtown"
    assert body["message"] == "Join us"
    assert len(body["token"]) == 26
    assert body["invite_link"].endswith(f"/select-gym?token={body['token']}")


@pytest.mark.asyncio
async def test_second_pending_invitation_is_rejected(client, db_session, owner):
    payload = {"email": "a@x.com", "subaccount_id": owner["gym"]["subaccount"]["id"]}
    first = await client.post("/invitations", json=payload, headers=bearer(owner["access_token"]))
    assert first.status_code == 201

    second = await client.post(
        "/invitations", json=payload, headers=bearer(owner["access_token"])
    )

    assert second.status_code == 409
    assert second.json()["error"] == {
        "code": "INVITATION_ALREADY_PENDING",
        "message": "An invitation is already pending for this email and franchise",
    }
    rows = (await db_session.exec(select(Invitation))).all()
    assert len(rows) == 1


@pytest.mark.asyncio
async def test_invite_options(client, owner):
    response = await client.get("/invitations/options", headers=bearer(owner["access_token"]))

    assert response.status_code == 200
    body = response.json()
    assert [s["name"] for s in body["subaccounts"]] == ["Downtown"]
    assert body["roles"] == ["MANAGER", "TRAINER"]


@pytest.mark.asyncio
async def test_invite_errors(client, owner):
    headers = bearer(owner["access_token"])
    subaccount_id = owner["gym"]["subaccount"]["id"]

    response = await client.post(
        "/invitations",
        json={"email": "a@x.com", "subaccount_id": str(uuid4())},
        headers=headers,
    )
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SUBACCOUNT_NOT_FOUND"

    response = await client.post(
        "/invitations",
        json={"email": "a@x.com", "subaccount_id": subaccount_id, "role": "OWNER"},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ROLE"


@pytest.mark.asyncio
async def test_non_owner_cannot_invite(client, owner):
    signup = await client.post(
        "/auth/signup",
        json={"email": "other@x.com", "password": "password123", "name": "Other"},
    )

    response = await client.post(
        "/invitations",
        json={"email": "a@x.com", "subaccount_id": owner["gym"]["subaccount"]["id"]},
        headers=bearer(signup.json()["access_token"]),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "NOT_AN_OWNER"
