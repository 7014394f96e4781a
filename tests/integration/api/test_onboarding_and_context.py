from uuid import UUID, uuid4

import pytest
from sqlmodel import select

from gymhub.api.utils.jwt import verify_jwt
from gymhub.domain.entities import Account, Subaccount, UserAccount


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_onboarding_completes_placeholder_gym(client, db_session, owner):
    assert owner["redirect_to"] == "/dashboard"
    assert owner["gym"]["account"]["name"] == "Iron Temple"
    assert owner["gym"]["subaccount"]["name"] == "Downtown"
    assert owner["gym"]["subaccount"]["location"] == "1 Main St"
    assert owner["gym"]["onboarding_completed"] is True

    accounts = (await db_session.exec(select(Account))).all()
    assert len(accounts) == 1
    assert accounts[0].onboarding_completed is True

    claims = verify_jwt(owner["access_token"])
    assert claims["subaccount_id"] == owner["gym"]["subaccount"]["id"]
    assert claims["role"] == "OWNER"


@pytest.mark.asyncio
async def test_onboarding_default_franchise_name(client, db_session):
    signup = await client.post(
        "/auth/signup",
        json={"email": "fit@x.com", "password": "password123", "name": "Fit"},
    )

    response = await client.post(
        "/onboarding/complete",
        json={"gym": {"name": "FitZone", "address": "9 Elm St"}, "owner": {"name": "Fit"}},
        headers=bearer(signup.json()["access_token"]),
    )

    assert response.status_code == 200
    assert response.json()["gym"]["subaccount"]["name"] == "FitZone Main"
    subaccounts = (await db_session.exec(select(Subaccount))).all()
    assert [s.location for s in subaccounts] == ["9 Elm St"]


@pytest.mark.asyncio
async def test_me_lists_gyms(client, owner):
    response = await client.get("/me", headers=bearer(owner["access_token"]))

    assert response.status_code == 200
    body = response.json()
    assert body["identity"]["email"] == "owner@x.com"
    assert body["profile"]["role"] == "OWNER"
    assert [g["account"]["name"] for g in body["gyms"]] == ["Iron Temple"]
    assert body["current"]["subaccount"]["name"] == "Downtown"


@pytest.mark.asyncio
async def test_switch_between_own_and_joined_gym(client, db_session, owner):
    # Second owner invites the first one as a trainer
    other = await client.post(
        "/auth/signup",
        json={"email": "rival@x.com", "password": "password123", "name": "Rival"},
    )
    other_onboarded = await client.post(
        "/onboarding/complete",
        json={
            "gym": {"name": "Rival Gym"},
            "franchise": {"name": "Harbor"},
            "owner": {"name": "Rival"},
        },
        headers=bearer(other.json()["access_token"]),
    )
    rival = other_onboarded.json()
    invite = await client.post(
        "/invitations",
        json={
            "email": "owner@x.com",
            "subaccount_id": rival["gym"]["subaccount"]["id"],
            "role": "TRAINER",
        },
        headers=bearer(rival["access_token"]),
    )
    accepted = await client.post(
        f"/select-gym/invitations/{invite.json()['id']}/accept",
        headers=bearer(owner["access_token"]),
    )
    assert accepted.status_code == 200

    token = accepted.json()["access_token"]
    response = await client.post(
        "/context/switch",
        json={
            "account_id": owner["gym"]["account"]["id"],
            "subaccount_id": owner["gym"]["subaccount"]["id"],
        },
        headers=bearer(token),
    )

    assert response.status_code == 200
    claims = verify_jwt(response.json()["access_token"])
    assert claims["account_id"] == owner["gym"]["account"]["id"]
    assert claims["role"] == "OWNER"

    links = (
        await db_session.exec(
            select(UserAccount).where(
                UserAccount.account_id == UUID(rival["gym"]["account"]["id"])
            )
        )
    ).all()
    assert len(links) == 2


@pytest.mark.asyncio
async def test_switch_to_foreign_gym_is_forbidden(client, owner):
    response = await client.post(
        "/context/switch",
        json={"account_id": str(uuid4())},
        headers=bearer(owner["access_token"]),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "NOT_A_MEMBER"
