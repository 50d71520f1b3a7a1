"""Integration tests for authentication and role-based authorization.

These tests verify that every role-gated endpoint refuses a public-role
caller, that anonymous callers are limited to public reads, and that tokens
follow the user's current role.
"""

import pytest
from fastapi import status

from auth.jwt import create_access_token

API = "/api/v1"

REGION_COLORS = {
    "North": "#111111",
    "West": "#222222",
    "East": "#333333",
    "Central": "#444444",
    "South": "#555555",
}

COUNTRY = {
    "id": "zz",
    "name": "Testland",
    "capital": "Test City",
    "population": 1000,
    "area": 10,
    "region": "North",
}


@pytest.mark.asyncio
async def test_public_role_is_refused_every_role_gated_operation(
    client, public_user, auth_headers, create_project
):
    """Test: review, approve, country write and settings write are all 403."""
    project = await create_project(public_user)
    headers = auth_headers(public_user)

    calls = [
        client.post(f"{API}/projects/{project.id}/review", headers=headers),
        client.post(f"{API}/projects/{project.id}/approve", json={"approved": True}, headers=headers),
        client.patch(f"{API}/projects/{project.id}", json={"project_title": "x"}, headers=headers),
        client.delete(f"{API}/projects/{project.id}", headers=headers),
        client.post(f"{API}/countries", json=COUNTRY, headers=headers),
        client.put(f"{API}/region-colors", json=REGION_COLORS, headers=headers),
        client.patch(f"{API}/settings", json={"logo_url": "x"}, headers=headers),
        client.get(f"{API}/users", headers=headers),
    ]
    for call in calls:
        response = await call
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "Not permitted"


@pytest.mark.asyncio
async def test_anonymous_callers_read_public_data_only(client, project_payload):
    for path in (
        "/projects/public",
        "/statistics/countries",
        "/statistics/overview",
        "/statistics/recs",
        "/countries",
        "/region-colors",
        "/settings",
        "/reference",
        "/health",
    ):
        response = await client.get(f"{API}{path}")
        assert response.status_code == status.HTTP_200_OK, path

    response = await client.post(f"{API}/projects", json=project_payload())
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    response = await client.get(f"{API}/notifications")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
async def test_invalid_token_is_rejected_even_on_public_reads(client):
    headers = {"Authorization": "Bearer not-a-jwt"}

    response = await client.get(f"{API}/statistics/countries", headers=headers)

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
async def test_role_change_invalidates_old_tokens(client, admin_user, public_user, auth_headers):
    """Test: After promotion the old public-role token no longer works."""
    old_headers = auth_headers(public_user)

    response = await client.patch(
        f"{API}/users/{public_user.id}/role",
        json={"role": "focal_person"},
        headers=auth_headers(admin_user),
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["role"] == "focal_person"

    response = await client.get(f"{API}/users/me", headers=old_headers)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED

    new_token = create_access_token(user_id=public_user.id, role="focal_person")
    response = await client.get(f"{API}/users/me", headers={"Authorization": f"Bearer {new_token}"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["role"] == "focal_person"


@pytest.mark.asyncio
async def test_inactive_user_is_forbidden(client, create_user, auth_headers):
    user = await create_user(email="gone@example.org", is_active=False)

    response = await client.get(f"{API}/users/me", headers=auth_headers(user))

    assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.asyncio
async def test_dev_login_creates_user_and_returns_working_token(client):
    response = await client.post(
        f"{API}/auth/dev-login",
        json={"email": "New.Person@Example.org", "role": "approver"},
    )

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["role"] == "approver"
    assert body["token_type"] == "bearer"
    assert body["next_url"] == "/approver"

    response = await client.get(
        f"{API}/users/me",
        headers={"Authorization": f"Bearer {body['access_token']}"},
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["email"] == "new.person@example.org"
    assert response.json()["name"] == "New Person"


@pytest.mark.asyncio
async def test_dev_login_existing_user_keeps_role_unless_given(client, focal_user):
    response = await client.post(f"{API}/auth/dev-login", json={"email": focal_user.email})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["role"] == "focal_person"
    assert response.json()["user_id"] == str(focal_user.id)


@pytest.mark.asyncio
async def test_dev_login_is_disabled_in_production(client, monkeypatch):
    import config

    monkeypatch.setattr(config.settings, "APP_ENV", "production")

    response = await client.post(f"{API}/auth/dev-login", json={"email": "someone@example.org"})

    assert response.status_code == status.HTTP_403_FORBIDDEN
