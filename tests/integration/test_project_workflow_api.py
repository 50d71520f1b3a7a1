"""Integration tests for the project workflow through the HTTP API.

These tests drive submission, review and decision end to end and check the
map statistics that result.
"""

import pytest
from fastapi import status

API = "/api/v1"


async def _submit(client, headers, payload) -> dict:
    response = await client.post(f"{API}/projects", json=payload, headers=headers)
    assert response.status_code == status.HTTP_201_CREATED, response.text
    return response.json()


@pytest.mark.asyncio
async def test_kenya_project_appears_publicly_only_after_approval(
    client, public_user, focal_user, approver_user, auth_headers, project_payload
):
    """Test: A Kenyan project is invisible to the public map until approved."""
    project = await _submit(
        client,
        auth_headers(public_user),
        project_payload(country="Kenya", pifah_pillar="Health Infrastructure"),
    )
    assert project["status"] == "pending"
    assert project["submitted_by"] == str(public_user.id)

    response = await client.get(f"{API}/statistics/countries/Kenya")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["total_projects"] == 0

    response = await client.post(
        f"{API}/projects/{project['id']}/review", headers=auth_headers(focal_user)
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "under_review"
    assert response.json()["reviewed_by"] == str(focal_user.id)

    response = await client.post(
        f"{API}/projects/{project['id']}/approve",
        json={"approved": True},
        headers=auth_headers(approver_user),
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "approved"

    response = await client.get(f"{API}/statistics/countries/Kenya")
    kenya = response.json()
    assert kenya["total_projects"] == 1
    assert kenya["pillar_counts"] == {"Health Infrastructure": 1}
    assert kenya["status_counts"] is None

    response = await client.get(f"{API}/projects/public")
    assert [p["id"] for p in response.json()] == [project["id"]]


@pytest.mark.asyncio
async def test_nigeria_privileged_and_public_views_differ(
    client, public_user, focal_user, approver_user, auth_headers, project_payload
):
    """Test: One approved and one rejected project in Nigeria."""
    submitter = auth_headers(public_user)
    first = await _submit(
        client, submitter, project_payload(country="Nigeria", region="West Africa", pifah_pillar="Local Manufacturing")
    )
    second = await _submit(
        client, submitter, project_payload(country="Nigeria", region="West Africa", pifah_pillar="Digital Health & AI")
    )

    for project, approved in ((first, True), (second, False)):
        response = await client.post(f"{API}/projects/{project['id']}/review", headers=auth_headers(focal_user))
        assert response.status_code == status.HTTP_200_OK
        response = await client.post(
            f"{API}/projects/{project['id']}/approve",
            json={"approved": approved},
            headers=auth_headers(approver_user),
        )
        assert response.status_code == status.HTTP_200_OK

    response = await client.get(f"{API}/statistics/countries/Nigeria", headers=auth_headers(focal_user))
    privileged = response.json()
    assert privileged["total_projects"] == 2
    assert privileged["status_counts"] == {"approved": 1, "rejected": 1}
    assert privileged["display_status"] == "rejected"

    response = await client.get(f"{API}/statistics/countries/Nigeria")
    public = response.json()
    assert public["total_projects"] == 1
    assert public["pillar_counts"] == {"Local Manufacturing": 1}

    # A public-role caller gets the public variant too
    response = await client.get(f"{API}/statistics/countries", headers=auth_headers(public_user))
    [nigeria] = response.json()
    assert nigeria["total_projects"] == 1
    assert nigeria["status_counts"] is None


@pytest.mark.asyncio
async def test_overview_statistics(client, public_user, create_project):
    """Test: 3 pending, 2 under_review, 4 approved, 1 rejected."""
    from models.project import ProjectStatus

    counts = {
        ProjectStatus.PENDING: 3,
        ProjectStatus.UNDER_REVIEW: 2,
        ProjectStatus.APPROVED: 4,
        ProjectStatus.REJECTED: 1,
    }
    countries = ["Kenya", "Ghana", "Egypt"]
    index = 0
    for project_status, count in counts.items():
        for _ in range(count):
            await create_project(public_user, country=countries[index % 3], status=project_status)
            index += 1

    response = await client.get(f"{API}/statistics/overview")

    assert response.status_code == status.HTTP_200_OK
    overview = response.json()
    assert overview["total_projects"] == 10
    assert overview["approved_projects"] == 4
    assert overview["pending_projects"] == 3
    assert overview["under_review_projects"] == 2
    assert overview["rejected_projects"] == 1
    assert overview["pillar_breakdown"]["Health Infrastructure"] == {"approved": 4, "not_approved": 6}


@pytest.mark.asyncio
async def test_rec_statistics_endpoint(client, public_user, create_project):
    from models.project import ProjectStatus

    await create_project(public_user, country="Kenya", status=ProjectStatus.APPROVED)

    response = await client.get(f"{API}/statistics/recs")

    assert response.status_code == status.HTTP_200_OK
    recs = {entry["rec"]: entry for entry in response.json()}
    assert recs["EAC"]["project_count"] == 1
    assert recs["EAC"]["member_count"] == 7
    assert recs["SADC"]["project_count"] == 0


@pytest.mark.asyncio
async def test_decision_before_review_is_a_conflict(
    client, public_user, approver_user, auth_headers, project_payload
):
    """Test: Approving a pending project returns 409 and changes nothing."""
    project = await _submit(client, auth_headers(public_user), project_payload())

    response = await client.post(
        f"{API}/projects/{project['id']}/approve",
        json={"approved": True},
        headers=auth_headers(approver_user),
    )

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["current_status"] == "pending"
    response = await client.get(f"{API}/projects/{project['id']}", headers=auth_headers(approver_user))
    assert response.json()["status"] == "pending"


@pytest.mark.asyncio
async def test_invalid_submission_is_422(client, public_user, auth_headers, project_payload):
    response = await client.post(
        f"{API}/projects",
        json=project_payload(contact_person="  "),
        headers=auth_headers(public_user),
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["field"] == "contact_person"

    response = await client.post(
        f"{API}/projects",
        json=project_payload(pifah_pillar="Space Tourism"),
        headers=auth_headers(public_user),
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


@pytest.mark.asyncio
async def test_project_listing_visibility(
    client, public_user, other_public_user, focal_user, auth_headers, create_project
):
    mine = await create_project(public_user)
    theirs = await create_project(other_public_user)

    response = await client.get(f"{API}/projects", headers=auth_headers(public_user))
    assert [p["id"] for p in response.json()] == [str(mine.id)]

    response = await client.get(f"{API}/projects/my-projects", headers=auth_headers(public_user))
    assert [p["id"] for p in response.json()] == [str(mine.id)]

    response = await client.get(f"{API}/projects/{theirs.id}", headers=auth_headers(public_user))
    assert response.status_code == status.HTTP_404_NOT_FOUND

    response = await client.get(
        f"{API}/projects", params={"status": "pending"}, headers=auth_headers(focal_user)
    )
    assert {p["id"] for p in response.json()} == {str(mine.id), str(theirs.id)}


@pytest.mark.asyncio
async def test_admin_edit_and_delete(client, public_user, admin_user, auth_headers, create_project):
    project = await create_project(public_user)

    response = await client.patch(
        f"{API}/projects/{project.id}",
        json={"status": "approved", "project_title": "Edited"},
        headers=auth_headers(admin_user),
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "approved"
    assert response.json()["project_title"] == "Edited"

    response = await client.delete(f"{API}/projects/{project.id}", headers=auth_headers(admin_user))
    assert response.status_code == status.HTTP_204_NO_CONTENT

    response = await client.get(f"{API}/projects/{project.id}", headers=auth_headers(admin_user))
    assert response.status_code == status.HTTP_404_NOT_FOUND
