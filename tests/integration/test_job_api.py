"""Integration tests for the jobs HTTP API.

These tests exercise the /api/v1/jobs endpoints through an HTTPX AsyncClient
wired to the FastAPI app, authenticated with a session cookie.
"""

import uuid
from datetime import UTC, datetime, timedelta

import pytest

from tests.conftest import API, future, make_job_payload

pytestmark = pytest.mark.integration

JOBS = f"{API}/jobs"


# ── helpers ──────────────────────────────────────────────────────────────


async def _create_job(client, **overrides):
    """POST a new job and return the created job body."""
    payload = make_job_payload(**overrides)
    resp = await client.post(JOBS, json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()["job"]


# ── create ───────────────────────────────────────────────────────────────


async def test_post_job_201(auth_client):
    """POST /jobs returns 201 with the created job in camelCase."""
    resp = await auth_client.post(JOBS, json=make_job_payload(position="Data Engineer"))

    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "success"
    job = body["job"]
    assert job["position"] == "Data Engineer"
    assert job["jobStatus"] == "pending"
    assert job["jobType"] == "full-time"
    assert job["priority"] == "Medium"
    assert job["priorityLevel"] == 2
    assert job["recruiterEmail"] == "jane.roe@example.com"
    for key in ("id", "ownerId", "createdAt", "updatedAt"):
        assert key in job


async def test_post_job_requires_auth(client):
    resp = await client.post(JOBS, json=make_job_payload())
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Authentication invalid"


async def test_post_job_missing_company_400(auth_client):
    payload = make_job_payload()
    del payload["company"]
    resp = await auth_client.post(JOBS, json=payload)

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please provide position and company!"

    listing = await auth_client.get(JOBS)
    assert listing.json()["totalJobs"] == 0


async def test_post_interview_without_date_400(auth_client):
    resp = await auth_client.post(JOBS, json=make_job_payload(jobStatus="interview"))
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please provide the interview date and time!"


async def test_post_interview_with_date_201(auth_client):
    job = await _create_job(
        auth_client, jobStatus="interview", interviewScheduledAt=future().isoformat()
    )
    assert job["jobStatus"] == "interview"
    assert job["interviewScheduledAt"] is not None


async def test_post_past_interview_400(auth_client):
    past = datetime.now(UTC) - timedelta(hours=1)
    resp = await auth_client.post(
        JOBS, json=make_job_payload(jobStatus="interview", interviewScheduledAt=past.isoformat())
    )
    assert resp.status_code == 400
    assert "interviewScheduledAt" in resp.json()["detail"]


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("recruiterEmail", "not-an-email"),
        ("salaryMin", -5),
        ("position", "x" * 101),
        ("jobType", "contract"),
    ],
)
async def test_post_invalid_field_400(auth_client, field, value):
    resp = await auth_client.post(JOBS, json=make_job_payload(**{field: value}))
    assert resp.status_code == 400
    assert field in resp.json()["detail"]


async def test_post_ignores_client_supplied_owner(auth_client, other_client):
    other = (await other_client.get(f"{API}/auth/getCurrentUser")).json()["user"]
    job = await _create_job(auth_client, ownerId=other["id"])
    me = (await auth_client.get(f"{API}/auth/getCurrentUser")).json()["user"]
    assert job["ownerId"] == me["id"]


# ── list ─────────────────────────────────────────────────────────────────


async def test_list_jobs_pagination(auth_client):
    for i in range(25):
        await _create_job(auth_client, position=f"Role {i}")

    resp = await auth_client.get(JOBS, params={"limit": 10})
    body = resp.json()
    assert resp.status_code == 200
    assert body["status"] == "success"
    assert body["totalJobs"] == 25
    assert body["numOfPages"] == 3
    assert len(body["jobs"]) == 10

    resp = await auth_client.get(JOBS, params={"limit": 10, "page": 3})
    assert len(resp.json()["jobs"]) == 5


async def test_list_jobs_bad_paging_values_use_defaults(auth_client):
    await _create_job(auth_client)
    resp = await auth_client.get(JOBS, params={"page": "abc", "limit": "0"})
    assert resp.status_code == 200
    assert resp.json()["numOfPages"] == 1
    assert len(resp.json()["jobs"]) == 1


async def test_list_jobs_huge_page_is_empty(auth_client):
    await _create_job(auth_client)
    resp = await auth_client.get(JOBS, params={"page": str(10**20), "limit": "1000"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["jobs"] == []
    assert body["totalJobs"] == 1
    assert body["numOfPages"] == 1


async def test_list_jobs_only_own(auth_client, other_client):
    await _create_job(auth_client, position="Mine")
    await _create_job(other_client, position="Theirs")

    body = (await auth_client.get(JOBS)).json()
    assert body["totalJobs"] == 1
    assert body["jobs"][0]["position"] == "Mine"


async def test_list_jobs_filters_and_sort(auth_client):
    await _create_job(auth_client, position="Zeta Engineer", jobType="remote", priority="Low")
    await _create_job(auth_client, position="Alpha Engineer", jobType="remote", priority="High")
    await _create_job(auth_client, position="Designer", jobType="hybrid", jobStatus="declined")

    body = (
        await auth_client.get(
            JOBS, params={"search": "engineer", "jobType": "remote", "jobStatus": "all", "sort": "a-z"}
        )
    ).json()
    assert [j["position"] for j in body["jobs"]] == ["Alpha Engineer", "Zeta Engineer"]

    body = (await auth_client.get(JOBS, params={"sort": "priority-high", "jobType": "remote"})).json()
    assert [j["priority"] for j in body["jobs"]] == ["High", "Low"]

    body = (await auth_client.get(JOBS, params={"jobStatus": "declined"})).json()
    assert [j["position"] for j in body["jobs"]] == ["Designer"]


async def test_created_job_first_among_pending_by_latest(auth_client):
    """Example flow: a newly created pending job leads the pending list sorted by latest."""
    await _create_job(auth_client, position="Older", jobStatus="pending")
    await _create_job(auth_client, position="Declined", jobStatus="declined")
    resp = await auth_client.post(
        JOBS, json={"position": "Engineer", "company": "Acme", "jobStatus": "pending"}
    )
    assert resp.status_code == 201
    created = resp.json()["job"]
    assert created["priorityLevel"] == 2

    body = (await auth_client.get(JOBS, params={"jobStatus": "pending", "sort": "latest"})).json()
    assert body["jobs"][0]["id"] == created["id"]
    assert [j["position"] for j in body["jobs"]] == ["Engineer", "Older"]


# ── update ───────────────────────────────────────────────────────────────


async def test_patch_job_200(auth_client):
    created = await _create_job(auth_client, position="Old Title", recruiter="Jane")

    resp = await auth_client.patch(
        f"{JOBS}/{created['id']}",
        json={"position": "New Title", "company": "Acme", "priority": "High"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "success"
    updated = body["updatedJob"]
    assert updated["position"] == "New Title"
    assert updated["priority"] == "High"
    assert updated["priorityLevel"] == 1
    assert updated["recruiter"] == "Jane"  # unchanged


async def test_patch_job_missing_position_400(auth_client):
    created = await _create_job(auth_client)
    resp = await auth_client.patch(f"{JOBS}/{created['id']}", json={"company": "Acme"})
    assert resp.status_code == 400


async def test_patch_job_404(auth_client):
    resp = await auth_client.patch(f"{JOBS}/{uuid.uuid4()}", json=make_job_payload())
    assert resp.status_code == 404
    assert "no job found" in resp.json()["detail"].lower()


async def test_patch_job_invalid_id_400(auth_client):
    resp = await auth_client.patch(f"{JOBS}/not-a-uuid", json=make_job_payload())
    assert resp.status_code == 400


async def test_patch_job_not_owner_403(auth_client, other_client):
    created = await _create_job(auth_client, position="Original")

    resp = await other_client.patch(
        f"{JOBS}/{created['id']}", json=make_job_payload(position="Hijacked")
    )
    assert resp.status_code == 403

    body = (await auth_client.get(JOBS)).json()
    assert body["jobs"][0]["position"] == "Original"


# ── delete ───────────────────────────────────────────────────────────────


async def test_delete_job_200(auth_client):
    created = await _create_job(auth_client)

    resp = await auth_client.delete(f"{JOBS}/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "message": "The job has been deleted!"}

    body = (await auth_client.get(JOBS)).json()
    assert body["totalJobs"] == 0


async def test_delete_job_404(auth_client):
    resp = await auth_client.delete(f"{JOBS}/{uuid.uuid4()}")
    assert resp.status_code == 404


async def test_delete_job_not_owner_403(auth_client, other_client):
    created = await _create_job(auth_client)

    resp = await other_client.delete(f"{JOBS}/{created['id']}")
    assert resp.status_code == 403
    assert (await auth_client.get(JOBS)).json()["totalJobs"] == 1


# ── stats ────────────────────────────────────────────────────────────────


async def test_stats_200(auth_client):
    await _create_job(auth_client, jobStatus="pending")
    await _create_job(auth_client, jobStatus="pending")
    await _create_job(
        auth_client, jobStatus="interview", interviewScheduledAt=future().isoformat()
    )

    resp = await auth_client.get(f"{JOBS}/stats")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "success"
    assert body["defaultStats"] == {"pending": 2, "interview": 1, "declined": 0}
    assert len(body["monthlyApplications"]) == 1
    assert body["monthlyApplications"][0]["count"] == 3
    assert body["monthlyApplications"][0]["date"] == datetime.now(UTC).strftime("%b %Y")


async def test_stats_requires_auth(client):
    resp = await client.get(f"{JOBS}/stats")
    assert resp.status_code == 401
