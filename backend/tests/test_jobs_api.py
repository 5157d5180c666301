"""
Tests for the /api/jobs routes.
"""

import pytest
from datetime import datetime, timedelta
from uuid import uuid4

from app.core.exceptions import PersistenceError
from app.repositories.job_repository import JobRepository


def create(client, payload, **overrides):
    body = dict(payload)
    body.update(overrides)
    return client.post("/api/jobs", json=body)


class TestCreateJob:

    def test_create_returns_201_with_stored_record(self, client, job_payload):
        response = create(client, job_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Job created successfully"
        data = body["data"]
        assert data["id"]
        assert data["jobTitle"] == "Backend Engineer"
        assert data["salary"] == 85000
        assert data["jobType"] == "Full-time (On-site)"
        assert data["jobQualifications"] == ["Python", "SQL", "REST APIs"]
        assert data["createdAt"]
        assert data["updatedAt"]

    def test_timestamps_are_utc(self, client, job_payload):
        data = create(client, job_payload).json()["data"]

        for field in ("createdAt", "updatedAt"):
            stamp = datetime.fromisoformat(data[field].replace("Z", "+00:00"))
            assert stamp.utcoffset() == timedelta(0)

    def test_long_text_fields_are_accepted(self, client, job_payload):
        long_text = "x" * 1000
        response = create(client, job_payload, jobTitle=long_text, company=long_text, location=long_text)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["company"] == long_text
        assert data["location"] == long_text

    def test_no_body_reports_every_field_missing(self, client):
        response = client.post("/api/jobs")

        assert response.status_code == 400
        body = response.json()
        assert body["message"].startswith("Missing required fields")
        assert body["missingFields"] == [
            "jobTitle",
            "company",
            "location",
            "salary",
            "jobType",
            "description",
            "jobQualifications",
        ]

    def test_qualifications_list_is_kept(self, client, job_payload):
        response = create(client, job_payload, jobQualifications=["Go", "Kubernetes"])

        assert response.status_code == 201
        assert response.json()["data"]["jobQualifications"] == ["Go", "Kubernetes"]

    @pytest.mark.parametrize(
        "field",
        ["jobTitle", "company", "location", "salary", "jobType", "description", "jobQualifications"],
    )
    def test_missing_field_returns_400_and_persists_nothing(self, client, job_payload, field):
        body = dict(job_payload)
        del body[field]

        response = client.post("/api/jobs", json=body)

        assert response.status_code == 400
        error = response.json()
        assert error["success"] is False
        assert error["message"].startswith("Missing required fields")
        assert error["missingFields"] == [field]
        assert client.get("/api/jobs").json()["count"] == 0

    def test_empty_string_counts_as_missing(self, client, job_payload):
        response = create(client, job_payload, company="")

        assert response.status_code == 400
        assert response.json()["missingFields"] == ["company"]

    def test_invalid_job_type_returns_400(self, client, job_payload):
        response = create(client, job_payload, jobType="Contract")

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid job data"
        assert "jobType" in body["details"]
        assert client.get("/api/jobs").json()["count"] == 0

    def test_non_numeric_salary_returns_400(self, client, job_payload):
        response = create(client, job_payload, salary="a lot")

        assert response.status_code == 400
        assert "salary" in response.json()["details"]

    def test_non_object_body_returns_400(self, client):
        response = client.post("/api/jobs", json=["not", "an", "object"])

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_persistence_failure_returns_500(self, client, job_payload, monkeypatch):
        def broken_create(self, record):
            raise PersistenceError("connection refused")

        monkeypatch.setattr(JobRepository, "create", broken_create)
        response = create(client, job_payload)

        assert response.status_code == 500
        body = response.json()
        assert body == {
            "success": False,
            "message": "Failed to create job",
            "error": "connection refused",
            "details": "connection refused",
        }


class TestListJobs:

    def test_search_filters_by_title_case_insensitively(self, client, job_payload):
        backend = create(client, job_payload, jobTitle="Backend Engineer").json()["data"]
        frontend = create(client, job_payload, jobTitle="Frontend Engineer").json()["data"]

        for term in ("backend", "BACKEND", "BaCkEnD"):
            body = client.get("/api/jobs", params={"search": term}).json()
            assert body["count"] == 1
            assert [job["id"] for job in body["data"]] == [backend["id"]]

        body = client.get("/api/jobs", params={"search": ""}).json()
        assert body["success"] is True
        assert body["count"] == 2
        assert [job["id"] for job in body["data"]] == [frontend["id"], backend["id"]]

    def test_no_search_param_lists_everything(self, client, job_payload):
        create(client, job_payload)

        response = client.get("/api/jobs")

        assert response.status_code == 200
        assert response.json()["count"] == 1

    def test_empty_store(self, client):
        assert client.get("/api/jobs").json() == {"success": True, "count": 0, "data": []}

    def test_persistence_failure_returns_500(self, client, monkeypatch):
        def broken_find_all(self, title_filter=""):
            raise PersistenceError("timeout")

        monkeypatch.setattr(JobRepository, "find_all", broken_find_all)
        response = client.get("/api/jobs")

        assert response.status_code == 500
        assert response.json()["message"] == "Server Error: Unable to fetch jobs"
        assert response.json()["error"] == "timeout"


class TestGetJob:

    def test_malformed_id_returns_400(self, client):
        response = client.get("/api/jobs/abc")

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid job ID format"}

    def test_unknown_id_returns_404(self, client):
        response = client.get(f"/api/jobs/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Job not found"}

    def test_existing_id_returns_record(self, client, job_payload):
        created = create(client, job_payload).json()["data"]

        response = client.get(f"/api/jobs/{created['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == created


class TestDeleteJob:

    def test_malformed_id_returns_400(self, client):
        response = client.delete("/api/jobs/abc")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid job ID format"

    def test_delete_then_get_and_delete_again(self, client, job_payload):
        created = create(client, job_payload).json()["data"]

        response = client.delete(f"/api/jobs/{created['id']}")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Job deleted successfully"
        assert body["data"]["id"] == created["id"]

        assert client.get(f"/api/jobs/{created['id']}").status_code == 404
        assert client.delete(f"/api/jobs/{created['id']}").status_code == 404

    def test_persistence_failure_returns_500(self, client, monkeypatch):
        def broken_delete(self, job_id):
            raise PersistenceError("gone away")

        monkeypatch.setattr(JobRepository, "delete_by_id", broken_delete)
        response = client.delete(f"/api/jobs/{uuid4()}")

        assert response.status_code == 500
        assert response.json()["message"] == "Server Error: Unable to delete job"
