"""Tests for diagnostic endpoints."""

from unittest.mock import patch

from bson import ObjectId
from pymongo.errors import PyMongoError


class TestDebugTables:
    """Test collection probing."""

    def test_probe_collections(self, api_client):
        """Test existing collections report a sample and missing ones an error."""
        response = api_client.get("/debug/tables")

        assert response.status_code == 200
        data = response.json()
        tests = {entry["table"]: entry for entry in data["tableTests"]}

        assert list(tests) == ["notes", "Notes", "profiles", "users", "auth.users"]
        assert tests["notes"]["exists"] is True
        assert tests["notes"]["dataCount"] == 1
        assert tests["notes"]["sampleData"]["_id"] == "oid-1"
        assert tests["profiles"]["exists"] is False
        assert tests["profiles"]["sampleData"] is None
        assert tests["profiles"]["error"]
        assert data["database"] == "empnotes_test"
        assert "timestamp" in data

    def test_backend_error_passes_through(self, api_client, make_fake_db):
        """Test a backend failure returns 500 with the error message."""
        failing = make_fake_db(error=PyMongoError("Database connection failed"))

        with patch("api.routes.debug.get_db", return_value=failing):
            response = api_client.get("/debug/tables")

        assert response.status_code == 500
        assert response.json() == {"error": "Database connection failed"}


class TestDebugTestNotes:
    """Test raw note sampling."""

    def test_sample_limited_to_five(self, api_client, sample_row, make_fake_db):
        """Test at most five raw rows are returned with ObjectIds as text."""
        docs = [{**sample_row, "id": i, "_id": ObjectId()} for i in range(8)]

        with patch("api.routes.debug.get_db", return_value=make_fake_db({"notes": docs})):
            response = api_client.get("/debug/test-notes")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["count"] == 5
        assert len(data["notes"]) == 5
        assert data["notes"][0]["_id"] == str(docs[0]["_id"])

    def test_backend_error_passes_through(self, api_client, make_fake_db):
        """Test a backend failure returns 500 with the error message."""
        failing = make_fake_db({"notes": []}, error=PyMongoError("permission denied"))

        with patch("api.routes.debug.get_db", return_value=failing):
            response = api_client.get("/debug/test-notes")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "permission denied"}
