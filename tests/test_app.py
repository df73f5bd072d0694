from __future__ import annotations

import json
from datetime import date, datetime

import pytest

from hoop_entry.main import create_app


@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / "local_storage.json"


@pytest.fixture
def app(storage_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(
        {
            "STORAGE_PATH": str(storage_path),
            "CLOCK": lambda: datetime(2026, 3, 1, 18, 30),
        }
    )


@pytest.fixture
def client(app):
    return app.test_client()


def test_submit_entry_and_list(client):
    resp = client.post("/api/entries", json={"age": "20", "gender": "Female", "paymentMethod": "Card", "isStudent": True, "studentCardVerified": True})

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["message"] == "Student ticket processed successfully"
    assert body["ticket"] == {"ticketType": "Student", "ticketPrice": 15}

    listing = client.get("/api/entries").get_json()
    assert listing["count"] == 1
    assert listing["entries"][0]["ticketType"] == "Student"


def test_form_encoded_submission(client):
    resp = client.post("/api/entries", data={"age": "7", "gender": "Male", "payment_method": "Cash"})

    assert resp.status_code == 201
    assert resp.get_json()["ticket"]["ticketType"] == "Child"


def test_validation_error_is_400_and_nothing_is_stored(client):
    resp = client.post("/api/entries", json={"age": "200", "gender": "Male", "paymentMethod": "Cash"})

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Please enter a valid age between 0 and 120"}
    assert client.get("/api/entries").get_json()["count"] == 0


def test_entries_are_persisted_under_single_key(client, storage_path):
    client.post("/api/entries", json={"age": "30", "gender": "Other", "paymentMethod": "Voucher"})

    raw = json.loads(storage_path.read_text(encoding="utf-8"))
    stored = json.loads(raw["hoopentryData"])
    assert stored[0]["paymentMethod"] == "Voucher"
    assert stored[0]["timestamp"] == "2026-03-01T18:30:00"


def test_entries_are_loaded_at_startup(client, storage_path, monkeypatch):
    client.post("/api/entries", json={"age": "30", "gender": "Other", "paymentMethod": "Voucher"})

    monkeypatch.setenv("APP_ENV", "testing")
    reloaded = create_app({"STORAGE_PATH": str(storage_path)}).test_client()

    assert reloaded.get("/api/entries").get_json()["count"] == 1


def test_ticket_preview(client):
    assert client.get("/api/tickets/preview?age=").get_json()["ticket"] is None
    body = client.get("/api/tickets/preview?age=9&isStudent=true&studentCardVerified=true").get_json()
    assert body["ticket"] == {"ticketType": "Child", "ticketPrice": 10}


def test_reset_needs_confirmation(client):
    client.post("/api/entries", json={"age": "30", "gender": "Male", "paymentMethod": "Cash"})

    assert client.post("/api/entries/reset", json={}).status_code == 400
    assert client.get("/api/entries").get_json()["count"] == 1

    resp = client.post("/api/entries/reset", json={"confirm": True})
    assert resp.get_json()["message"] == "All entries have been reset"
    assert client.get("/api/dashboard").get_json()["total_entries"] == 0


def test_dashboard_and_analytics(client):
    client.post("/api/entries", json={"age": "5", "gender": "Female", "paymentMethod": "Cash"})
    client.post("/api/entries", json={"age": "35", "gender": "Male", "paymentMethod": "Card"})

    dashboard = client.get("/api/dashboard").get_json()
    assert dashboard["total_revenue"] == 30
    assert dashboard["hourly"] == [{"hour": "18:00", "count": 2}]

    analytics = client.get("/api/analytics").get_json()
    assert analytics["sponsorship"]["female_percentage"] == 50
    assert analytics["sponsorship"]["total_event_value"] == 30


def test_csv_export_download(client):
    client.post("/api/entries", json={"age": "12", "gender": "Male", "paymentMethod": "Cash", "name": "Kagiso"})

    resp = client.get("/export.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment; filename=hoopentry-export-" in resp.headers["Content-Disposition"]
    lines = resp.get_data(as_text=True).split("\n")
    assert lines[1].endswith(",Kagiso,12,Male,No,No,Adult,20,Cash")


def test_xlsx_export_download(client):
    resp = client.get("/export.xlsx")

    assert resp.status_code == 200
    assert resp.headers["Content-Disposition"].endswith(".xlsx")


def test_non_finite_age_is_400(client):
    resp = client.post(
        "/api/entries",
        data='{"age": 1e400, "gender": "Male", "paymentMethod": "Cash"}',
        content_type="application/json",
    )

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Please enter a valid age"


def test_export_filename_uses_utc_date(client, monkeypatch):
    monkeypatch.setattr("hoop_entry.reports.controller.utc_today", lambda: date(2026, 3, 2))

    resp = client.get("/export.csv")

    assert resp.headers["Content-Disposition"] == "attachment; filename=hoopentry-export-2026-03-02.csv"


def test_dashboard_negative_limit_returns_all_entries(client):
    client.post("/api/entries", json={"age": "30", "gender": "Male", "paymentMethod": "Cash"})
    client.post("/api/entries", json={"age": "31", "gender": "Male", "paymentMethod": "Cash"})

    assert len(client.get("/api/dashboard?limit=-1").get_json()["recent_entries"]) == 2


def test_analytics_revenue_insights(client):
    client.post("/api/entries", json={"age": "5", "gender": "Female", "paymentMethod": "Cash"})
    client.post("/api/entries", json={"age": "6", "gender": "Male", "paymentMethod": "Cash"})
    client.post("/api/entries", json={"age": "35", "gender": "Male", "paymentMethod": "Card"})

    analytics = client.get("/api/analytics").get_json()
    assert analytics["average_ticket_value"] == pytest.approx(40 / 3)
    assert analytics["most_valuable_segment"] == "Adults"
