"""
Photoperiod API Tests
=====================
End-to-end tests of the photoperiod blueprint through the Flask test client.
The app clock is pinned to 2024-01-01 10:00; default settings start at
midnight that day with a 13/14 cycle over 60 days.
"""

from __future__ import annotations

import io
import json

import pytest

from supercycle import create_app
from supercycle.domain.exceptions import ConfigurationError

BASE = "/api/v1/photoperiod"

VALID_SETTINGS = {
    "startDate": "2024-01-01T00:00",
    "lightHours": 12,
    "darkHours": 12,
    "durationDays": 2,
}


def _data(response):
    body = response.get_json()
    assert body["ok"] is True, body
    return body["data"]


class TestConfigEndpoints:
    def test_get_default_config(self, client):
        data = _data(client.get(f"{BASE}/config"))
        assert data["settings"] == {
            "startDate": "2024-01-01T00:00",
            "lightHours": 13.0,
            "darkHours": 14.0,
            "durationDays": 60,
        }
        assert data["validation"]["ok"] is True

    def test_replace_config(self, client):
        data = _data(client.put(f"{BASE}/config", json=VALID_SETTINGS))
        assert data["validation"]["ok"] is True
        assert _data(client.get(f"{BASE}/config"))["settings"]["durationDays"] == 2

    def test_replace_with_out_of_range_values_reports_validation(self, client):
        body = dict(VALID_SETTINGS, lightHours=-1)
        data = _data(client.put(f"{BASE}/config", json=body))
        assert data["validation"]["kind"] == "NegativeLight"

        # Evaluation keeps working with fallbacks
        status = _data(client.get(f"{BASE}/status"))
        assert status["validation"]["kind"] == "NegativeLight"
        assert status["phase"]["is_light"] is False

    def test_replace_with_missing_field_is_rejected(self, client):
        body = {k: v for k, v in VALID_SETTINGS.items() if k != "darkHours"}
        response = client.put(f"{BASE}/config", json=body)
        assert response.status_code == 400
        payload = response.get_json()
        assert payload["ok"] is False
        assert payload["details"]["errors"][0]["loc"] == ["darkHours"]

    def test_non_finite_hours_are_rejected(self, client):
        body = json.dumps(VALID_SETTINGS).replace('"lightHours": 12', '"lightHours": NaN')
        response = client.put(f"{BASE}/config", data=body, content_type="application/json")
        assert response.status_code == 400
        assert response.get_json()["details"]["errors"][0]["loc"] == ["lightHours"]

        exported = client.get(f"{BASE}/config/export").data.decode("utf-8")
        assert "NaN" not in exported

    def test_validate_does_not_store(self, client):
        data = _data(client.post(f"{BASE}/config/validate", json={"startDate": ""}))
        assert data["validation"] == {
            "ok": False,
            "kind": "MissingStart",
            "message": "Start date is required.",
        }
        assert _data(client.get(f"{BASE}/config"))["settings"]["startDate"] == "2024-01-01T00:00"

    def test_reset(self, client):
        client.put(f"{BASE}/config", json=VALID_SETTINGS)
        data = _data(client.post(f"{BASE}/config/reset"))
        assert data["settings"]["lightHours"] == 13.0
        assert data["settings"]["startDate"] == "2024-01-01T00:00"


class TestImportExport:
    def test_export_download(self, client):
        client.put(f"{BASE}/config", json=VALID_SETTINGS)
        response = client.get(f"{BASE}/config/export")
        assert response.status_code == 200
        assert response.mimetype == "application/json"
        assert "supercycle-config.json" in response.headers["Content-Disposition"]
        assert json.loads(response.data) == VALID_SETTINGS

    def test_import_raw_json_body(self, client):
        response = client.post(
            f"{BASE}/config/import",
            data=json.dumps({"lightHours": 18, "unknown": True}),
            content_type="application/json",
        )
        data = _data(response)
        assert data["applied"] == ["lightHours"]
        assert data["settings"]["lightHours"] == 18.0

    def test_import_file_upload(self, client):
        upload = io.BytesIO(json.dumps(VALID_SETTINGS).encode("utf-8"))
        response = client.post(
            f"{BASE}/config/import",
            data={"file": (upload, "supercycle-config.json")},
            content_type="multipart/form-data",
        )
        data = _data(response)
        assert data["settings"] == {
            "startDate": "2024-01-01T00:00",
            "lightHours": 12.0,
            "darkHours": 12.0,
            "durationDays": 2,
        }

    def test_malformed_import_is_rejected_without_changes(self, client):
        before = _data(client.get(f"{BASE}/config"))["settings"]
        response = client.post(f"{BASE}/config/import", data="{not json", content_type="application/json")
        assert response.status_code == 400
        payload = response.get_json()
        assert payload["ok"] is False
        assert payload["details"]["kind"] == "MalformedImportPayload"
        assert _data(client.get(f"{BASE}/config"))["settings"] == before

    def test_export_then_import_round_trips(self, client):
        client.put(f"{BASE}/config", json=dict(VALID_SETTINGS, lightHours=11.5, startDate="2024-03-01T07:15"))
        exported = client.get(f"{BASE}/config/export").data
        client.post(f"{BASE}/config/reset")
        client.post(f"{BASE}/config/import", data=exported, content_type="application/json")
        assert _data(client.get(f"{BASE}/config"))["settings"] == json.loads(exported)


class TestEvaluationEndpoints:
    def test_status_at_clock_instant(self, client):
        data = _data(client.get(f"{BASE}/status"))
        assert data["as_of"] == "2024-01-01T10:00:00"
        assert data["phase"]["state"] == "ON"
        assert data["elapsed"]["display"] == "10 h"
        assert data["energy_balance"]["direction"] == "saving"
        assert data["next_transition"]["next_state"] == "OFF"
        assert data["next_transition"]["time"] == "13:00"
        assert data["tick_seconds"] == 30
        assert "calendar" not in data

    def test_status_follows_clock(self, client, clock):
        clock.advance(hours=3)
        data = _data(client.get(f"{BASE}/status"))
        assert data["phase"]["state"] == "OFF"
        assert data["next_transition"]["hours_to_next"] == 14.0

    def test_status_at_override(self, client):
        data = _data(client.get(f"{BASE}/status", query_string={"at": "2023-12-31T23:00"}))
        assert data["energy_balance"]["hours"] == 0
        assert data["elapsed"]["display"] == "0 d"

    def test_extreme_but_valid_settings_still_evaluate(self, client):
        _data(client.put(f"{BASE}/config", json=dict(VALID_SETTINGS, lightHours=1e8)))
        data = _data(client.get(f"{BASE}/status"))
        assert data["validation"]["ok"] is True
        assert data["phase"]["state"] == "ON"
        assert data["next_transition"]["at"] == "9999-12-31T23:59:00"

        _data(client.put(f"{BASE}/config", json=dict(VALID_SETTINGS, startDate="9999-12-31T00:00")))
        calendar = _data(client.get(f"{BASE}/calendar"))["calendar"]
        assert calendar["days"] == 1
        assert calendar["current_cell"] is None

    def test_invalid_at_is_rejected(self, client):
        response = client.get(f"{BASE}/status", query_string={"at": "soon"})
        assert response.status_code == 400
        assert response.get_json()["ok"] is False

    def test_calendar(self, client):
        client.put(f"{BASE}/config", json=VALID_SETTINGS)
        data = _data(client.get(f"{BASE}/calendar"))
        calendar = data["calendar"]
        assert calendar["days"] == 2
        assert calendar["current_cell"] == {"day_index": 0, "hour_index": 10}
        assert [row["pattern"] for row in calendar["rows"]] == ["L" * 12 + "D" * 12] * 2

    def test_calendar_days_clamped(self, client):
        data = _data(client.get(f"{BASE}/calendar", query_string={"days": "0"}))
        assert data["calendar"]["days"] == 1

    def test_full_evaluation(self, client):
        data = _data(client.get(f"{BASE}/evaluate", query_string={"at": "2024-01-01T13:00"}))
        assert data["phase"]["is_light"] is False
        assert data["calendar"]["days"] == 60
        assert data["validation"]["ok"] is True

    def test_unknown_route(self, client):
        response = client.get(f"{BASE}/nope")
        assert response.status_code == 404
        assert response.get_json()["ok"] is False


def test_missing_secret_key_is_a_configuration_error(clock):
    with pytest.raises(ConfigurationError):
        create_app({"secret_key": "", "log_file": ""}, clock=clock)
