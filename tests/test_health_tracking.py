"""
Tests for vitals tracking and the health stats snapshot it keeps current.
"""

from datetime import timedelta

from lifepulse import models
from lifepulse.repository import HealthRepository, tracking_range_start


def _snapshot(client):
    return client.get("/api/health-stats/latest").json()


class TestTrackingUpdatesSnapshot:
    """Logging a reading copies it onto the snapshot"""

    def test_heart_rate_updates_only_heart_rate(self, auth_client):
        before = _snapshot(auth_client)
        response = auth_client.post("/api/health-tracking", json={"type": "heartRate", "value": "80"})
        assert response.status_code == 201

        after = _snapshot(auth_client)
        assert after["heartRate"] == 80
        for key in ("bloodPressure", "steps", "hydrationGlasses", "heartRateStatus", "stepsGoal"):
            assert after[key] == before[key]

    def test_blood_pressure_is_stored_as_text(self, auth_client):
        auth_client.post("/api/health-tracking", json={"type": "bloodPressure", "value": "131/86"})
        snapshot = _snapshot(auth_client)
        assert snapshot["bloodPressure"] == "131/86"
        assert snapshot["bloodPressureStatus"] == "Normal"

    def test_hydration_updates_glasses(self, auth_client):
        auth_client.post("/api/health-tracking", json={"type": "hydration", "value": "6"})
        assert _snapshot(auth_client)["hydrationGlasses"] == 6

    def test_other_types_leave_snapshot_alone(self, auth_client):
        before = _snapshot(auth_client)
        response = auth_client.post("/api/health-tracking", json={"type": "weight", "value": "64.5"})
        assert response.status_code == 201
        assert _snapshot(auth_client) == before

    def test_non_integer_reading_is_rejected(self, auth_client):
        response = auth_client.post("/api/health-tracking", json={"type": "steps", "value": "lots"})
        assert response.status_code == 400
        assert _snapshot(auth_client)["steps"] == 6584

    def test_out_of_range_reading_is_rejected(self, auth_client):
        response = auth_client.post(
            "/api/health-tracking", json={"type": "steps", "value": "99999999999999999999"}
        )
        assert response.status_code == 400
        assert _snapshot(auth_client)["steps"] == 6584

    def test_negative_reading_is_rejected(self, auth_client):
        response = auth_client.post("/api/health-tracking", json={"type": "heartRate", "value": "-5"})
        assert response.status_code == 400

    def test_largest_reading_is_accepted(self, auth_client):
        response = auth_client.post("/api/health-tracking", json={"type": "steps", "value": "2147483647"})
        assert response.status_code == 201
        assert _snapshot(auth_client)["steps"] == 2147483647

    def test_timestamp_is_set_by_server(self, auth_client):
        response = auth_client.post("/api/health-tracking", json={"type": "steps", "value": "7000"})
        assert response.json()["timestamp"]


class TestTrackingQueries:
    """Filtering tracked readings by metric and time range"""

    def test_week_returns_seeded_days(self, auth_client):
        entries = auth_client.get("/api/health-tracking").json()
        assert len(entries) == 28
        timestamps = [e["timestamp"] for e in entries]
        assert timestamps == sorted(timestamps)

    def test_metric_filter(self, auth_client):
        entries = auth_client.get("/api/health-tracking", params={"metric": "heartRate"}).json()
        assert len(entries) == 7
        assert {e["type"] for e in entries} == {"heartRate"}
        assert entries[-1]["value"] == "72"

    def test_day_range_only_returns_today(self, auth_client):
        entries = auth_client.get(
            "/api/health-tracking", params={"metric": "steps", "timeRange": "day"}
        ).json()
        assert [e["value"] for e in entries] == ["6584"]

    def test_old_entries_fall_outside_week(self, db_session, sample_user):
        repo = HealthRepository(db_session)
        repo.create_health_tracking(
            sample_user.id,
            type="steps",
            value="1200",
            timestamp=models.utc_now() - timedelta(days=20),
        )
        repo.commit()
        week = repo.list_health_tracking(sample_user.id, "steps", "week")
        month = repo.list_health_tracking(sample_user.id, "steps", "month")
        assert "1200" not in [e.value for e in week]
        assert "1200" in [e.value for e in month]

    def test_unknown_range_means_week(self):
        now = models.utc_now()
        assert tracking_range_start("fortnight", now) == tracking_range_start("week", now)
