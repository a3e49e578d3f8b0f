"""
Tests for the reminder endpoints: listing, creation, completion and snoozing.
"""

from datetime import datetime, timedelta


def _reminders(client):
    response = client.get("/api/reminders")
    assert response.status_code == 200
    return response.json()


class TestReminderCrud:
    """Listing and creating reminders"""

    def test_seeded_reminders_listed_in_insertion_order(self, auth_client):
        titles = [r["title"] for r in _reminders(auth_client)]
        assert titles == ["Take Medication", "Drink Water", "Short Walk"]

    def test_reminders_use_camel_case_keys(self, auth_client):
        reminder = _reminders(auth_client)[0]
        assert reminder["recurringPattern"] == "daily"
        assert "userId" in reminder

    def test_create_reminder(self, auth_client):
        response = auth_client.post("/api/reminders", json={
            "title": "Stretch",
            "time": "2024-05-01T09:00:00",
            "type": "activity",
            "recurring": True,
            "recurringPattern": "weekdays",
        })
        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Stretch"
        assert body["completed"] is False
        assert body["recurringPattern"] == "weekdays"

    def test_create_reminder_with_unknown_type_is_rejected(self, auth_client):
        response = auth_client.post("/api/reminders", json={
            "title": "Mystery",
            "time": "2024-05-01T09:00:00",
            "type": "astrology",
        })
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request data"

    def test_requires_session(self, client):
        assert client.get("/api/reminders").status_code == 401


class TestCompleteReminder:
    """Completing reminders and spawning the next recurring instance"""

    def test_recurring_reminder_spawns_successor(self, auth_client):
        medication = _reminders(auth_client)[0]
        response = auth_client.patch(f"/api/reminders/{medication['id']}/complete")
        assert response.status_code == 200
        assert response.json()["completed"] is True

        reminders = _reminders(auth_client)
        assert len(reminders) == 4
        successor = reminders[-1]
        assert successor["title"] == medication["title"]
        assert successor["completed"] is False
        assert successor["recurringPattern"] == "daily"
        expected = datetime.fromisoformat(medication["time"]) + timedelta(days=1)
        assert datetime.fromisoformat(successor["time"]) == expected

    def test_non_recurring_reminder_has_no_successor(self, auth_client):
        water = _reminders(auth_client)[1]
        response = auth_client.patch(f"/api/reminders/{water['id']}/complete")
        assert response.status_code == 200
        assert len(_reminders(auth_client)) == 3

    def test_successor_ids_are_unique(self, auth_client):
        reminders = _reminders(auth_client)
        auth_client.patch(f"/api/reminders/{reminders[0]['id']}/complete")
        auth_client.patch(f"/api/reminders/{reminders[2]['id']}/complete")
        ids = [r["id"] for r in _reminders(auth_client)]
        assert len(ids) == len(set(ids)) == 5

    def test_missing_reminder_returns_404(self, auth_client):
        response = auth_client.patch("/api/reminders/999999/complete")
        assert response.status_code == 404
        assert response.json() == {"message": "Reminder not found"}


class TestSnoozeReminder:
    """Pushing a reminder back in time"""

    def test_snooze_shifts_time(self, auth_client):
        reminder = _reminders(auth_client)[1]
        response = auth_client.patch(f"/api/reminders/{reminder['id']}/snooze", json={"minutes": 30})
        assert response.status_code == 200
        expected = datetime.fromisoformat(reminder["time"]) + timedelta(minutes=30)
        assert datetime.fromisoformat(response.json()["time"]) == expected
        assert response.json()["completed"] is False

    def test_snooze_keeps_completed_flag(self, auth_client):
        water = _reminders(auth_client)[1]
        auth_client.patch(f"/api/reminders/{water['id']}/complete")
        response = auth_client.patch(f"/api/reminders/{water['id']}/snooze", json={"minutes": 15})
        assert response.status_code == 200
        assert response.json()["completed"] is True
        assert len(_reminders(auth_client)) == 3

    def test_snooze_requires_positive_minutes(self, auth_client):
        reminder = _reminders(auth_client)[1]
        response = auth_client.patch(f"/api/reminders/{reminder['id']}/snooze", json={"minutes": 0})
        assert response.status_code == 400

    def test_snooze_missing_reminder_returns_404(self, auth_client):
        response = auth_client.patch("/api/reminders/999999/snooze", json={"minutes": 10})
        assert response.status_code == 404
