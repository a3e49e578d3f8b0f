"""
Data access layer for every resource the service stores.

`HealthRepository` wraps a SQLAlchemy session and is handed to the routes
through the `get_repository` dependency. Write methods only flush; the caller
commits once the whole operation has been applied, so a multi-step change
(completing a reminder and spawning its successor, granting an achievement
and its token reward) is stored together or not at all.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta
from fastapi import Depends
from sqlalchemy import or_, func
from sqlalchemy.orm import Session

from . import models
from .database import get_db

logger = logging.getLogger(__name__)

CONVERSATION_TITLE_LIMIT = 30

# Tracking type -> (snapshot column, converter)
SNAPSHOT_FIELDS = {
    "bloodPressure": ("blood_pressure", str),
    "heartRate": ("heart_rate", int),
    "steps": ("steps", int),
    "hydration": ("hydration_glasses", int),
}


def tracking_range_start(time_range: str, now: datetime) -> datetime:
    """
    Returns the earliest timestamp included in a tracking time range.

    'day' starts at midnight, 'week' covers the last 7 days and 'month' the
    last calendar month. Anything else falls back to a week.
    """
    if time_range == "day":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if time_range == "month":
        return now - relativedelta(months=1)
    return now - timedelta(days=7)


def conversation_title(first_user_message: Optional[str]) -> str:
    if not first_user_message:
        return "New Conversation"
    if len(first_user_message) > CONVERSATION_TITLE_LIMIT:
        return first_user_message[:CONVERSATION_TITLE_LIMIT - 3] + "..."
    return first_user_message


class HealthRepository:
    """Repository over the SQLAlchemy session for a single request."""

    def __init__(self, db: Session):
        self.db = db

    def _add(self, obj):
        self.db.add(obj)
        self.db.flush()
        return obj

    def commit(self) -> None:
        self.db.commit()

    # --- Users ---
    def get_user(self, user_id: int) -> Optional[models.User]:
        return self.db.get(models.User, user_id)

    def get_user_by_username(self, username: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.username == username).first()

    def get_user_by_email(self, email: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(func.lower(models.User.email) == email.lower()).first()

    def get_user_by_google_id(self, google_id: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.google_id == google_id).first()

    def create_user(self, **fields) -> models.User:
        return self._add(models.User(**fields))

    def update_user(self, user: models.User, **fields) -> models.User:
        for key, value in fields.items():
            setattr(user, key, value)
        self.db.flush()
        return user

    # --- Health Stats ---
    def get_health_stats(self, user_id: int) -> Optional[models.HealthStats]:
        return (
            self.db.query(models.HealthStats)
            .filter(models.HealthStats.user_id == user_id)
            .order_by(models.HealthStats.id)
            .first()
        )

    def create_health_stats(self, user_id: int, **fields) -> models.HealthStats:
        return self._add(models.HealthStats(user_id=user_id, **fields))

    # --- Reminders ---
    def list_reminders(self, user_id: int) -> List[models.Reminder]:
        return (
            self.db.query(models.Reminder)
            .filter(models.Reminder.user_id == user_id)
            .order_by(models.Reminder.id)
            .all()
        )

    def get_reminder(self, user_id: int, reminder_id: int) -> Optional[models.Reminder]:
        return (
            self.db.query(models.Reminder)
            .filter(models.Reminder.id == reminder_id, models.Reminder.user_id == user_id)
            .first()
        )

    def create_reminder(self, user_id: int, **fields) -> models.Reminder:
        return self._add(models.Reminder(user_id=user_id, **fields))

    # --- Chat ---
    def list_chat_messages(self, user_id: int, conversation_id: str) -> List[models.ChatMessage]:
        return (
            self.db.query(models.ChatMessage)
            .filter(
                models.ChatMessage.user_id == user_id,
                models.ChatMessage.conversation_id == conversation_id,
            )
            .order_by(models.ChatMessage.timestamp, models.ChatMessage.id)
            .all()
        )

    def _conversation_ids(self, user_id: int) -> List[str]:
        """Conversation ids of a user in the order they were first seen."""
        rows = (
            self.db.query(models.ChatMessage.conversation_id)
            .filter(models.ChatMessage.user_id == user_id)
            .order_by(models.ChatMessage.id)
            .all()
        )
        return list(dict.fromkeys(row[0] for row in rows))

    def recent_chat_messages(self, user_id: int) -> List[models.ChatMessage]:
        """Messages of the conversation that was started most recently."""
        conversation_ids = self._conversation_ids(user_id)
        if not conversation_ids:
            return []
        return self.list_chat_messages(user_id, conversation_ids[-1])

    def list_conversations(self, user_id: int) -> List[Dict[str, str]]:
        """Summaries of every conversation, titled after the first user message."""
        conversations = []
        for conversation_id in self._conversation_ids(user_id):
            first_user_message = (
                self.db.query(models.ChatMessage)
                .filter(
                    models.ChatMessage.user_id == user_id,
                    models.ChatMessage.conversation_id == conversation_id,
                    models.ChatMessage.sender == "user",
                )
                .order_by(models.ChatMessage.timestamp, models.ChatMessage.id)
                .first()
            )
            content = first_user_message.content if first_user_message else None
            conversations.append({"id": conversation_id, "title": conversation_title(content)})
        # Code point order, so uppercase ids sort before lowercase regardless of locale
        return sorted(conversations, key=lambda conv: conv["id"])

    def create_chat_message(self, user_id: int, **fields) -> models.ChatMessage:
        if fields.get("timestamp") is None:
            fields.pop("timestamp", None)
        return self._add(models.ChatMessage(user_id=user_id, **fields))

    # --- Appointments ---
    def list_appointments(self, user_id: int) -> List[models.Appointment]:
        return (
            self.db.query(models.Appointment)
            .filter(models.Appointment.user_id == user_id)
            .order_by(models.Appointment.date, models.Appointment.id)
            .all()
        )

    def get_appointment(self, user_id: int, appointment_id: int) -> Optional[models.Appointment]:
        return (
            self.db.query(models.Appointment)
            .filter(models.Appointment.id == appointment_id, models.Appointment.user_id == user_id)
            .first()
        )

    def create_appointment(self, user_id: int, **fields) -> models.Appointment:
        return self._add(models.Appointment(user_id=user_id, **fields))

    def update_appointment(self, appointment: models.Appointment, **fields) -> models.Appointment:
        for key, value in fields.items():
            setattr(appointment, key, value)
        self.db.flush()
        return appointment

    # --- Home Remedies ---
    def list_home_remedies(self) -> List[models.HomeRemedy]:
        return self.db.query(models.HomeRemedy).order_by(models.HomeRemedy.id).all()

    def get_home_remedy(self, remedy_id: int) -> Optional[models.HomeRemedy]:
        return self.db.get(models.HomeRemedy, remedy_id)

    def search_home_remedies(self, query: str) -> List[models.HomeRemedy]:
        """Case-insensitive substring search over title, description and ailment."""
        pattern = f"%{query.lower()}%"
        return (
            self.db.query(models.HomeRemedy)
            .filter(
                or_(
                    func.lower(models.HomeRemedy.title).like(pattern),
                    func.lower(models.HomeRemedy.description).like(pattern),
                    func.lower(models.HomeRemedy.ailment).like(pattern),
                )
            )
            .order_by(models.HomeRemedy.id)
            .all()
        )

    def create_home_remedy(self, **fields) -> models.HomeRemedy:
        return self._add(models.HomeRemedy(**fields))

    # --- Health Tracking ---
    def list_health_tracking(
        self, user_id: int, metric: str = "all", time_range: str = "week", now: Optional[datetime] = None
    ) -> List[models.HealthTracking]:
        start = tracking_range_start(time_range, now or models.utc_now())
        query = self.db.query(models.HealthTracking).filter(
            models.HealthTracking.user_id == user_id,
            models.HealthTracking.timestamp >= start,
        )
        if metric != "all":
            query = query.filter(models.HealthTracking.type == metric)
        return query.order_by(models.HealthTracking.timestamp, models.HealthTracking.id).all()

    def create_health_tracking(self, user_id: int, **fields) -> models.HealthTracking:
        """
        Appends a tracking entry and copies its value onto the user's snapshot.

        Only the snapshot field matching the entry type changes; types without
        a snapshot field are stored as plain log entries.
        """
        entry = self._add(models.HealthTracking(user_id=user_id, **fields))

        snapshot = self.get_health_stats(user_id)
        mapping = SNAPSHOT_FIELDS.get(entry.type)
        if snapshot is not None and mapping is not None:
            column, convert = mapping
            setattr(snapshot, column, convert(entry.value.strip()))
            self.db.flush()
        elif snapshot is None:
            logger.debug(f"User {user_id} has no health snapshot; stored '{entry.type}' entry only.")
        return entry

    # --- Medicine Scans ---
    def list_medicine_scans(self, user_id: int) -> List[models.MedicineScan]:
        return (
            self.db.query(models.MedicineScan)
            .filter(models.MedicineScan.user_id == user_id)
            .order_by(models.MedicineScan.scanned_at.desc(), models.MedicineScan.id.desc())
            .all()
        )

    def create_medicine_scan(self, user_id: int, **fields) -> models.MedicineScan:
        return self._add(models.MedicineScan(user_id=user_id, **fields))

    # --- Rewards & Achievements ---
    def list_rewards(self, user_id: int) -> List[models.Reward]:
        return (
            self.db.query(models.Reward)
            .filter(models.Reward.user_id == user_id)
            .order_by(models.Reward.acquired_at.desc(), models.Reward.id.desc())
            .all()
        )

    def add_reward(self, user_id: int, **fields) -> models.Reward:
        """Stores a reward record as-is; balance changes belong to the ledger."""
        if fields.get("acquired_at") is None:
            fields.pop("acquired_at", None)
        return self._add(models.Reward(user_id=user_id, **fields))

    def list_achievements(self, user_id: int) -> List[models.Achievement]:
        return (
            self.db.query(models.Achievement)
            .filter(models.Achievement.user_id == user_id)
            .order_by(models.Achievement.acquired_at.desc(), models.Achievement.id.desc())
            .all()
        )

    def add_achievement(self, user_id: int, **fields) -> models.Achievement:
        if fields.get("acquired_at") is None:
            fields.pop("acquired_at", None)
        return self._add(models.Achievement(user_id=user_id, **fields))


def get_repository(db: Session = Depends(get_db)) -> HealthRepository:
    """FastAPI dependency providing the repository for the request's session."""
    return HealthRepository(db)
