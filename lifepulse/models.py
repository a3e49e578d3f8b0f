"""
Defines the SQLAlchemy ORM models for the database.

Each class in this file represents a table in the database and its columns.
Record ids come from one store-wide sequence (the `record_ids` table), so an
id is unique across every kind of record, not only within its own table.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column, Integer, String, Text, Float, JSON, ForeignKey, DateTime, Boolean, event
)
from .database import Base
from .database_types import EncryptedJSON


def utc_now() -> datetime:
    """Current time as a naive UTC datetime, the form every timestamp is stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class RecordId(Base):
    """Store-wide id sequence shared by all other tables."""
    __tablename__ = "record_ids"

    id = Column(Integer, primary_key=True, autoincrement=True)


@event.listens_for(Base, "before_insert", propagate=True)
def assign_record_id(mapper, connection, target):
    if isinstance(target, RecordId) or target.id is not None:
        return
    result = connection.execute(RecordId.__table__.insert())
    target.id = result.inserted_primary_key[0]


class User(Base):
    """
    Represents the 'users' table in the database.
    """
    __tablename__ = "users"

    # Core user identification fields
    id = Column(Integer, primary_key=True, autoincrement=False)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    # Nullable for accounts that only sign in through Google
    password = Column(String, nullable=True)

    # Basic user profile information
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    profile_image = Column(String, nullable=True)

    # External identity
    google_id = Column(String, unique=True, index=True, nullable=True)
    google_profile_pic = Column(String, nullable=True)

    # Gamification counters
    token_balance = Column(Integer, nullable=False, default=0)
    lifetime_tokens = Column(Integer, nullable=False, default=0)
    streak = Column(Integer, nullable=False, default=0)
    streak_goal = Column(Integer, nullable=False, default=7)


class HealthStats(Base):
    """The current vitals snapshot of a user, overwritten by tracking entries."""
    __tablename__ = "health_stats"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    date = Column(DateTime, nullable=False, default=utc_now)

    blood_pressure = Column(String, nullable=True)
    blood_pressure_status = Column(String, nullable=True)
    heart_rate = Column(Integer, nullable=True)
    heart_rate_status = Column(String, nullable=True)
    steps = Column(Integer, nullable=False, default=0)
    steps_goal = Column(Integer, nullable=False, default=10000)
    hydration_glasses = Column(Integer, nullable=False, default=0)
    hydration_goal = Column(Integer, nullable=False, default=8)


class Reminder(Base):
    __tablename__ = "reminders"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    time = Column(DateTime, nullable=False)
    type = Column(String, nullable=False)  # medicine, water, activity, appointment, other
    icon = Column(String, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    recurring = Column(Boolean, nullable=False, default=False)
    recurring_pattern = Column(String, nullable=True)  # daily, weekdays, weekly, monthly


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    content = Column(Text, nullable=False)
    sender = Column(String, nullable=False)  # user or ai
    timestamp = Column(DateTime, nullable=False, default=utc_now)
    conversation_id = Column(String, index=True, nullable=False)


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    type = Column(String, nullable=False)
    doctor_name = Column(String, nullable=False)
    location = Column(String, nullable=True)
    date = Column(DateTime, nullable=False)
    duration = Column(Integer, nullable=False)  # in minutes
    status = Column(String, nullable=False, default="scheduled")


class HomeRemedy(Base):
    """Global reference catalog, not owned by any user."""
    __tablename__ = "home_remedies"

    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    ailment = Column(String, nullable=False)
    ingredients = Column(JSON, nullable=False)
    instructions = Column(Text, nullable=False)
    rating = Column(Float, nullable=True)
    review_count = Column(Integer, nullable=False, default=0)


class HealthTracking(Base):
    __tablename__ = "health_tracking"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    timestamp = Column(DateTime, nullable=False, default=utc_now)
    type = Column(String, nullable=False)  # bloodPressure, heartRate, steps, hydration, ...
    value = Column(String, nullable=False)
    notes = Column(String, nullable=True)


class MedicineScan(Base):
    __tablename__ = "medicine_scans"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    medicine_name = Column(String, nullable=False)
    dosage = Column(String, nullable=True)
    timing = Column(String, nullable=True)
    side_effects = Column(EncryptedJSON, nullable=True)
    scanned_at = Column(DateTime, nullable=False, default=utc_now)


class Reward(Base):
    __tablename__ = "rewards"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    type = Column(String, nullable=False)  # token, badge, trophy
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    icon = Column(String, nullable=True)
    acquired_at = Column(DateTime, nullable=False, default=utc_now)


class Achievement(Base):
    __tablename__ = "achievements"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    icon = Column(String, nullable=True)
    acquired_at = Column(DateTime, nullable=False, default=utc_now)
