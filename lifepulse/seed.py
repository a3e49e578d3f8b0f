"""
Sample data loaded into an empty store at startup.

The snapshot is a historical record: rewards and achievements are inserted
as-is and do not pass through the token ledger, so the seeded balances stay
exactly as listed below.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from . import models
from .auth import get_password_hash
from .services.remedies import REMEDY_LIBRARY

logger = logging.getLogger(__name__)

SAMPLE_USERNAME = "sarahj"
SAMPLE_PASSWORD = "password123"
SAMPLE_CONVERSATION_ID = "conv123456"

# Seven days of vitals, oldest first; the last day matches the snapshot.
TRACKED_VITALS = {
    "bloodPressure": (["118/78", "122/81", "117/76", "124/83", "119/79", "121/80", "120/80"], "Regular measurement"),
    "heartRate": (["68", "74", "71", "77", "66", "70", "72"], "Resting heart rate"),
    "steps": (["7421", "5310", "9012", "6120", "8345", "5788", "6584"], "Daily activity"),
    "hydration": (["5", "4", "6", "3", "7", "2", "3"], "Water intake"),
}

CATALOG = [
    ("Headache", "Natural ways to relieve headache pain without medication", "headache", 4.0, 10),
    ("Common Cold", "Remedies to help you recover from a cold faster", "cold", 5.0, 15),
    ("Indigestion", "Simple remedies to ease stomach discomfort and indigestion", "stomachache", 4.0, 20),
    ("Sore Throat", "Soothing remedies for throat pain and irritation", "sore_throat", 5.0, 25),
]

CHAT_SCRIPT = [
    ("ai", "Hello Sarah! How are you feeling today? I see your blood pressure is normal, "
           "but your hydration could use some improvement."),
    ("user", "I've been feeling a bit tired today. Maybe that's why I forgot to drink water."),
    ("ai", "Fatigue can definitely be related to dehydration. I'll set a water reminder for you every hour. "
           "Also, have you been getting enough sleep lately?"),
    ("user", "Not really. I've been averaging about 6 hours."),
    ("ai", "Aim for 7-8 hours of sleep for optimal health. Here's a tip: try a 10-minute meditation before bed "
           "and avoid screens an hour before sleep. Would you like me to suggest a sleep schedule based on "
           "your daily routine?"),
]


def _at(day: datetime, hour: int, minute: int) -> datetime:
    return day.replace(hour=hour, minute=minute, second=0, microsecond=0)


def seed_database(db: Session, now: Optional[datetime] = None) -> Optional[models.User]:
    """
    Fills an empty database with the sample user and their records.

    Returns:
        The sample user, or None if the store already held users.
    """
    if db.query(models.User).first() is not None:
        logger.info("Store already contains users; skipping seed data.")
        return None

    now = now or models.utc_now()

    user = models.User(
        username=SAMPLE_USERNAME,
        password=get_password_hash(SAMPLE_PASSWORD),
        first_name="Sarah",
        last_name="Johnson",
        email="sarah.johnson@example.com",
        profile_image="https://images.unsplash.com/photo-1494790108377-be9c29b29330?ixlib=rb-1.2.1&auto=format&fit=crop&w=120&q=80",
        token_balance=2840,
        lifetime_tokens=4250,
        streak=5,
        streak_goal=7,
    )
    db.add(user)
    db.flush()

    db.add(models.HealthStats(
        user_id=user.id,
        date=now,
        blood_pressure="120/80",
        blood_pressure_status="Normal",
        heart_rate=72,
        heart_rate_status="Normal",
        steps=6584,
        steps_goal=10000,
        hydration_glasses=3,
        hydration_goal=8,
    ))

    # --- Reminders ---
    db.add_all([
        models.Reminder(user_id=user.id, title="Take Medication", description="Aspirin, 1 tablet",
                        time=_at(now, 12, 30), type="medicine", icon="ri-medicine-bottle-line",
                        completed=False, recurring=True, recurring_pattern="daily"),
        models.Reminder(user_id=user.id, title="Drink Water", description="1 glass",
                        time=_at(now, 14, 0), type="water", icon="ri-drop-line",
                        completed=False, recurring=False, recurring_pattern=None),
        models.Reminder(user_id=user.id, title="Short Walk", description="15 minutes",
                        time=_at(now, 16, 30), type="activity", icon="ri-walk-line",
                        completed=False, recurring=True, recurring_pattern="daily"),
    ])
    db.flush()

    # --- Appointments ---
    db.add_all([
        models.Appointment(user_id=user.id, type="Cardiology Follow-up", doctor_name="Dr. Michael Chen",
                           location="Valley Medical Center", date=now + timedelta(days=7),
                           duration=45, status="scheduled"),
        models.Appointment(user_id=user.id, type="Annual Physical", doctor_name="Dr. Sarah Williams",
                           location="Community Health Center", date=now + timedelta(days=14),
                           duration=60, status="scheduled"),
    ])
    db.flush()

    # --- Chat history, two minutes apart ---
    for index, (sender, content) in enumerate(CHAT_SCRIPT):
        db.add(models.ChatMessage(
            user_id=user.id,
            content=content,
            sender=sender,
            timestamp=now - timedelta(minutes=10 - 2 * index),
            conversation_id=SAMPLE_CONVERSATION_ID,
        ))
        db.flush()

    # --- Home remedy catalog ---
    for ailment, description, library_key, rating, review_count in CATALOG:
        featured = REMEDY_LIBRARY[library_key][0]
        db.add(models.HomeRemedy(
            title=f"{ailment} Relief",
            description=description,
            ailment=ailment,
            ingredients=list(featured["ingredients"]),
            instructions=featured["instructions"],
            rating=rating,
            review_count=review_count,
        ))
        db.flush()

    # --- Tracked vitals for the past week ---
    for day_offset in range(6, -1, -1):
        day = now - timedelta(days=day_offset)
        for tracking_type, (values, notes) in TRACKED_VITALS.items():
            db.add(models.HealthTracking(
                user_id=user.id,
                timestamp=day,
                type=tracking_type,
                value=values[6 - day_offset],
                notes=notes,
            ))
        db.flush()

    # --- Medicine scans ---
    db.add_all([
        models.MedicineScan(user_id=user.id, medicine_name="Aspirin", dosage="81mg", timing="Once daily",
                            side_effects=["Upset stomach", "Heartburn"], scanned_at=now - timedelta(days=3)),
        models.MedicineScan(user_id=user.id, medicine_name="Lisinopril", dosage="10mg",
                            timing="Once daily in the morning", side_effects=["Dizziness", "Cough"],
                            scanned_at=now - timedelta(days=1)),
    ])
    db.flush()

    # --- Rewards and achievements ---
    db.add_all([
        models.Reward(user_id=user.id, type="token", name="Daily Hydration",
                      description="Completed hydration goal for the day", icon="ri-drop-fill",
                      acquired_at=now - timedelta(days=2)),
        models.Reward(user_id=user.id, type="token", name="Medicine Adherence",
                      description="Took all medications on time", icon="ri-medicine-bottle-fill",
                      acquired_at=now - timedelta(days=1)),
    ])
    db.flush()
    db.add_all([
        models.Achievement(user_id=user.id, name="Step Master",
                           description="Completed 10,000 steps for 3 consecutive days", icon="ri-walk-fill",
                           acquired_at=now - timedelta(days=5)),
        models.Achievement(user_id=user.id, name="Hydration Hero",
                           description="Drank 8 glasses of water for a week", icon="ri-drop-fill",
                           acquired_at=now - timedelta(days=3)),
    ])
    db.flush()
    # Every achievement carries its paired token reward, inserted without crediting the balance
    db.add_all([
        models.Reward(user_id=user.id, type="token", name="Achievement: Step Master",
                      description="Earned Step Master achievement", icon="ri-walk-fill",
                      acquired_at=now - timedelta(days=5)),
        models.Reward(user_id=user.id, type="token", name="Achievement: Hydration Hero",
                      description="Earned Hydration Hero achievement", icon="ri-drop-fill",
                      acquired_at=now - timedelta(days=3)),
    ])

    db.commit()
    db.refresh(user)
    logger.info(f"Seeded sample user '{user.username}' with id {user.id}.")
    return user
