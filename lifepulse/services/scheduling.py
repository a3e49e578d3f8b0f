# lifepulse/services/scheduling.py

import logging
from datetime import datetime, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from .. import models
from ..repository import HealthRepository

logger = logging.getLogger(__name__)

SATURDAY = 5

# Columns copied from a completed recurring reminder onto its successor
_COPIED_FIELDS = ("title", "description", "type", "icon", "recurring", "recurring_pattern")


def next_occurrence(when: datetime, pattern: str) -> datetime:
    """
    Computes the next trigger time of a recurring reminder.

    daily and weekly add 1 and 7 days. weekdays steps a day at a time until it
    lands on Monday to Friday. monthly keeps the day of the month one month
    ahead; when the next month is too short the surplus days roll into the
    month after (Jan 31 -> Mar 3, or Mar 2 in a leap year).

    Raises:
        ValueError: If the pattern is not one of the four known patterns.
    """
    if pattern == "daily":
        return when + timedelta(days=1)
    if pattern == "weekdays":
        nxt = when + timedelta(days=1)
        while nxt.weekday() >= SATURDAY:
            nxt += timedelta(days=1)
        return nxt
    if pattern == "weekly":
        return when + timedelta(days=7)
    if pattern == "monthly":
        first_of_next_month = when.replace(day=1) + relativedelta(months=1)
        return first_of_next_month + timedelta(days=when.day - 1)
    raise ValueError(f"Unknown recurring pattern: {pattern}")


def complete_reminder(repo: HealthRepository, user_id: int, reminder_id: int) -> Optional[models.Reminder]:
    """
    Marks a reminder as completed and schedules its next instance.

    The completed reminder is kept as history. When it is recurring and has a
    pattern, a new pending copy is inserted at the next occurrence.

    Returns:
        The completed reminder, or None if the user has no such reminder.
    """
    reminder = repo.get_reminder(user_id, reminder_id)
    if reminder is None:
        return None

    reminder.completed = True

    if reminder.recurring and reminder.recurring_pattern:
        successor = repo.create_reminder(
            user_id,
            time=next_occurrence(reminder.time, reminder.recurring_pattern),
            completed=False,
            **{field: getattr(reminder, field) for field in _COPIED_FIELDS},
        )
        logger.info(
            f"Reminder {reminder.id} ({reminder.recurring_pattern}) completed; "
            f"next instance {successor.id} at {successor.time.isoformat()}."
        )

    repo.commit()
    return reminder


def snooze_reminder(repo: HealthRepository, user_id: int, reminder_id: int, minutes: int) -> Optional[models.Reminder]:
    """Pushes a reminder's trigger time back by the given number of minutes."""
    reminder = repo.get_reminder(user_id, reminder_id)
    if reminder is None:
        return None

    reminder.time = reminder.time + timedelta(minutes=minutes)
    repo.commit()
    return reminder
