"""
Defines all API endpoints related to user reminders.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from .. import schemas, models
from ..auth import get_current_user
from ..repository import HealthRepository, get_repository
from ..services import scheduling

router = APIRouter(prefix="/reminders", tags=["Reminders"])


@router.get("", response_model=List[schemas.Reminder])
def get_user_reminders(
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """
    Retrieves all reminders for the authenticated user, including completed ones.
    """
    return repo.list_reminders(current_user.id)


@router.post("", response_model=schemas.Reminder, status_code=status.HTTP_201_CREATED)
def create_reminder(
    reminder: schemas.ReminderCreate,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """
    Creates a new reminder for the authenticated user.
    """
    db_reminder = repo.create_reminder(current_user.id, **reminder.model_dump())
    repo.commit()
    return db_reminder


@router.patch("/{reminder_id}/complete", response_model=schemas.Reminder)
def complete_reminder(
    reminder_id: int,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """
    Marks a reminder as done. Recurring reminders schedule their next instance.
    """
    reminder = scheduling.complete_reminder(repo, current_user.id, reminder_id)
    if reminder is None:
        raise HTTPException(status_code=404, detail="Reminder not found")
    return reminder


@router.patch("/{reminder_id}/snooze", response_model=schemas.Reminder)
def snooze_reminder(
    reminder_id: int,
    snooze: schemas.SnoozeRequest,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """
    Pushes a reminder back by the requested number of minutes.
    """
    reminder = scheduling.snooze_reminder(repo, current_user.id, reminder_id, snooze.minutes)
    if reminder is None:
        raise HTTPException(status_code=404, detail="Reminder not found")
    return reminder
