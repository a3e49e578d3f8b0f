"""
Defines all API endpoints related to doctor appointments.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from .. import schemas, models
from ..auth import get_current_user
from ..repository import HealthRepository, get_repository

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.get("", response_model=List[schemas.Appointment])
def get_appointments(
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """Retrieves the user's appointments, soonest first."""
    return repo.list_appointments(current_user.id)


@router.post("", response_model=schemas.Appointment, status_code=status.HTTP_201_CREATED)
def create_appointment(
    appointment: schemas.AppointmentCreate,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """Books a new appointment for the authenticated user."""
    db_appointment = repo.create_appointment(current_user.id, **appointment.model_dump())
    repo.commit()
    return db_appointment


@router.get("/{appointment_id}", response_model=schemas.Appointment)
def get_appointment(
    appointment_id: int,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    appointment = repo.get_appointment(current_user.id, appointment_id)
    if appointment is None:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appointment


@router.patch("/{appointment_id}", response_model=schemas.Appointment)
def update_appointment(
    appointment_id: int,
    changes: schemas.AppointmentUpdate,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """
    Reschedules, cancels or completes an appointment.

    Only the fields present in the request are changed.
    """
    appointment = repo.get_appointment(current_user.id, appointment_id)
    if appointment is None:
        raise HTTPException(status_code=404, detail="Appointment not found")

    updated = repo.update_appointment(appointment, **changes.model_dump(exclude_unset=True, exclude_none=True))
    repo.commit()
    return updated
