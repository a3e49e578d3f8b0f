"""
Defines the endpoints for the medicine scan log.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from .. import schemas, models
from ..auth import get_current_user
from ..repository import HealthRepository, get_repository

router = APIRouter(prefix="/medicine-scans", tags=["Medicine Scanner"])


@router.get("", response_model=List[schemas.MedicineScan])
def get_medicine_scans(
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """Returns the user's scans, newest first."""
    return repo.list_medicine_scans(current_user.id)


@router.post("", response_model=schemas.MedicineScan, status_code=status.HTTP_201_CREATED)
def create_medicine_scan(
    scan: schemas.MedicineScanCreate,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """Saves a scanned medicine; the scan time is set by the server."""
    db_scan = repo.create_medicine_scan(current_user.id, scanned_at=models.utc_now(), **scan.model_dump())
    repo.commit()
    return db_scan
