"""
Defines the endpoints for logging and charting tracked vitals.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from .. import schemas, models
from ..auth import get_current_user
from ..repository import HealthRepository, get_repository

router = APIRouter(prefix="/health-tracking", tags=["Health Tracking"])


@router.get("", response_model=List[schemas.HealthTracking])
def get_health_tracking(
    metric: str = "all",
    time_range: str = Query("week", alias="timeRange"),
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """
    Returns tracked entries in chronological order.

    Args:
        metric (str): A tracking type such as 'heartRate', or 'all'.
        time_range (str): 'day', 'week' or 'month'; unknown values mean 'week'.
    """
    return repo.list_health_tracking(current_user.id, metric, time_range)


@router.post("", response_model=schemas.HealthTracking, status_code=status.HTTP_201_CREATED)
def create_health_tracking_entry(
    entry: schemas.HealthTrackingCreate,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """
    Logs a vital reading and updates the matching field of the user's snapshot.
    """
    db_entry = repo.create_health_tracking(current_user.id, timestamp=models.utc_now(), **entry.model_dump())
    repo.commit()
    return db_entry
