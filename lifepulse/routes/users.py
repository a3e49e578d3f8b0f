"""
Defines the endpoints for the current user's profile and vitals snapshot.
"""

from fastapi import APIRouter, Depends, HTTPException

from .. import schemas, models
from ..auth import get_current_user
from ..repository import HealthRepository, get_repository

router = APIRouter(tags=["Users"])


@router.get("/users/current", response_model=schemas.UserResponse)
def read_current_user(current_user: models.User = Depends(get_current_user)):
    """Retrieves the profile of the currently authenticated user."""
    return current_user


@router.patch("/users/current", response_model=schemas.UserResponse)
def update_current_user(
    profile_data: schemas.UserProfileUpdate,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """
    Updates profile fields of the authenticated user.

    Only the fields present in the request are changed.
    """
    user = repo.update_user(current_user, **profile_data.model_dump(exclude_unset=True, exclude_none=True))
    repo.commit()
    return user


@router.get("/health-stats/latest", response_model=schemas.HealthStatsResponse)
def read_latest_health_stats(
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """Returns the user's current vitals snapshot."""
    stats = repo.get_health_stats(current_user.id)
    if stats is None:
        raise HTTPException(status_code=404, detail="Health stats not found")
    return stats
