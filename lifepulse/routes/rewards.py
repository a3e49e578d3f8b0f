"""
Defines the rewards and achievements endpoints.

Creating records here goes through the token ledger, so token rewards and
achievements credit the user's balance.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from .. import schemas, models
from ..auth import get_current_user
from ..repository import HealthRepository, get_repository
from ..services import ledger

router = APIRouter(tags=["Rewards"])


@router.get("/rewards", response_model=List[schemas.Reward])
def get_rewards(
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    return repo.list_rewards(current_user.id)


@router.post("/rewards", response_model=schemas.Reward, status_code=status.HTTP_201_CREATED)
def create_reward(
    reward: schemas.RewardCreate,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """Awards a reward; token rewards add to the user's balance."""
    return ledger.create_reward(
        repo,
        current_user,
        reward_type=reward.type,
        name=reward.name,
        description=reward.description,
        icon=reward.icon,
        acquired_at=reward.acquired_at,
    )


@router.get("/achievements", response_model=List[schemas.Achievement])
def get_achievements(
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    return repo.list_achievements(current_user.id)


@router.post("/achievements", response_model=schemas.Achievement, status_code=status.HTTP_201_CREATED)
def create_achievement(
    achievement: schemas.AchievementCreate,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """Grants an achievement together with its token reward."""
    return ledger.grant_achievement(
        repo,
        current_user,
        name=achievement.name,
        description=achievement.description,
        icon=achievement.icon,
        acquired_at=achievement.acquired_at,
    )
