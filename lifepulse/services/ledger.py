"""
Token reward bookkeeping.

A user's `token_balance` and `lifetime_tokens` only move through this module:
every token-type reward adds the configured per-event amount to both counters,
and every achievement is paired with exactly one token reward. Nothing here
redeems tokens, so balances only ever grow.
"""

import logging
from datetime import datetime
from typing import Optional

from .. import models
from ..config import settings
from ..repository import HealthRepository

logger = logging.getLogger(__name__)

TOKEN = "token"


def grant_tokens(user: models.User, amount: int) -> models.User:
    """Adds `amount` to both the spendable balance and the lifetime total."""
    user.token_balance = (user.token_balance or 0) + amount
    user.lifetime_tokens = (user.lifetime_tokens or 0) + amount
    logger.info(f"Granted {amount} tokens to user {user.id}; balance is now {user.token_balance}.")
    return user


def _record_reward(
    repo: HealthRepository,
    user: models.User,
    reward_type: str,
    name: str,
    description: Optional[str],
    icon: Optional[str],
    acquired_at: Optional[datetime],
) -> models.Reward:
    reward = repo.add_reward(
        user.id,
        type=reward_type,
        name=name,
        description=description,
        icon=icon,
        acquired_at=acquired_at or models.utc_now(),
    )
    if reward_type == TOKEN:
        grant_tokens(user, settings.TOKEN_REWARD_AMOUNT)
    return reward


def create_reward(
    repo: HealthRepository,
    user: models.User,
    reward_type: str,
    name: str,
    description: Optional[str] = None,
    icon: Optional[str] = None,
    acquired_at: Optional[datetime] = None,
) -> models.Reward:
    """
    Stores a reward for the user. Token rewards also credit the user's balance.
    """
    reward = _record_reward(repo, user, reward_type, name, description, icon, acquired_at)
    repo.commit()
    return reward


def grant_achievement(
    repo: HealthRepository,
    user: models.User,
    name: str,
    description: Optional[str] = None,
    icon: Optional[str] = None,
    acquired_at: Optional[datetime] = None,
) -> models.Achievement:
    """
    Stores an achievement and the token reward that always accompanies it.

    Both records and the balance change are committed together.
    """
    acquired_at = acquired_at or models.utc_now()
    achievement = repo.add_achievement(
        user.id, name=name, description=description, icon=icon, acquired_at=acquired_at
    )
    _record_reward(
        repo,
        user,
        TOKEN,
        name=f"Achievement: {name}",
        description=f"Earned {name} achievement",
        icon=icon,
        acquired_at=acquired_at,
    )
    repo.commit()
    logger.info(f"User {user.id} earned achievement '{name}'.")
    return achievement
