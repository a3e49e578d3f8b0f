"""
Tests for the token ledger behind rewards and achievements.
"""

import pytest

from lifepulse.config import settings
from lifepulse.repository import HealthRepository
from lifepulse.services import ledger


class TestLedgerService:
    """Balance bookkeeping at the service level"""

    def test_token_rewards_grow_balance_linearly(self, db_session, sample_user):
        repo = HealthRepository(db_session)
        start_balance, start_lifetime = sample_user.token_balance, sample_user.lifetime_tokens
        for index in range(4):
            ledger.create_reward(repo, sample_user, "token", name=f"Streak day {index}")
        db_session.refresh(sample_user)
        assert sample_user.token_balance == start_balance + 4 * settings.TOKEN_REWARD_AMOUNT
        assert sample_user.lifetime_tokens == start_lifetime + 4 * settings.TOKEN_REWARD_AMOUNT

    @pytest.mark.parametrize("reward_type", ["badge", "trophy"])
    def test_non_token_rewards_do_not_change_balance(self, db_session, sample_user, reward_type):
        repo = HealthRepository(db_session)
        ledger.create_reward(repo, sample_user, reward_type, name="Early Bird")
        db_session.refresh(sample_user)
        assert sample_user.token_balance == 2840
        assert sample_user.lifetime_tokens == 4250

    def test_achievement_is_paired_with_one_token_reward(self, db_session, sample_user):
        repo = HealthRepository(db_session)
        rewards_before = len(repo.list_rewards(sample_user.id))
        achievement = ledger.grant_achievement(repo, sample_user, name="Sleep Champion")

        rewards = repo.list_rewards(sample_user.id)
        assert len(rewards) == rewards_before + 1
        paired = [r for r in rewards if r.name == "Achievement: Sleep Champion"]
        assert len(paired) == 1
        assert paired[0].type == "token"
        assert paired[0].description == "Earned Sleep Champion achievement"
        assert paired[0].acquired_at == achievement.acquired_at

    def test_amount_follows_configuration(self, db_session, sample_user, monkeypatch):
        monkeypatch.setattr(settings, "TOKEN_REWARD_AMOUNT", 25)
        ledger.create_reward(HealthRepository(db_session), sample_user, "token", name="Bonus")
        db_session.refresh(sample_user)
        assert sample_user.token_balance == 2865


class TestRewardEndpoints:
    """Rewards and achievements over HTTP"""

    def test_seeded_balances_are_untouched(self, auth_client):
        user = auth_client.get("/api/users/current").json()
        assert user["tokenBalance"] == 2840
        assert user["lifetimeTokens"] == 4250

    def test_rewards_listed_newest_first(self, auth_client):
        rewards = auth_client.get("/api/rewards").json()
        assert [r["name"] for r in rewards] == [
            "Medicine Adherence",
            "Daily Hydration",
            "Achievement: Hydration Hero",
            "Achievement: Step Master",
        ]

    def test_seeded_achievements_have_paired_rewards(self, auth_client):
        rewards = {r["name"]: r for r in auth_client.get("/api/rewards").json()}
        for achievement in auth_client.get("/api/achievements").json():
            paired = rewards[f"Achievement: {achievement['name']}"]
            assert paired["type"] == "token"
            assert paired["acquiredAt"] == achievement["acquiredAt"]

    def test_achievement_grant_credits_tokens(self, auth_client):
        achievements_before = len(auth_client.get("/api/achievements").json())
        rewards_before = len(auth_client.get("/api/rewards").json())

        response = auth_client.post("/api/achievements", json={
            "name": "Early Riser",
            "description": "Logged vitals before 7am",
            "icon": "ri-sun-line",
        })
        assert response.status_code == 201
        assert response.json()["name"] == "Early Riser"

        user = auth_client.get("/api/users/current").json()
        assert user["tokenBalance"] == 2850
        assert user["lifetimeTokens"] == 4260
        assert len(auth_client.get("/api/achievements").json()) == achievements_before + 1
        assert len(auth_client.get("/api/rewards").json()) == rewards_before + 1

    def test_token_reward_credits_tokens(self, auth_client):
        response = auth_client.post("/api/rewards", json={"type": "token", "name": "Hydration Goal"})
        assert response.status_code == 201
        assert response.json()["type"] == "token"
        assert auth_client.get("/api/users/current").json()["tokenBalance"] == 2850

    def test_badge_reward_leaves_balance(self, auth_client):
        response = auth_client.post("/api/rewards", json={"type": "badge", "name": "Night Owl"})
        assert response.status_code == 201
        assert auth_client.get("/api/users/current").json()["tokenBalance"] == 2840

    def test_unknown_reward_type_is_rejected(self, auth_client):
        response = auth_client.post("/api/rewards", json={"type": "coupon", "name": "Discount"})
        assert response.status_code == 400
