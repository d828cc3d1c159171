"""
Unit tests for the agent interface and RandomAgent.
"""
import numpy as np
import pytest
from agents import RandomAgent
from game import BoardConfig, MinesweeperEnv


@pytest.fixture
def agent() -> RandomAgent:
    return RandomAgent(3, 4, seed=0)


class TestActionMapping:
    """Test action index conversions."""

    def test_dig_and_flag_share_position(self, agent: RandomAgent) -> None:
        dig = agent.position_to_action(2, 1)
        flag = agent.position_to_action(2, 1, flag=True)
        assert dig == 9
        assert flag == 21
        assert agent.action_to_position(dig) == (2, 1)
        assert agent.action_to_position(flag) == (2, 1)

    def test_valid_actions_from_observation(self, agent: RandomAgent) -> None:
        obs = np.full((3, 4), -1, dtype=np.int8)
        obs[0, 0] = 2
        obs[0, 1] = -2
        mask = agent.get_valid_actions_from_obs(obs)
        assert mask.shape == (24,)
        assert mask[0] == False  # noqa: E712
        assert mask[1] == False  # noqa: E712
        assert mask[12] == False  # noqa: E712
        assert mask[13] == True  # noqa: E712
        assert mask[:12].sum() == 10


class TestRandomAgent:
    """Test random dig selection."""

    def test_selects_only_valid_digs(self, agent: RandomAgent) -> None:
        mask = np.zeros(24, dtype=np.int8)
        mask[[3, 7, 15]] = 1
        for _ in range(20):
            assert agent.select_action(np.zeros((3, 4)), mask) in (3, 7)

    def test_no_valid_digs_returns_zero(self, agent: RandomAgent) -> None:
        mask = np.zeros(24, dtype=np.int8)
        assert agent.select_action(np.zeros((3, 4)), mask) == 0

    def test_plays_episode_to_completion(self) -> None:
        """Digging valid cells always ends the game."""
        env = MinesweeperEnv(config=BoardConfig(5, 5, 5))
        agent = RandomAgent(5, 5, seed=1)
        obs, _ = env.reset(seed=1)
        terminated = False
        steps = 0
        while not terminated:
            action = agent.select_action(obs, env.get_action_mask())
            obs, reward, terminated, _, _ = env.step(action)
            assert reward != pytest.approx(-0.1)
            steps += 1
        assert steps <= 20
        assert env.session.is_over is True


class TestFlagRate:
    """Test optional flag moves."""

    def test_full_flag_rate_picks_flags(self) -> None:
        agent = RandomAgent(3, 4, seed=0, flag_rate=1.0)
        mask = np.zeros(24, dtype=np.int8)
        mask[[3, 15]] = 1
        assert agent.select_action(np.zeros((3, 4)), mask) == 15

    def test_full_flag_rate_digs_without_legal_flags(self) -> None:
        agent = RandomAgent(3, 4, seed=0, flag_rate=1.0)
        mask = np.zeros(24, dtype=np.int8)
        mask[5] = 1
        assert agent.select_action(np.zeros((3, 4)), mask) == 5

    @pytest.mark.parametrize("rate", [-0.1, 1.5])
    def test_rate_out_of_range_raises_error(self, rate: float) -> None:
        with pytest.raises(ValueError, match="flag_rate"):
            RandomAgent(3, 4, flag_rate=rate)
