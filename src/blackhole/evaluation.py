"""
Agent evaluation.

Plays many games with an agent and aggregates the results.
"""
from typing import Dict, Optional

from .agents.base_agent import BaseAgent
from .game.engine import GameConfig
from .game.environment import BlackHoleEnv


class Evaluator:
    """
    Evaluate and compare agents.

    Every agent plays the same sequence of hole layouts when a seed is
    given, so comparisons are fair.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        num_episodes: int = 100,
        max_steps: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            config: Game configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum steps per episode (default: one per cell).
            seed: Seed for the first episode's layout.

        Raises:
            ValueError: If num_episodes is less than one.
        """
        if num_episodes < 1:
            raise ValueError("Number of games must be at least 1")
        self.config = config or GameConfig(8, 8)
        self.num_episodes = num_episodes
        self.max_steps = max_steps or self.config.size * self.config.size
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = BlackHoleEnv(config=self.config)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            seed = None if self.seed is None else self.seed + episode
            observation, info = env.reset(seed=seed)
            agent.reset()

            for _ in range(self.max_steps):
                valid_actions = env.get_action_mask()
                action = agent.select_action(observation, valid_actions)

                observation, reward, terminated, truncated, info = env.step(
                    action
                )

                total_reward += reward
                total_steps += 1

                if terminated or truncated:
                    break

            if info.get("game_state") == "WON":
                wins += 1
            total_revealed += info.get("revealed", 0)

        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        return {name: self.evaluate(agent) for name, agent in agents.items()}
