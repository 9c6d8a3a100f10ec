"""
Random agent.

Serves as a baseline by opening random closed cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """
    Agent that selects closed cells uniformly at random.

    Provides a baseline for comparing other agents.
    """

    def __init__(self, board_size: int = 8, seed: Optional[int] = None) -> None:
        """
        Initialize the random agent.

        Args:
            board_size: Number of rows (and columns) in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_size)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """Select a random valid action."""
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)

        if len(valid_indices) == 0:
            # Nothing closed; any action is a no-op
            return 0

        return int(self.rng.choice(valid_indices))
