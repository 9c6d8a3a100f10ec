"""
Base agent interface for automated players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ..game.cell import CLOSED


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for agents.

    All agents must implement the select_action method to choose
    which cell to open based on the current observation.
    """

    def __init__(self, board_size: int) -> None:
        """
        Initialize the agent.

        Args:
            board_size: Number of rows (and columns) in the board.
        """
        self.board_size = board_size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (row * size + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row, col = divmod(action, self.board_size)
        return row, col

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat action index."""
        return row * self.board_size + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Returns:
            Boolean mask where True = cell is closed.
        """
        return observation.flatten() == CLOSED

    def reset(self) -> None:
        """Reset agent state for new episode."""
