"""
Gymnasium environment wrapper for the black hole game.

Provides a standard RL interface so agents can play automatically.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Position
from .cell import CLOSED, OPEN_HOLE
from .engine import GameConfig, GameState, start_game
from .render import render_board


# ============================================================================
# Black Hole Environment
# ============================================================================

class BlackHoleEnv(gym.Env):
    """
    Gymnasium environment for the black hole game.

    Observation:
        2D array where:
        - -1 = closed cell
        - 0-8 = open cell with adjacent hole count
        - 9 = open black hole

    Actions:
        Discrete action space of size size * size.
        Action i corresponds to cell at (i // size, i % size).

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game
        - -10 for opening a black hole
        - -0.1 for an invalid action (cell already open)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Game configuration (default: 8x8 with 8 holes).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or GameConfig(8, 8)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=CLOSED,
            high=OPEN_HOLE,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.size * self.config.size)

        self._steps = 0
        self.game: GameState = self._new_game()

    def _new_game(self) -> GameState:
        return start_game(
            self.config.size, self.config.hole_count, self.np_random
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible hole layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game = self._new_game()
        self._steps = 0

        return self.game.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to open (row * size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.game.board.get_observation()
        terminated = not self.game.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Position:
        """Convert flat action index to (row, col) position."""
        row, col = divmod(int(action), self.config.size)
        return row, col

    def _calculate_reward(self, row: int, col: int) -> float:
        """Open a cell and score the result."""
        if not self.game.is_playing or not self.game.board.cell(row, col).is_closed:
            return -0.1

        self.game.reveal_cell(row, col)

        if self.game.is_won:
            return 10.0
        if self.game.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.config.safe_cells - self.game.remaining_safe_cells,
            "total_safe": self.config.safe_cells,
            "remaining_safe": self.game.remaining_safe_cells,
            "game_state": self.game.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.game)
        if self.render_mode == "human":
            print(render_board(self.game))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = cell is still closed.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.game.board.get_closed_positions():
            mask[row * self.config.size + col] = True
        return mask
