from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from square_game.game import Action, Color, Game, GameConfig, GameState


def observe(game: Game) -> np.ndarray:
    # Overlay the falling piece on a copy of the field; negative marks the piece
    state = game.field.clone_state()
    falling = game.falling_block
    if falling is not None and game.state is not GameState.GAME_OVER:
        for block, position in falling.get_blocks():
            if 0 <= position.y < state.shape[0] and 0 <= position.x < state.shape[1]:
                state[position.y, position.x] = -int(block.color)
    return state


class SquareGameEnv(gym.Env):
    """Single-agent view of one game: pick an action, then let the clock tick.

    Reward is the number of cells cleared since the previous step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        frames_per_step: Optional[int] = None,
        max_episode_steps: int = 5000,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.frames_per_step = int(frames_per_step or self.config.normal_fall_speed)
        self.max_episode_steps = int(max_episode_steps)
        self.game = Game.create("env", self.config)
        self._steps = 0

        top = len(Color)
        self.observation_space = spaces.Box(
            low=-top, high=top, shape=(self.config.height, self.config.width), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score.value,
            "frame_count": self.game.frame_count,
            "chain": self.game.last_chain_count,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is None:
            # Later episodes draw their pattern seed from the env stream seeded above
            seed = int(self.np_random.integers(2**31))
        config = replace(self.config, random_seed=seed)
        self.game = Game.create("env", config)
        self.game.start()
        self._steps = 0
        return observe(self.game), self._get_info()

    def step(self, action: int):
        score_before = self.game.score.value
        self.game.step(Action(int(action)))
        for _ in range(self.frames_per_step):
            if self.game.state is not GameState.PLAYING:
                break
            self.game.update()

        self._steps += 1
        reward = float(self.game.score.value - score_before)
        terminated = self.game.state is GameState.GAME_OVER
        truncated = self._steps >= self.max_episode_steps
        return observe(self.game), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        state = observe(self.game)
        cell = 12
        h, w = state.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        img[:, :] = (30, 30, 36)
        for y in range(h):
            for x in range(w):
                v = int(state[y, x])
                if v:
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = _rgb(Color(abs(v)))
        return img

    def close(self) -> None:
        pass


def _rgb(color: Color) -> Tuple[int, int, int]:
    code = color.hex_code.lstrip("#")
    return int(code[0:2], 16), int(code[2:4], 16), int(code[4:6], 16)
