"""Gymnasium environment for the square-matching block puzzle."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="SquareGame-8x20-v0",
    entry_point="square_game.env.square_env:SquareGameEnv",
)

__all__ = ["SquareGame-8x20-v0"]
