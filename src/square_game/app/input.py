from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class InputCommand(str, Enum):
    MOVE_LEFT = "MOVE_LEFT"
    MOVE_RIGHT = "MOVE_RIGHT"
    MOVE_DOWN = "MOVE_DOWN"
    ROTATE_CLOCKWISE = "ROTATE_CW"
    ROTATE_COUNTER_CLOCKWISE = "ROTATE_CCW"
    INSTANT_DROP = "INSTANT_DROP"
    PAUSE = "PAUSE"
    RESET = "RESET"


# Minimum milliseconds between two executions of the same command.
COOLDOWN_MS: Dict[InputCommand, int] = {
    InputCommand.MOVE_LEFT: 133,  # 4 frames @ 30fps
    InputCommand.MOVE_RIGHT: 133,
    InputCommand.ROTATE_CLOCKWISE: 200,
    InputCommand.ROTATE_COUNTER_CLOCKWISE: 200,
    InputCommand.INSTANT_DROP: 0,
    InputCommand.MOVE_DOWN: 0,
    InputCommand.PAUSE: 0,
    InputCommand.RESET: 0,
}


class CooldownManager:
    def __init__(self, durations: Optional[Dict[InputCommand, int]] = None) -> None:
        self._durations = dict(COOLDOWN_MS if durations is None else durations)
        self._last_executed: Dict[InputCommand, int] = {}

    def can_execute(self, command: InputCommand, now_ms: int) -> bool:
        last = self._last_executed.get(command)
        if last is None:
            return True
        return now_ms - last >= self.get_cooldown_duration(command)

    def mark_executed(self, command: InputCommand, now_ms: int) -> None:
        self._last_executed[command] = now_ms

    def try_execute(self, command: InputCommand, now_ms: int) -> bool:
        if not self.can_execute(command, now_ms):
            return False
        self.mark_executed(command, now_ms)
        return True

    def reset(self) -> None:
        self._last_executed.clear()

    def get_cooldown_duration(self, command: InputCommand) -> int:
        return self._durations.get(command, 0)

    def get_last_execution_time(self, command: InputCommand) -> Optional[int]:
        return self._last_executed.get(command)
