# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional

Position = Tuple[int, int]

class Direction(Enum):
    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> Position:
        return self.value

    def opposite(self) -> "Direction":
        if self is Direction.NONE:
            return Direction.NONE
        dx, dy = self.value
        return Direction((-dx, -dy))

    def allows(self, new_dir: "Direction") -> bool:
        """True if turning from self to new_dir is not a 180° reversal."""
        if self is Direction.NONE:
            return True
        return new_dir is not self.opposite()

class TerminalReason(str, Enum):
    WALL_COLLISION = "wall"
    SELF_COLLISION = "self"
    BOARD_FULL = "board_full"

@dataclass(frozen=True)
class TickResult:
    terminated: bool = False
    reason: Optional[TerminalReason] = None

    @classmethod
    def continued(cls) -> "TickResult":
        return cls()

    @classmethod
    def terminal(cls, reason: TerminalReason) -> "TickResult":
        return cls(terminated=True, reason=reason)

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Position, ...]   # head first
    fruit: Position
    direction: Direction
    score: int
    pending_growth: int
    tick_count: int
    game_over: bool
    reason: Optional[TerminalReason]
    grid_w: int
    grid_h: int
    wrap_around: bool

    @property
    def head(self) -> Position:
        return self.snake[0]

