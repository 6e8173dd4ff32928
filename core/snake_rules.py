# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
from collections import deque
from itertools import islice
from typing import Deque, Iterable, Optional
import random
import numpy as np
from .interfaces import Direction, Position, Snapshot, TerminalReason, TickResult
from config import AppConfig

class FruitPlacementError(LookupError):
    """No free cell left for the fruit."""

class Rules:
    def __init__(self, cfg: AppConfig):
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self._reset_state()

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    @property
    def area(self) -> int:
        return self.cfg.grid_w * self.cfg.grid_h

    def _reset_state(self):
        cx, cy = self.cfg.grid_w // 2, self.cfg.grid_h // 2
        self.snake: Deque[Position] = deque([(cx, cy)])
        self.pending_growth = self.cfg.start_growth
        self.committed = Direction.NONE   # last direction actually moved in
        self.requested = Direction.NONE   # what the next tick will use
        self.fruit = self._place_fruit()
        self.score = 0
        self.tick_count = 0
        self.game_over = False
        self.reason: Optional[TerminalReason] = None

    def reset(self) -> Snapshot:
        self._reset_state()
        return self.snapshot()

    # ---- fruit ----
    def _place_fruit(self, extra: Iterable[Position] = ()) -> Position:
        occ = set(self.snake)
        occ.update(extra)
        W, H = self.cfg.grid_w, self.cfg.grid_h
        if len(occ) < self.cfg.fruit_dense_threshold * self.area:
            # rejection sampling, bounded like the classic version
            for _ in range(self.area * 50):
                pos = (self.rng.randrange(W), self.rng.randrange(H))
                if pos not in occ:
                    return pos
        return self._pick_free_cell(occ)

    def _pick_free_cell(self, occ: set) -> Position:
        W, H = self.cfg.grid_w, self.cfg.grid_h
        free = np.ones((H, W), dtype=bool)
        for (x, y) in occ:
            if 0 <= x < W and 0 <= y < H:
                free[y, x] = False
        idx = np.flatnonzero(free)
        if idx.size == 0:
            raise FruitPlacementError(f"no free cell on a {W}x{H} board")
        i = int(idx[self.rng.randrange(idx.size)])
        return (i % W, i // W)

    # ---- direction ----
    def request_direction(self, d: Direction) -> bool:
        """Queue d for the next tick unless it reverses the committed direction."""
        if d is Direction.NONE or not self.committed.allows(d):
            return False
        self.requested = d
        return True

    # ---- tick ----
    def _wrap(self, pos: Position) -> Position:
        x, y = pos
        W, H = self.cfg.grid_w, self.cfg.grid_h
        if x < 0:
            x = W - 1
        elif x >= W:
            x = 0
        if y < 0:
            y = H - 1
        elif y >= H:
            y = 0
        return (x, y)

    def _in_bounds(self, pos: Position) -> bool:
        return 0 <= pos[0] < self.cfg.grid_w and 0 <= pos[1] < self.cfg.grid_h

    def _terminate(self, reason: TerminalReason) -> TickResult:
        self.game_over, self.reason = True, reason
        return TickResult.terminal(reason)

    def advance(self, direction: Optional[Direction] = None) -> TickResult:
        if self.game_over:
            return TickResult.terminal(self.reason)
        if direction is None:
            direction = self.requested
        if direction is Direction.NONE:
            return TickResult.continued()
        if not self.snake:
            raise RuntimeError("advance() on an empty snake; call reset() first")

        hx, hy = self.snake[0]
        dx, dy = direction.offset
        new_head = (hx + dx, hy + dy)

        # walls
        if self.cfg.wrap_around:
            new_head = self._wrap(new_head)
        elif not self._in_bounds(new_head):
            return self._terminate(TerminalReason.WALL_COLLISION)

        # fruit
        if new_head == self.fruit:
            self.score += 1
            self.pending_growth += 1
            if len(self.snake) + self.pending_growth >= self.area:
                # snake stays uncommitted; the snapshot still shows the bumped growth
                return self._terminate(TerminalReason.BOARD_FULL)
            try:
                self.fruit = self._place_fruit(extra=(new_head,))
            except FruitPlacementError:
                return self._terminate(TerminalReason.BOARD_FULL)

        # body; the tail cell is free this tick unless the snake grows
        grows = self.pending_growth > 0
        body = self.snake if grows else islice(self.snake, 0, len(self.snake) - 1)
        if new_head in body:
            return self._terminate(TerminalReason.SELF_COLLISION)

        self.snake.appendleft(new_head)
        if grows:
            self.pending_growth -= 1
        else:
            self.snake.pop()
        self.committed = direction
        self.requested = direction
        self.tick_count += 1
        return TickResult.continued()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            fruit=self.fruit,
            direction=self.committed,
            score=self.score,
            pending_growth=self.pending_growth,
            tick_count=self.tick_count,
            game_over=self.game_over,
            reason=self.reason,
            grid_w=self.cfg.grid_w,
            grid_h=self.cfg.grid_h,
            wrap_around=self.cfg.wrap_around,
        )

    def get_state(self) -> dict:
        """Pure-Python state (plus RNG), enough to rebuild any position."""
        return {
            "snake": list(self.snake),
            "pending_growth": self.pending_growth,
            "committed": self.committed.name,
            "requested": self.requested.name,
            "fruit": self.fruit,
            "score": self.score,
            "tick_count": self.tick_count,
            "game_over": self.game_over,
            "reason": self.reason.value if self.reason else None,
            "rng_state": self.rng.getstate(),
        }

    def set_state(self, state: dict) -> None:
        """Restore exact internal state (including RNG when present)."""
        self.snake = deque(map(tuple, state["snake"]))
        self.pending_growth = int(state.get("pending_growth", 0))
        self.committed = Direction[state.get("committed", "NONE")]
        self.requested = Direction[state.get("requested", self.committed.name)]
        self.fruit = tuple(state["fruit"])
        self.score = int(state.get("score", 0))
        self.tick_count = int(state.get("tick_count", 0))
        self.game_over = bool(state.get("game_over", False))
        reason = state.get("reason")
        self.reason = TerminalReason(reason) if reason else None
        if "rng_state" in state:
            self.rng.setstate(state["rng_state"])
