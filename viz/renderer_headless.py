# viz/renderer_headless.py
from __future__ import annotations
from typing import Optional
import numpy as np
from config import AppConfig
from core.interfaces import Snapshot

EMPTY, BODY, HEAD, FRUIT = 0, 1, 2, 3

def rasterize(snap: Snapshot) -> np.ndarray:
    """(grid_h, grid_w) int8 grid: EMPTY / BODY / HEAD / FRUIT."""
    grid = np.zeros((snap.grid_h, snap.grid_w), dtype=np.int8)
    fx, fy = snap.fruit
    grid[fy, fx] = FRUIT
    for (x, y) in snap.snake[1:]:
        grid[y, x] = BODY
    hx, hy = snap.head
    grid[hy, hx] = HEAD
    return grid

class HeadlessRenderer:
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frame: Optional[np.ndarray] = None
        self.frames_drawn = 0
        self.closed = False

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.closed = False

    def draw(self, snap: Snapshot, now: float = 0.0) -> None:
        assert self.cfg is not None, "Renderer not opened"
        self.frame = rasterize(snap)
        self.frames_drawn += 1

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        self.closed = True
