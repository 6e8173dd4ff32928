from __future__ import annotations
from collections import deque
from typing import Deque, Dict

class WindowedStat:
    """Fixed-window mean/min/max."""
    def __init__(self, window: int):
        self.window = window
        self.buf: Deque[float] = deque(maxlen=window)
    def add(self, x: float) -> None:
        self.buf.append(float(x))
    def summary(self) -> Dict[str, float]:
        if not self.buf:
            return {"mean": 0.0, "min": 0.0, "max": 0.0}
        b = list(self.buf)
        return {"mean": sum(b) / len(b), "min": min(b), "max": max(b)}

class BestScore:
    """Highest score seen this process."""
    def __init__(self):
        self.value = 0
    def update(self, score: int) -> bool:
        if score > self.value:
            self.value = score
            return True
        return False
