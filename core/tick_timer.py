from __future__ import annotations
from typing import Optional

class TickTimer:
    """Gates game ticks to a fixed minimum interval of wall-clock time."""
    def __init__(self, interval: float):
        if interval <= 0:
            raise ValueError(f"interval must be > 0, got {interval}")
        self.interval = interval
        self.last: Optional[float] = None

    def due(self, now: float) -> bool:
        return self.last is None or now - self.last >= self.interval

    def mark(self, now: float) -> None:
        self.last = now

    def reset(self) -> None:
        self.last = None
