from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    grid_w: int = 25
    grid_h: int = 18
    wrap_around: bool = False
    seed: Optional[int] = None

    # gameplay
    start_growth: int = 2               # segments owed right after reset
    move_interval: float = 0.1          # seconds between ticks
    fruit_dense_threshold: float = 0.5  # occupancy at which fruit placement enumerates free cells

    # render
    fps: int = 60
    render_cell: int = 32
    render_title: str = "Snake"
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    # game log
    game_log_path: Optional[str] = None
    score_window: int = 20

    def __post_init__(self):
        if self.grid_w <= 0 or self.grid_h <= 0:
            raise ValueError(f"grid must be positive, got {self.grid_w}x{self.grid_h}")
        if self.grid_w * self.grid_h < 2:
            raise ValueError("grid needs room for the snake and a fruit")
        if self.move_interval <= 0:
            raise ValueError(f"move_interval must be > 0, got {self.move_interval}")
        if self.start_growth < 0:
            raise ValueError(f"start_growth must be >= 0, got {self.start_growth}")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
