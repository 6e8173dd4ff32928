# viz/renderer_pygame.py
from __future__ import annotations
import math
import os
import pygame as pg
from typing import Optional, Tuple
from config import AppConfig
from core.interfaces import Snapshot
import viz.renderer_colors as theme

GAME_OVER_TEXT = "Game Over"
RESTART_TEXT = "Press R to restart"
FONT_SIZE = 64
HUD_FONT_SIZE = 24

class PygameRenderer:
    def __init__(self):
        self.cell = 32
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._frame_idx = 0
        self._hud_font: Optional[pg.font.Font] = None
        self._big_font: Optional[pg.font.Font] = None
        self._game_over_size: Tuple[int, int] = (0, 0)
        self._restart_size: Tuple[int, int] = (0, 0)

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        pg.init()
        pg.display.set_caption(cfg.render_title)
        surf = pg.display.set_mode((cfg.grid_w * cfg.render_cell, cfg.grid_h * cfg.render_cell))
        self._setup(cfg, surf)
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def attach_surface(self, cfg: AppConfig, surface: pg.Surface) -> None:
        """Draw into a caller-owned surface; the caller handles flipping and timing."""
        if not pg.get_init():
            pg.init()
        self._setup(cfg, surface)
        self.clock = None
        self._auto_flip = False

    def _setup(self, cfg: AppConfig, surface: pg.Surface) -> None:
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self._frame_idx = 0
        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)
        if not pg.font.get_init():
            pg.font.init()
        self._hud_font = pg.font.SysFont(None, HUD_FONT_SIZE)
        self._big_font = pg.font.SysFont(None, FONT_SIZE)
        # measured once per window, reused every frame
        self._game_over_size = self._big_font.size(GAME_OVER_TEXT)
        self._restart_size = self._hud_font.size(RESTART_TEXT)

    def tile_rect(self, pos) -> pg.Rect:
        c = self.cell
        x, y = pos
        return pg.Rect(x * c, y * c, c - 1, c - 1)

    def draw(self, s: Snapshot, now: float = 0.0) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf

        surf.fill(theme.BG)

        for i, pos in enumerate(s.snake):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, self.tile_rect(pos))

        pg.draw.rect(surf, theme.FRUIT, self.tile_rect(s.fruit))

        if self.cfg.render_show_hud:
            txt = self._hud_font.render(f"Score: {s.score}", True, theme.TEXT)
            surf.blit(txt, (16, 16))

        if s.game_over:
            self._draw_game_over(s, now)

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def _draw_game_over(self, s: Snapshot, now: float) -> None:
        surf = self.surf
        # flash the head that hit something
        alpha = int(255 * (math.sin(now) + 1.0) * 0.5)
        rect = self.tile_rect(s.head)
        flash = pg.Surface(rect.size, pg.SRCALPHA)
        flash.fill((*theme.HIGHLIGHT, alpha))
        surf.blit(flash, rect.topleft)

        cx, cy = surf.get_width() // 2, surf.get_height() // 2
        tw, th = self._game_over_size
        surf.blit(self._big_font.render(GAME_OVER_TEXT, True, theme.TEXT), (cx - tw // 2, cy - th // 2))
        rw, _ = self._restart_size
        surf.blit(self._hud_font.render(RESTART_TEXT, True, theme.TEXT), (cx - rw // 2, cy + th // 2 + 8))

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    # internals
    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        fname = os.path.join(self.cfg.render_record_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
