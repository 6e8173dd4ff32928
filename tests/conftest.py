import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from config import AppConfig

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    return AppConfig(grid_w=5, grid_h=5, seed=1234, render_cell=16)

@pytest.fixture
def rules_factory(cfg):
    from core.snake_rules import Rules
    def make(snake=None, fruit=None, pending_growth=0, committed="NONE", **overrides):
        rules = Rules(cfg.with_(**overrides) if overrides else cfg)
        if snake is not None:
            if fruit is None:
                # last free cell in row-major order, out of the way of most scenarios
                taken = set(map(tuple, snake))
                W, H = rules.cfg.grid_w, rules.cfg.grid_h
                free = [(x, y) for y in range(H) for x in range(W) if (x, y) not in taken]
                fruit = free[-1] if free else (0, 0)
            state = rules.get_state()
            state.update(
                snake=snake,
                pending_growth=pending_growth,
                committed=committed,
                requested=committed,
                fruit=fruit,
            )
            rules.set_state(state)
        return rules
    return make

@pytest.fixture
def screen(cfg):
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((cfg.grid_w * cfg.render_cell, cfg.grid_h * cfg.render_cell))
