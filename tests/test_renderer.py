import math

import pygame as pg
import pytest

from config import AppConfig
from core.interfaces import Direction, Snapshot, TerminalReason
import viz.renderer_colors as theme
from viz.renderer_pygame import PygameRenderer
from viz.renderer_headless import rasterize, EMPTY, BODY, HEAD, FRUIT

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

def make_snap(cfg, snake, fruit, game_over=False, score=0):
    return Snapshot(
        snake=tuple(snake), fruit=fruit, direction=Direction.RIGHT, score=score,
        pending_growth=0, tick_count=0, game_over=game_over,
        reason=TerminalReason.SELF_COLLISION if game_over else None,
        grid_w=cfg.grid_w, grid_h=cfg.grid_h, wrap_around=cfg.wrap_around,
    )

def center(pos, cell):
    return (pos[0] * cell + cell // 2, pos[1] * cell + cell // 2)

@pytest.fixture
def quiet_cfg(cfg):
    return cfg.with_(render_show_hud=False)

def test_draws_tiles_with_gap(quiet_cfg, screen):
    ren = PygameRenderer()
    ren.attach_surface(quiet_cfg, screen)
    c = quiet_cfg.render_cell
    ren.draw(make_snap(quiet_cfg, [(1, 1), (1, 2)], (3, 3)))

    assert _rgb(screen.get_at(center((1, 1), c))) == _rgb(theme.HEAD)
    assert _rgb(screen.get_at(center((1, 2), c))) == _rgb(theme.BODY)
    assert theme.HEAD != theme.BODY
    assert _rgb(screen.get_at(center((3, 3), c))) == _rgb(theme.FRUIT)
    assert _rgb(screen.get_at(center((0, 4), c))) == _rgb(theme.BG)
    # one pixel gap on the right/bottom of each tile
    assert _rgb(screen.get_at((3 * c + c - 1, 3 * c + 1))) == _rgb(theme.BG)

def test_game_over_flashes_head():
    cfg = AppConfig(render_cell=16, render_show_hud=False)
    surf = pg.Surface((cfg.grid_w * cfg.render_cell, cfg.grid_h * cfg.render_cell))
    ren = PygameRenderer()
    ren.attach_surface(cfg, surf)
    snap = make_snap(cfg, [(1, 16), (2, 16), (3, 16)], (20, 2), game_over=True)

    ren.draw(snap, now=math.pi / 2)          # sin = 1 -> opaque white
    assert _rgb(surf.get_at(center((1, 16), 16))) == _rgb(theme.HIGHLIGHT)

    ren.draw(snap, now=-math.pi / 2)         # sin = -1 -> invisible
    assert _rgb(surf.get_at(center((1, 16), 16))) == _rgb(theme.HEAD)
    assert _rgb(surf.get_at(center((2, 16), 16))) == _rgb(theme.BODY)

def test_game_over_caption_is_centered():
    cfg = AppConfig(render_cell=16, render_show_hud=False)
    surf = pg.Surface((cfg.grid_w * 16, cfg.grid_h * 16))
    ren = PygameRenderer()
    ren.attach_surface(cfg, surf)
    w, h = surf.get_size()
    snap = make_snap(cfg, [(0, 0)], (24, 17), game_over=True)
    ren.draw(snap, now=0.0)
    box = pg.Rect(0, 0, *ren._game_over_size)
    box.center = (w // 2, h // 2)
    lit = [surf.get_at((x, box.centery)) for x in range(box.left, box.right)]
    assert any(_rgb(p) == _rgb(theme.TEXT) for p in lit)

def test_open_requires_instance():
    with pytest.raises(TypeError):
        PygameRenderer().open(AppConfig)

def test_draw_before_open_fails(quiet_cfg):
    with pytest.raises(AssertionError):
        PygameRenderer().draw(make_snap(quiet_cfg, [(0, 0)], (1, 1)))

def test_rasterize_marks_cells(cfg):
    grid = rasterize(make_snap(cfg, [(1, 1), (2, 1), (2, 2)], (4, 0)))
    assert grid.shape == (5, 5)
    assert grid[1, 1] == HEAD
    assert grid[1, 2] == BODY and grid[2, 2] == BODY
    assert grid[0, 4] == FRUIT
    assert (grid == EMPTY).sum() == 21

def test_hud_shows_score():
    cfg = AppConfig(render_cell=16)
    surf = pg.Surface((cfg.grid_w * 16, cfg.grid_h * 16))
    ren = PygameRenderer()
    ren.attach_surface(cfg, surf)
    ren.draw(make_snap(cfg, [(10, 10)], (20, 15), score=7))

    box = pg.Rect((16, 16), ren._hud_font.size("Score: 7"))
    lit = [surf.get_at((x, y)) for x in range(box.left, box.right) for y in range(box.top, box.bottom)]
    assert any(_rgb(p) == _rgb(theme.TEXT) for p in lit)

    ren.attach_surface(cfg.with_(render_show_hud=False), surf)
    ren.draw(make_snap(cfg, [(10, 10)], (20, 15), score=7))
    lit = [surf.get_at((x, y)) for x in range(box.left, box.right) for y in range(box.top, box.bottom)]
    assert all(_rgb(p) == _rgb(theme.BG) for p in lit)

def test_frames_recorded_as_png(quiet_cfg, screen, tmp_path):
    rec = tmp_path / "rec"
    ren = PygameRenderer()
    ren.attach_surface(quiet_cfg.with_(render_record_dir=str(rec)), screen)
    assert rec.is_dir()
    snap = make_snap(quiet_cfg, [(1, 1), (1, 2)], (3, 3))
    ren.draw(snap)
    ren.draw(snap)
    assert sorted(p.name for p in rec.iterdir()) == ["frame_000000.png", "frame_000001.png"]
