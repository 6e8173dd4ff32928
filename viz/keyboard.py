# viz/keyboard.py
from __future__ import annotations
from enum import Enum
from typing import List, Union
import pygame as pg
from core.interfaces import Direction

class Command(Enum):
    QUIT = "quit"
    RESTART = "restart"

KeyAction = Union[Direction, Command]

KEYMAP = {
    pg.K_UP: Direction.UP, pg.K_w: Direction.UP,
    pg.K_DOWN: Direction.DOWN, pg.K_s: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT, pg.K_a: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT, pg.K_d: Direction.RIGHT,
    pg.K_r: Command.RESTART,
    pg.K_ESCAPE: Command.QUIT,
}

class Keyboard:
    """Edge-triggered: only key presses that happened since the last poll."""
    def poll(self) -> List[KeyAction]:
        actions: List[KeyAction] = []
        for e in pg.event.get():
            if e.type == pg.QUIT:
                actions.append(Command.QUIT)
            elif e.type == pg.KEYDOWN and e.key in KEYMAP:
                actions.append(KEYMAP[e.key])
        return actions
