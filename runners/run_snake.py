# runners/run_snake.py
from __future__ import annotations
import time
from typing import Callable, Iterable, Optional
from config import AppConfig
from core.interfaces import Direction
from core.snake_rules import Rules
from core.tick_timer import TickTimer
from viz.keyboard import Command, Keyboard, KeyAction
from viz.render_iface import Renderer
from viz.renderer_pygame import PygameRenderer
from stats.logging import make_logger, make_game_logger

class GameSession:
    """One window's worth of games: keyboard in, ticks paced by the timer, frames out."""
    def __init__(
        self,
        cfg: AppConfig,
        renderer: Renderer,
        keyboard: Keyboard,
        rules: Optional[Rules] = None,
        clock: Callable[[], float] = time.monotonic,
        on_game_over: Optional[Callable] = None,
    ):
        self.cfg = cfg
        self.rules = rules if rules is not None else Rules(cfg)
        self.renderer = renderer
        self.keyboard = keyboard
        self.clock = clock
        self.timer = TickTimer(cfg.move_interval)
        self.on_game_over = on_game_over
        self.games_finished = 0
        self.running = True

    def restart(self) -> None:
        self.rules.reset()
        self.timer.reset()

    def handle(self, actions: Iterable[KeyAction]) -> None:
        for a in actions:
            if a is Command.QUIT:
                self.running = False
                return
            if a is Command.RESTART:
                if self.rules.game_over:
                    self.restart()
            elif not self.rules.game_over:
                self.rules.request_direction(a)

    def update(self, now: float) -> None:
        rules = self.rules
        if rules.game_over or rules.requested is Direction.NONE:
            return
        if not self.timer.due(now):
            return
        self.timer.mark(now)
        result = rules.advance()
        if result.terminated:
            self.games_finished += 1
            if self.on_game_over is not None:
                self.on_game_over(self.games_finished, rules.snapshot())

    def frame(self) -> bool:
        """Run one rendered frame; False once the player quit."""
        self.handle(self.keyboard.poll())
        if not self.running:
            return False
        now = self.clock()
        self.update(now)
        self.renderer.draw(self.rules.snapshot(), now)
        self.renderer.tick(self.cfg.fps)
        return True

    def run(self) -> None:
        self.renderer.open(self.cfg)
        try:
            while self.frame():
                pass
        finally:
            self.renderer.close()


def main(cfg: Optional[AppConfig] = None):
    cfg = cfg or AppConfig()
    logger = make_logger(cfg.game_log_path)
    session = GameSession(
        cfg,
        renderer=PygameRenderer(),
        keyboard=Keyboard(),
        on_game_over=make_game_logger(logger, window=cfg.score_window),
    )
    try:
        session.run()
    finally:
        logger.close()
