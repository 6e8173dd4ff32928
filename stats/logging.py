from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable, Optional
from core.interfaces import Snapshot, TerminalReason
from .metrics import WindowedStat, BestScore

ALL_KEYS = [
    "game",
    "game/score", "game/length", "game/ticks", "game/reason", "game/wrap",
    "game/score_mean", "game/score_max", "game/best",
    "game/death_wall", "game/death_self", "game/board_full",
]

class Logger(Protocol):
    def log(self, game: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class NullLogger:
    def log(self, game: int, scalars: Dict[str, Any]) -> None:
        pass
    def flush(self) -> None:
        pass
    def close(self) -> None:
        pass


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, game: int, scalars: Dict[str, Any]) -> None:
        scalars = {"game": game, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # don't crash on unseen keys
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()


def make_logger(path: Optional[str]) -> Logger:
    return CSVLogger(path, fieldnames=ALL_KEYS) if path else NullLogger()


def make_game_logger(
    logger: Logger,
    window: int = 20,
    echo: Callable[[str], None] | None = print,
) -> Callable[[int, Snapshot], Dict[str, Any]]:
    """
    Returns a function(game: int, snap: Snapshot) -> scalars that records a
    finished game: rolling score stats, one CSV row, one console line.
    """
    scores = WindowedStat(window)
    best = BestScore()

    def _on_game_over(game: int, snap: Snapshot) -> Dict[str, Any]:
        scores.add(snap.score)
        best.update(snap.score)
        ws = scores.summary()
        reason = snap.reason.value if snap.reason else ""

        scalars = {
            "game/score": snap.score,
            "game/length": len(snap.snake),
            "game/ticks": snap.tick_count,
            "game/reason": reason,
            "game/wrap": int(snap.wrap_around),
            "game/score_mean": ws["mean"],
            "game/score_max": ws["max"],
            "game/best": best.value,
            "game/death_wall": 1.0 if snap.reason is TerminalReason.WALL_COLLISION else 0.0,
            "game/death_self": 1.0 if snap.reason is TerminalReason.SELF_COLLISION else 0.0,
            "game/board_full": 1.0 if snap.reason is TerminalReason.BOARD_FULL else 0.0,
        }
        logger.log(game, scalars)
        logger.flush()

        if echo is not None:
            echo(f"[game {game}] score={snap.score} length={len(snap.snake)} "
                 f"ticks={snap.tick_count} reason={reason} best={best.value}")
        return scalars

    return _on_game_over
