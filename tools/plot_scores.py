# tools/plot_scores.py
import argparse
import csv
import math
from collections import deque
from pathlib import Path

# Use a non-interactive backend that writes to files
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

REPO_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_LOG = REPO_ROOT / "runs" / "games.csv"

def to_float(v):
    try:
        return float(v)
    except (TypeError, ValueError):
        return math.nan

def rolling_mean(xs, window):
    out, q, s = [], deque(), 0.0
    for x in xs:
        v = 0.0 if math.isnan(x) else float(x)
        q.append(v); s += v
        if len(q) > window:
            s -= q.popleft()
        out.append(s / len(q))
    return out

def load_games(path: Path):
    cols = {"game": [], "score": [], "length": [], "wall": [], "self": [], "full": []}
    with path.open(newline="") as f:
        for row in csv.DictReader(f):
            cols["game"].append(int(float(row["game"])))
            cols["score"].append(to_float(row.get("game/score")))
            cols["length"].append(to_float(row.get("game/length")))
            cols["wall"].append(to_float(row.get("game/death_wall")))
            cols["self"].append(to_float(row.get("game/death_self")))
            cols["full"].append(to_float(row.get("game/board_full")))
    if not cols["game"]:
        raise RuntimeError(f"{path} has a header but no rows. Finish a game first.")
    return cols

def plot_games(cols, out_dir: Path, window: int = 20) -> list:
    out_dir.mkdir(parents=True, exist_ok=True)
    saved = []

    def savefig_named(fig, name):
        path = out_dir / name
        fig.savefig(path, dpi=120, bbox_inches="tight")
        plt.close(fig)
        print(f"saved: {path}")
        saved.append(path)

    g = cols["game"]
    fig = plt.figure(figsize=(10, 6))
    plt.plot(g, cols["score"], linewidth=1, alpha=0.5, label="score")
    plt.plot(g, rolling_mean(cols["score"], window), linewidth=2, label=f"mean@{window}")
    plt.title("Score per game"); plt.xlabel("game"); plt.ylabel("score"); plt.legend()
    savefig_named(fig, "scores.png")

    fig = plt.figure(figsize=(10, 6))
    plt.plot(g, rolling_mean(cols["wall"], window), label="wall")
    plt.plot(g, rolling_mean(cols["self"], window), label="self")
    plt.plot(g, rolling_mean(cols["full"], window), label="board full")
    plt.ylim(0, 1)
    plt.title(f"Game end reasons (rate@{window})"); plt.xlabel("game"); plt.ylabel("rate"); plt.legend()
    savefig_named(fig, "end_reasons.png")
    return saved

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("log", nargs="?", default=str(DEFAULT_LOG))
    p.add_argument("--window", type=int, default=20)
    args = p.parse_args(argv)

    log_path = Path(args.log)
    if not log_path.exists():
        raise FileNotFoundError(f"Could not find {log_path}. Set AppConfig.game_log_path and play a game.")
    return plot_games(load_games(log_path), log_path.parent / "plots", args.window)

if __name__ == "__main__":
    main()
