import argparse

from config import AppConfig
from runners.run_snake import main as snake

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Grid snake. Arrows/WASD to steer, R to restart, Esc to quit.")
    p.add_argument("mode", nargs="?", choices=["wrap"], help="same as --wrap")
    p.add_argument("--wrap", action="store_true", help="leave one edge, come back on the opposite one")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig(wrap_around=bool(args.wrap or args.mode == "wrap"))

def main(argv=None):
    args = parse_args(argv)
    snake(build_config(args))

if __name__ == "__main__":
    main()
