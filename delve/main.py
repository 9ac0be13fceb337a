import argparse
from pathlib import Path
from typing import List, Optional

from delve import config
from delve.engine import Engine
from delve.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="delve", description="Explore a generated dungeon.")
    parser.add_argument("--seed", type=int, default=None, help="map seed (random if omitted)")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING... (default: $DELVE_LOG_LEVEL or INFO)")
    parser.add_argument("--log-file", type=Path, default=None, help="also append log records to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    cfg = config.GameConfig(seed=args.seed).validate()
    engine = Engine(cfg)
    engine.run()


if __name__ == "__main__":
    main()
