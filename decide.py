"""Run a single agent hook against a JSON game snapshot."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Dict, List, Optional

from agent_logging import create_logger
from agents import load_agent
from config import PolicyConfig
from game_info import GameInfo


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Five-card-draw agent decision tool")
    parser.add_argument("--snapshot", type=Path, required=True, help="JSON GameInfo snapshot")
    parser.add_argument("--name", required=True, help="Seat name the agent plays")
    parser.add_argument("--hook", choices=["bet", "draw"], default="bet", help="Hook to run")
    parser.add_argument("--agent", default="draw_poker", help="Registry key or dotted path")
    parser.add_argument("--game-id", default="local", help="Game identifier for traces")
    parser.add_argument("--config", type=Path, help="Optional JSON policy config", default=None)
    parser.add_argument(
        "--log-mode",
        choices=["null", "stdout", "jsonl", "parquet"],
        help="Where to stream agent traces",
        default="null",
    )
    parser.add_argument(
        "--log-path",
        type=Path,
        help="Destination file for JSONL or Parquet traces",
        default=None,
    )
    parser.add_argument("--log-level", choices=["debug", "info"], default="debug")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> Dict:
    config = PolicyConfig.load(args.config)
    snapshot = GameInfo.from_dict(json.loads(args.snapshot.read_text()))
    logger = create_logger(
        args.log_mode,
        destination=args.log_path,
        game_id=args.game_id,
        player_name=args.name,
        level=args.log_level,
    )
    agent = load_agent(args.agent, args.game_id, args.name, config=config, logger=logger)
    try:
        agent.start(snapshot)
        if args.hook == "bet":
            decision = agent.bet(snapshot)
        else:
            decision = agent.draw(snapshot)
    finally:
        logger.close()
    return {"hook": args.hook, "phase": snapshot.phase, "decision": decision, "agent": agent.test()}


def main(argv: Optional[List[str]] = None) -> None:
    result = run(_parse_args(argv))
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
