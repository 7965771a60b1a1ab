"""CLI entry point: python -m pokermojo <command>

Commands:
    deal      deal a session of hand pairs and print them
    evaluate  classify one hand, or compare two
    audit     check every curated scenario for defects
    replay    re-verify a JSONL pair log
"""

import argparse
import logging
import os
import random
import sys
from pathlib import Path

import jsonschema
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pokermojo.config import SEED_ENV, SessionConfig, load_config, parse_mode
from pokermojo.core.cards import parse_cards
from pokermojo.core.pairlog import read_pairs
from pokermojo.engine.comparator import Outcome, compare
from pokermojo.engine.evaluator import EvaluatedHand, evaluate
from pokermojo.engine.generator import GenerationResult, Side
from pokermojo.engine.scenarios import SCENARIOS, audit_library
from pokermojo.session import SessionDealer

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _hand_text(hand: EvaluatedHand) -> str:
    return " ".join(c.display for c in hand.cards)


def _pairs_table(title: str, rows: list[tuple[int, GenerationResult]]) -> Table:
    table = Table(title=title)
    table.add_column("Round", justify="right")
    table.add_column("Hand A")
    table.add_column("Category A")
    table.add_column("Hand B")
    table.add_column("Category B")
    table.add_column("Winner", justify="center")
    table.add_column("Source")
    for round_num, result in rows:
        a_style = "bold green" if result.winner is Side.A else ""
        b_style = "bold green" if result.winner is Side.B else ""
        table.add_row(
            str(round_num),
            _hand_text(result.hand_a),
            f"[{a_style}]{result.hand_a.name}[/]" if a_style else result.hand_a.name,
            _hand_text(result.hand_b),
            f"[{b_style}]{result.hand_b.name}[/]" if b_style else result.hand_b.name,
            result.winner.value,
            result.scenario or result.source,
        )
    return table


def _cmd_deal(args) -> None:
    if args.config:
        if not args.config.exists():
            _fail(f"config file not found: {args.config}")
        config = load_config(args.config)
    else:
        env_seed = os.environ.get(SEED_ENV)
        seed = int(env_seed) if env_seed else random.SystemRandom().randrange(2**31)
        config = SessionConfig(name="cli", seed=seed)

    if args.mode:
        config.mode = parse_mode(args.mode)
    if args.rounds is not None:
        config.rounds = args.rounds
    if args.seed is not None:
        config.seed = args.seed
    if args.output:
        config.output_dir = args.output

    _setup_logging(config.log_level)

    result = SessionDealer(config).run()
    rows = [(r.round_num, r.result) for r in result.rounds]
    console.print(
        _pairs_table(
            f"{config.name}: {config.mode.value} mode, seed={config.seed}", rows
        )
    )
    if result.log_path:
        console.print(f"Pair log: {result.log_path}")


def _cmd_evaluate(args) -> None:
    _setup_logging("WARNING")
    try:
        hands = [evaluate(parse_cards(text)) for text in args.hands]
    except ValueError as e:
        _fail(str(e))

    for label, hand in zip("AB", hands):
        key = ", ".join(str(v) for v in hand.key)
        console.print(f"{label}: {_hand_text(hand)}  [bold]{hand.name}[/]  key=({key})")

    if len(hands) == 2:
        outcome = compare(hands[0], hands[1])
        verdict = {
            Outcome.FIRST_WINS: "A wins",
            Outcome.SECOND_WINS: "B wins",
            Outcome.TIE: "Tie",
        }[outcome]
        console.print(f"[bold]{verdict}[/]")


def _cmd_audit(args) -> None:
    _setup_logging("INFO")
    rng = random.Random(args.seed)
    defects = audit_library(rng, trials=args.trials)
    if defects:
        table = Table(title="Scenario defects")
        table.add_column("Scenario")
        table.add_column("Problem")
        for d in defects:
            table.add_row(d.scenario, d.reason)
        console.print(table)
        sys.exit(1)
    console.print(f"All {len(SCENARIOS)} scenarios OK ({args.trials} suit draws each)")


def _cmd_replay(args) -> None:
    _setup_logging("WARNING")
    if not args.log.exists():
        _fail(f"pair log not found: {args.log}")
    try:
        results = read_pairs(args.log)
    except (ValueError, jsonschema.ValidationError) as e:
        _fail(f"{args.log}: {e}")
    console.print(_pairs_table(str(args.log), list(enumerate(results, 1))))
    console.print(f"{len(results)} pairs verified")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="pokermojo",
        description="Which poker hand wins? Pair generator and evaluator",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    deal = sub.add_parser("deal", help="Deal a session of hand pairs")
    deal.add_argument("--config", type=Path, default=None, help="Session YAML config")
    deal.add_argument("--mode", choices=["standard", "hard"], default=None)
    deal.add_argument("--rounds", type=int, default=None)
    deal.add_argument("--seed", type=int, default=None)
    deal.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Directory for the JSONL pair log",
    )
    deal.set_defaults(func=_cmd_deal)

    ev = sub.add_parser("evaluate", help="Evaluate one hand or compare two")
    ev.add_argument("hands", nargs="+", help='Hands like "As Ks Qs Js 10s"')
    ev.set_defaults(func=_cmd_evaluate)

    audit = sub.add_parser("audit", help="Check the curated scenario library")
    audit.add_argument("--trials", type=int, default=200)
    audit.add_argument("--seed", type=int, default=0)
    audit.set_defaults(func=_cmd_audit)

    replay = sub.add_parser("replay", help="Re-verify a JSONL pair log")
    replay.add_argument("log", type=Path)
    replay.set_defaults(func=_cmd_replay)

    args = parser.parse_args(argv)
    if args.command == "evaluate" and len(args.hands) > 2:
        parser.error("evaluate takes one or two hands")

    try:
        args.func(args)
    except ValueError as e:
        _fail(str(e))


if __name__ == "__main__":
    main()
