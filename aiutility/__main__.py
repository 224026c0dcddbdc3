"""Run the sample survival agent from the command line.

    python -m aiutility --ticks 200 --seed demo -v
"""

import argparse
import logging

from . import config
from .simulation import Simulation
from .util import rng


def _probability(value: str) -> float:
    chance = float(value)
    if not 0.0 <= chance <= 1.0:
        raise argparse.ArgumentTypeError(f"{value} is not in [0, 1]")
    return chance


def _non_negative_int(value: str) -> int:
    ticks = int(value)
    if ticks < 0:
        raise argparse.ArgumentTypeError(f"{value} is negative")
    return ticks


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aiutility",
        description="Simulate an agent whose actions are chosen by utility scoring",
    )
    parser.add_argument(
        "--ticks",
        type=_non_negative_int,
        default=config.DEFAULT_TICKS,
        help="Number of ticks to simulate",
    )
    parser.add_argument(
        "--seed",
        type=str,
        default=config.RANDOM_SEED,
        help="Master seed for the random injury stream",
    )
    parser.add_argument(
        "--hunger-rate", type=float, default=config.HUNGER_RATE, help="Hunger per tick"
    )
    parser.add_argument(
        "--rest-rate", type=float, default=config.REST_RATE, help="Rest lost per tick"
    )
    parser.add_argument(
        "--injury-chance",
        type=_probability,
        default=config.INJURY_CHANCE,
        help="Chance per tick of a random injury",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log scoring details"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=config.LOG_FORMAT,
    )
    rng.init(args.seed)

    simulation = Simulation(
        hunger_rate=args.hunger_rate,
        rest_rate=args.rest_rate,
        injury_chance=args.injury_chance,
    )
    counts = simulation.run(args.ticks)

    print(f"Simulated {args.ticks} ticks")
    for name, count in counts.most_common():
        print(f"  {name}: {count}")
    print(f"Chosen utility: {simulation.history.get_percentiles_string()}")
    print(f"Final state: {simulation.agent.describe()}")


if __name__ == "__main__":
    main()
