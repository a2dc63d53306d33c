import random

import click

from ..core.errors import InvalidArgumentError
from ..core.notation import cup_from_notation
from ..simulation import SimulationConfig, ThrowSimulator
from .interface import configure_logging, display_simulation, display_throw


def _build_cup(notation, rng=None):
    try:
        return cup_from_notation(notation, rng=rng)
    except InvalidArgumentError as e:
        raise click.BadParameter(e.message, param_hint="NOTATION")


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def main(verbose):
    """dicecup - roll dice and simulate throws."""
    configure_logging(verbose)


@main.command()
@click.argument('notation')
@click.option('--keep-highest', '-H', type=int, help='Report the K highest rolls')
@click.option('--keep-lowest', '-L', type=int, help='Report the K lowest rolls')
@click.option('--seed', type=int, help='Seed for a reproducible throw')
def roll(notation, keep_highest, keep_lowest, seed):
    """Throw the dice described by NOTATION once, e.g. 4d6."""
    if keep_highest is not None and keep_lowest is not None:
        raise click.UsageError("Use only one of --keep-highest and --keep-lowest")

    rng = random.Random(seed) if seed is not None else None
    cup = _build_cup(notation, rng)
    if len(cup) == 0:
        raise click.BadParameter("No dice to throw", param_hint="NOTATION")

    with cup.produce_throw() as throw:
        kept, label = None, ""
        try:
            if keep_highest is not None:
                kept, label = throw.get_highest(keep_highest), f"Highest {keep_highest}"
            elif keep_lowest is not None:
                kept, label = throw.get_lowest(keep_lowest), f"Lowest {keep_lowest}"
        except InvalidArgumentError as e:
            hint = "--keep-highest" if keep_highest is not None else "--keep-lowest"
            raise click.BadParameter(e.message, param_hint=hint)

        display_throw(cup, throw, kept, label)


@main.command()
@click.argument('notation')
@click.option('--throws', '-n', type=int, default=10000, show_default=True, help='Number of throws to simulate')
@click.option('--workers', '-w', type=click.IntRange(min=1), default=1, show_default=True, help='Worker processes')
@click.option('--seed', type=int, help='Base seed for reproducible results')
def simulate(notation, throws, workers, seed):
    """Simulate many throws of NOTATION and summarize the totals."""
    cup = _build_cup(notation)
    config = SimulationConfig(num_throws=throws, num_workers=workers, seed=seed)
    try:
        result = ThrowSimulator().simulate(cup, config)
    except InvalidArgumentError as e:
        raise click.UsageError(str(e))

    display_simulation(cup, result)


if __name__ == "__main__":
    main()
