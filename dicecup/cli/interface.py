import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ..core.cup import DiceCup
from ..core.throw import Throw
from ..simulation import SimulationResult


console = Console()


def configure_logging(verbose: bool = False):
    """Send library log records through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def display_throw(cup: DiceCup, throw: Throw, kept: Optional[List[int]] = None, kept_label: str = ""):
    """Display the rolls of a throw and its statistics."""
    table = Table(title=f"Throw of {cup.notation}")
    table.add_column("Die", style="cyan")
    table.add_column("Roll", style="magenta", justify="right")

    for die, roll in zip(cup, throw):
        table.add_row(str(die), str(roll))

    console.print(table)

    panel_content = (
        f"[green]Total:[/green] {throw.total}\n"
        f"[yellow]Highest:[/yellow] {throw.highest}\n"
        f"[red]Lowest:[/red] {throw.lowest}"
    )
    if kept is not None:
        panel_content += f"\n[cyan]{kept_label}:[/cyan] {kept} (sum {sum(kept)})"

    console.print(Panel(panel_content, title="Statistics", border_style="blue"))


def display_simulation(cup: DiceCup, result: SimulationResult, top: int = 5):
    """Display simulation results."""
    stats = Table(title=f"Simulation of {cup.notation} ({result.num_throws} throws)")
    stats.add_column("Statistic", style="cyan")
    stats.add_column("Value", style="magenta", justify="right")

    stats.add_row("Mean total", f"{result.mean:.2f}")
    stats.add_row("Std deviation", f"{result.std_deviation:.2f}")
    stats.add_row("Minimum", str(result.minimum))
    stats.add_row("Maximum", str(result.maximum))
    for p, value in result.percentiles.items():
        stats.add_row(f"{p}th percentile", f"{value:.1f}")

    console.print(stats)

    common = Table(title="Most Common Totals")
    common.add_column("Total", style="cyan", justify="right")
    common.add_column("Frequency", style="green", justify="right")
    for total, frequency in result.most_common(top):
        common.add_row(str(total), f"{frequency:.1%}")

    console.print(common)
