"""Monte Carlo simulation of repeated throws of a dice cup."""
import logging
import multiprocessing
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from ..core.cup import DiceCup
from ..core.errors import InvalidArgumentError


logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a batch of simulated throws."""
    num_throws: int = 10000
    num_workers: Optional[int] = None
    seed: Optional[int] = None


@dataclass
class SimulationResult:
    """Results from a Monte Carlo simulation of throw totals."""
    num_throws: int
    mean: float
    std_deviation: float
    minimum: int
    maximum: int
    percentiles: Dict[int, float]
    totals: np.ndarray
    distribution: Dict[int, float]  # total -> relative frequency

    def most_common(self, n: int = 5) -> List[tuple]:
        """The ``n`` most frequent totals as (total, frequency) pairs."""
        return sorted(self.distribution.items(), key=lambda x: (-x[1], x[0]))[:n]

    def __str__(self) -> str:
        return (
            f"Simulation Results ({self.num_throws} throws):\n"
            f"  Mean Total: {self.mean:.2f}\n"
            f"  Std Deviation: {self.std_deviation:.2f}\n"
            f"  Range: {self.minimum}-{self.maximum}\n"
            f"  25th Percentile: {self.percentiles[25]:.1f}\n"
            f"  50th Percentile: {self.percentiles[50]:.1f}\n"
            f"  75th Percentile: {self.percentiles[75]:.1f}"
        )


class ThrowSimulator:
    """Throws a cup many times and summarizes the totals."""

    def __init__(self, num_workers: Optional[int] = None):
        if num_workers is not None and num_workers < 1:
            raise InvalidArgumentError("num_workers", f"Need at least one worker, got {num_workers}")
        self.num_workers = num_workers or multiprocessing.cpu_count()

    def simulate(self, cup: DiceCup, config: Optional[SimulationConfig] = None) -> SimulationResult:
        """Simulate ``config.num_throws`` throws of ``cup``.

        Args:
            cup: Dice cup to throw. Only its side counts are used, the dice
                themselves are not rolled.
            config: Number of throws, workers and base seed
        """
        config = config or SimulationConfig()
        if len(cup) == 0:
            raise InvalidArgumentError("cup", "Cannot simulate throws of an empty cup")
        if config.num_throws < 1:
            raise InvalidArgumentError("num_throws", "Need at least one throw to simulate")

        num_workers = config.num_workers if config.num_workers is not None else self.num_workers
        if num_workers < 1:
            raise InvalidArgumentError("num_workers", f"Need at least one worker, got {num_workers}")

        sides = [die.sides for die in cup]
        num_workers = min(num_workers, config.num_throws)
        logger.debug("Simulating %d throws of %s on %d workers", config.num_throws, cup.notation, num_workers)

        if num_workers == 1:
            _, totals = self._run_simulations(sides, config.num_throws, config.seed, 0)
        else:
            totals = self._run_parallel(sides, config, num_workers)

        return self._aggregate_results(totals)

    def _run_parallel(self, sides: List[int], config: SimulationConfig, num_workers: int) -> np.ndarray:
        throws_per_worker = config.num_throws // num_workers
        remaining = config.num_throws % num_workers

        futures = []
        with ProcessPoolExecutor(max_workers=num_workers) as executor:
            for i in range(num_workers):
                n_throws = throws_per_worker + (1 if i < remaining else 0)
                if n_throws > 0:
                    futures.append(executor.submit(
                        self._run_simulations,
                        sides,
                        n_throws,
                        config.seed,
                        i  # Worker ID for different random seeds
                    ))

            # Order by worker so a seeded run is reproducible
            batches = {}
            for future in as_completed(futures):
                worker_id, totals = future.result()
                batches[worker_id] = totals

        return np.concatenate([batches[i] for i in sorted(batches)])

    @staticmethod
    def _run_simulations(sides: List[int], num_throws: int, seed: Optional[int], worker_id: int):
        """Run simulations in a single process."""
        seed_seq = np.random.SeedSequence(seed).spawn(worker_id + 1)[worker_id]
        rng = np.random.default_rng(seed_seq)
        # One column per die; the upper bound is exclusive
        rolls = rng.integers(1, np.array(sides) + 1, size=(num_throws, len(sides)))
        totals = rolls.sum(axis=1)
        logger.debug("Worker %d finished %d throws", worker_id, num_throws)
        return worker_id, totals

    @staticmethod
    def _aggregate_results(totals: np.ndarray) -> SimulationResult:
        values, counts = np.unique(totals, return_counts=True)
        distribution = {int(v): float(c) / len(totals) for v, c in zip(values, counts)}
        return SimulationResult(
            num_throws=len(totals),
            mean=float(np.mean(totals)),
            std_deviation=float(np.std(totals)),
            minimum=int(totals.min()),
            maximum=int(totals.max()),
            percentiles={p: float(np.percentile(totals, p)) for p in (25, 50, 75)},
            totals=totals,
            distribution=distribution,
        )
