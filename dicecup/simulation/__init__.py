"""Simulation module for dicecup."""
from .throw_simulator import SimulationConfig, SimulationResult, ThrowSimulator

__all__ = [
    "SimulationConfig",
    "SimulationResult",
    "ThrowSimulator",
]
