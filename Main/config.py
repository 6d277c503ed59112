"""
Configuration for the numerical trajectory run and its sampling.
"""

from dataclasses import dataclass

from .integrators import Integrator, create_integrator


@dataclass
class SimulationConfig:
    # --- Simulation Config ---
    dt_s: float = 0.05
    max_duration_s: float = 600.0
    integrator: str = "rk4"

    # Closed-form samples used for plotting; two per animation frame at 15 fps x 15 s.
    trajectory_resolution: int = 450

    def create_integrator(self) -> Integrator:
        return create_integrator(self.integrator)
