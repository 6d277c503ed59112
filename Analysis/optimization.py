"""
Launch-angle search over the numerical trajectory.

Uses scipy.optimize.minimize_scalar (bounded) on the simulated impact range,
so the answer comes from the integrator rather than the closed-form formula.
"""

from __future__ import annotations

from typing import Callable, Tuple

from scipy.optimize import minimize_scalar

from Main.simulation import Simulation


def simulated_range(sim: Simulation, v0: float, angle_deg: float) -> float:
    log = sim.run(v0, angle_deg)
    if log.impact_range is None:
        raise RuntimeError(
            f"no ground impact within {sim.sim_config.max_duration_s} s "
            f"(v0={v0}, angle={angle_deg}); increase max_duration_s"
        )
    return log.impact_range


def find_max_range_angle(
    sim_factory: Callable[[], Simulation],
    v0: float,
    bounds: Tuple[float, float] = (5.0, 85.0),
    xatol: float = 1e-3,
) -> Tuple[float, float]:
    """
    Find the launch elevation that maximises simulated range.

    Parameters
    ----------
    sim_factory : callable
        Returns a fresh Simulation for each evaluation.
    v0 : float
        Launch speed [m/s].
    bounds : (float, float)
        Elevation search interval [deg], inside (0, 90].

    Returns
    -------
    (angle_deg, range_m)
    """
    lo, hi = bounds
    if not 0.0 < lo < hi <= 90.0:
        raise ValueError(f"bounds must satisfy 0 < lo < hi <= 90, got {bounds}")

    def objective(angle_deg: float) -> float:
        return -simulated_range(sim_factory(), v0, float(angle_deg))

    result = minimize_scalar(objective, bounds=(lo, hi), method="bounded", options={"xatol": xatol})
    if not result.success:
        raise RuntimeError(f"angle search did not converge: {result.message}")
    return float(result.x), float(-result.fun)
