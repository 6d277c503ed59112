"""
Closed-form drag-free projectile kinematics over flat ground.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


def _validate(v0: float, angle_deg: float, g: float) -> None:
    if not np.isfinite(v0) or v0 <= 0.0:
        raise ValueError(f"v0 must be positive and finite, got {v0!r}")
    if not np.isfinite(g) or g <= 0.0:
        raise ValueError(f"g must be positive and finite, got {g!r}")
    if not np.isfinite(angle_deg) or not 0.0 < angle_deg <= 90.0:
        raise ValueError(f"angle_deg must be within (0, 90], got {angle_deg!r}")


def flight_time(v0: float, angle_deg: float, g: float) -> float:
    """T = 2 v0 sin(theta) / g"""
    _validate(v0, angle_deg, g)
    theta = np.deg2rad(angle_deg)
    return float(2.0 * v0 * np.sin(theta) / g)


def projectile_range(v0: float, angle_deg: float, g: float) -> float:
    """R = v0^2 sin(2 theta) / g"""
    _validate(v0, angle_deg, g)
    if angle_deg == 90.0:
        # sin(pi) evaluates to ~1e-16, not zero
        return 0.0
    theta = np.deg2rad(angle_deg)
    return float(v0**2 * np.sin(2.0 * theta) / g)


def max_height(v0: float, angle_deg: float, g: float) -> float:
    """H = v0^2 sin^2(theta) / (2 g)"""
    _validate(v0, angle_deg, g)
    theta = np.deg2rad(angle_deg)
    return float(v0**2 * np.sin(theta) ** 2 / (2.0 * g))


def position_at(t: float, v0: float, angle_deg: float, g: float) -> Tuple[float, float]:
    """Downrange distance and height at time t; height is clamped at ground level."""
    _validate(v0, angle_deg, g)
    if not np.isfinite(t) or t < 0.0:
        raise ValueError(f"t must be non-negative and finite, got {t!r}")
    theta = np.deg2rad(angle_deg)
    x = v0 * np.cos(theta) * t
    y = v0 * np.sin(theta) * t - 0.5 * g * t**2
    return float(x), float(max(y, 0.0))


def sample_trajectory(v0: float, angle_deg: float, g: float, n_points: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Evenly sample the trajectory over the full flight.

    Returns
    -------
    t, x, y : np.ndarray
        Time [s], downrange distance [m] and height [m], each of length n_points.
    """
    if n_points < 2:
        raise ValueError(f"n_points must be at least 2, got {n_points}")
    t_flight = flight_time(v0, angle_deg, g)
    theta = np.deg2rad(angle_deg)
    t = np.linspace(0.0, t_flight, int(n_points))
    x = v0 * np.cos(theta) * t
    y = np.maximum(v0 * np.sin(theta) * t - 0.5 * g * t**2, 0.0)
    return t, x, y


def required_muzzle_velocity(distance: float, angle_deg: float, g: float) -> float:
    """Velocity needed to land exactly at `distance` when fired at `angle_deg`."""
    if not np.isfinite(distance) or distance < 0.0:
        raise ValueError(f"distance must be non-negative and finite, got {distance!r}")
    _validate(1.0, angle_deg, g)
    sin_2theta = np.sin(2.0 * np.deg2rad(angle_deg))
    if sin_2theta <= 1e-12:
        if distance == 0.0:
            return 0.0
        raise ValueError(f"a {angle_deg} deg shot cannot cover any horizontal distance")
    return float(np.sqrt(distance * g / sin_2theta))


@dataclass(frozen=True)
class BallisticSolution:
    v0: float
    angle_deg: float
    g: float
    flight_time_s: float
    range_m: float
    max_height_m: float


def solve_ballistics(v0: float, angle_deg: float, g: float) -> BallisticSolution:
    return BallisticSolution(
        v0=float(v0),
        angle_deg=float(angle_deg),
        g=float(g),
        flight_time_s=flight_time(v0, angle_deg, g),
        range_m=projectile_range(v0, angle_deg, g),
        max_height_m=max_height(v0, angle_deg, g),
    )
