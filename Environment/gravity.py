"""
Earth model for short-range ballistics: flat-ground constant gravity plus a
spherical surface for site-to-site distances.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from Environment.geodesy import Coordinate, coordinate_distance

G0 = 9.81  # [m/s^2]


@dataclass(frozen=True)
class EarthModel:
    radius: float
    g0: float = G0

    def __post_init__(self):
        if not np.isfinite(self.radius) or self.radius <= 0.0:
            raise ValueError(f"radius must be positive and finite, got {self.radius!r}")
        if not np.isfinite(self.g0) or self.g0 <= 0.0:
            raise ValueError(f"g0 must be positive and finite, got {self.g0!r}")

    def gravity_accel(self) -> np.ndarray:
        """Return the constant gravitational acceleration in the launch plane.

        Returns
        -------
        np.ndarray
            [a_x, a_y] in m/s^2, with y pointing up.
        """
        return np.array([0.0, -self.g0], dtype=float)

    def surface_distance(self, a: Coordinate, b: Coordinate) -> float:
        """Great-circle distance between two coordinates on this sphere [m]."""
        return coordinate_distance(a, b, radius=self.radius)
