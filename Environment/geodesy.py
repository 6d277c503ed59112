"""
Geodesy helpers: coordinates, named sites and great-circle distance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

R_EARTH = 6_371_000.0  # mean Earth radius [m]


def _check_lat_lon(lat_deg: float, lon_deg: float) -> None:
    if not np.isfinite(lat_deg):
        raise ValueError(f"latitude must be finite, got {lat_deg!r}")
    if not np.isfinite(lon_deg):
        raise ValueError(f"longitude must be finite, got {lon_deg!r}")
    if not -90.0 <= lat_deg <= 90.0:
        raise ValueError(f"latitude must be within [-90, 90] deg, got {lat_deg}")
    if not -180.0 <= lon_deg <= 180.0:
        raise ValueError(f"longitude must be within [-180, 180] deg, got {lon_deg}")


@dataclass(frozen=True)
class Coordinate:
    lat_deg: float
    lon_deg: float

    def __post_init__(self):
        _check_lat_lon(float(self.lat_deg), float(self.lon_deg))

    def as_radians(self) -> Tuple[float, float]:
        return float(np.deg2rad(self.lat_deg)), float(np.deg2rad(self.lon_deg))

    def __str__(self) -> str:
        ns = "N" if self.lat_deg >= 0 else "S"
        ew = "E" if self.lon_deg >= 0 else "W"
        return f"{abs(self.lat_deg):.6f}{ns}, {abs(self.lon_deg):.6f}{ew}"


@dataclass(frozen=True)
class Site:
    name: str
    coordinate: Coordinate
    description: str = ""


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float, radius: float = R_EARTH) -> float:
    """Great-circle distance between two points on a sphere.

    Parameters
    ----------
    lat1, lon1 : float
        First point [deg].
    lat2, lon2 : float
        Second point [deg].
    radius : float
        Sphere radius [m]. Defaults to the mean Earth radius.

    Returns
    -------
    float
        Distance along the surface [m].
    """
    _check_lat_lon(lat1, lon1)
    _check_lat_lon(lat2, lon2)
    if not np.isfinite(radius) or radius <= 0.0:
        raise ValueError(f"radius must be positive and finite, got {radius!r}")

    phi1 = np.deg2rad(lat1)
    phi2 = np.deg2rad(lat2)
    d_phi = np.deg2rad(lat2 - lat1)
    d_lambda = np.deg2rad(lon2 - lon1)

    a = np.sin(d_phi / 2.0) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2.0) ** 2
    # Rounding can push a marginally past 1 for antipodal points.
    a = min(max(float(a), 0.0), 1.0)
    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    return float(radius * c)


def coordinate_distance(a: Coordinate, b: Coordinate, radius: float = R_EARTH) -> float:
    return haversine_distance(a.lat_deg, a.lon_deg, b.lat_deg, b.lon_deg, radius=radius)


def coordinate_deltas(a: Coordinate, b: Coordinate) -> Tuple[float, float]:
    """Signed (dlat, dlon) in degrees going from a to b."""
    return b.lat_deg - a.lat_deg, b.lon_deg - a.lon_deg
