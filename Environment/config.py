"""
Configuration for the environment model (Earth radius and gravity).
"""

from dataclasses import dataclass

from Environment.gravity import EarthModel


@dataclass
class EnvironmentConfig:
    # --- Central Body (Earth) ---
    earth_radius_m: float = 6_371_000.0  # mean radius, used by the haversine distance
    g0: float = 9.81                     # [m/s^2] flat-ground gravity for the trajectory

    def create_earth_model(self) -> EarthModel:
        return EarthModel(radius=self.earth_radius_m, g0=self.g0)
