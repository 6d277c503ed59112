"""
Launcher model: published characteristics of the rocket being assessed.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class LauncherSpecs:
    # Defaults describe the BM-21 Grad 122 mm rocket.
    name: str = "BM-21 Grad"
    caliber_mm: float = 122.0
    max_range_45deg_m: float = 20_000.0
    max_range_operational_m: float = 15_000.0
    rocket_mass_kg: float = 66.0
    warhead_mass_kg: float = 18.4
    rocket_length_m: float = 2.87
    muzzle_velocity_mps: float = 690.0

    def __post_init__(self):
        for field_name in (
            "caliber_mm",
            "max_range_45deg_m",
            "max_range_operational_m",
            "rocket_mass_kg",
            "warhead_mass_kg",
            "rocket_length_m",
            "muzzle_velocity_mps",
        ):
            value = getattr(self, field_name)
            if not np.isfinite(value) or value <= 0.0:
                raise ValueError(f"{field_name} must be positive and finite, got {value!r}")
        if self.warhead_mass_kg > self.rocket_mass_kg:
            raise ValueError(
                f"warhead_mass_kg ({self.warhead_mass_kg}) exceeds rocket_mass_kg ({self.rocket_mass_kg})"
            )

    @property
    def caliber_m(self) -> float:
        return self.caliber_mm / 1000.0

    def payload_fraction(self) -> float:
        """Warhead share of the total rocket mass."""
        return self.warhead_mass_kg / self.rocket_mass_kg
