"""
Configuration for the launcher hardware (rocket dimensions, masses, range).
"""

from dataclasses import dataclass

from Hardware.launcher import LauncherSpecs


@dataclass
class HardwareConfig:
    # --- BM-21 Grad, 122 mm unguided rocket ---
    name: str = "BM-21 Grad"
    caliber_mm: float = 122.0

    # Range: 20 km is the quoted figure at the optimal 45 deg elevation,
    # 15 km is the typical operational maximum.
    max_range_45deg_m: float = 20_000.0
    max_range_operational_m: float = 15_000.0

    # Mass / dimensions
    rocket_mass_kg: float = 66.0
    warhead_mass_kg: float = 18.4  # HE-FRAG
    rocket_length_m: float = 2.87

    # Burnout velocity used for the drag-free kinematics.
    muzzle_velocity_mps: float = 690.0

    def create_launcher_specs(self) -> LauncherSpecs:
        return LauncherSpecs(
            name=self.name,
            caliber_mm=self.caliber_mm,
            max_range_45deg_m=self.max_range_45deg_m,
            max_range_operational_m=self.max_range_operational_m,
            rocket_mass_kg=self.rocket_mass_kg,
            warhead_mass_kg=self.warhead_mass_kg,
            rocket_length_m=self.rocket_length_m,
            muzzle_velocity_mps=self.muzzle_velocity_mps,
        )
