"""
Range assessment: compares the launch-to-target distance with what the
launcher can cover.
"""

from __future__ import annotations

from dataclasses import dataclass

from Environment.config import EnvironmentConfig
from Environment.geodesy import coordinate_distance
from Hardware.launcher import LauncherSpecs
from Main.ballistics import solve_ballistics
from Software.mission_profile import MissionProfile

VERDICT_IMPOSSIBLE = "PHYSICALLY IMPOSSIBLE"
VERDICT_POSSIBLE = "THEORETICALLY POSSIBLE"


@dataclass(frozen=True)
class RangeAssessment:
    distance_m: float
    max_range_operational_m: float
    max_range_45deg_m: float
    theoretical_range_m: float
    flight_time_s: float
    max_height_m: float

    @property
    def range_deficit_m(self) -> float:
        return self.distance_m - self.max_range_operational_m

    @property
    def range_factor(self) -> float:
        return self.distance_m / self.max_range_operational_m

    @property
    def violation_pct(self) -> float:
        """Deficit as a percentage of the operational range."""
        return self.range_deficit_m / self.max_range_operational_m * 100.0

    @property
    def reachable(self) -> bool:
        return self.range_deficit_m <= 0.0

    @property
    def within_theoretical_range(self) -> bool:
        return self.distance_m <= self.theoretical_range_m

    @property
    def spec_discrepancy_factor(self) -> float:
        # Drag-free kinematics overshoot the published range; both are reported as-is.
        return self.theoretical_range_m / self.max_range_operational_m


def assess(mission: MissionProfile, specs: LauncherSpecs, env_config: EnvironmentConfig) -> RangeAssessment:
    distance = coordinate_distance(
        mission.launch_site.coordinate,
        mission.target.coordinate,
        radius=env_config.earth_radius_m,
    )
    solution = solve_ballistics(specs.muzzle_velocity_mps, mission.launch_angle_deg, env_config.g0)
    return RangeAssessment(
        distance_m=distance,
        max_range_operational_m=specs.max_range_operational_m,
        max_range_45deg_m=specs.max_range_45deg_m,
        theoretical_range_m=solution.range_m,
        flight_time_s=solution.flight_time_s,
        max_height_m=solution.max_height_m,
    )


def verdict(assessment: RangeAssessment) -> str:
    return VERDICT_POSSIBLE if assessment.reachable else VERDICT_IMPOSSIBLE
