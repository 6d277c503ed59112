"""
Functions for generating and saving the range report and trajectory logs.
"""
from __future__ import annotations

from typing import List, Sequence

from Analysis.range_analysis import RangeAssessment, verdict
from Environment.config import EnvironmentConfig
from Hardware.launcher import LauncherSpecs
from Main.ballistics import required_muzzle_velocity
from Main.telemetry import Logger
from Software.mission_profile import MissionProfile

RULE = "=" * 64


def build_report_lines(
    assessment: RangeAssessment,
    mission: MissionProfile,
    specs: LauncherSpecs,
    env_config: EnvironmentConfig,
) -> List[str]:
    """Plain-text range report, one entry per line."""
    launch = mission.launch_site
    target = mission.target
    op_km = specs.max_range_operational_m / 1000.0
    dist_km = assessment.distance_m / 1000.0
    deficit_km = assessment.range_deficit_m / 1000.0
    result = verdict(assessment)
    if mission.launch_angle_deg < 90.0:
        v_required = required_muzzle_velocity(assessment.distance_m, mission.launch_angle_deg, env_config.g0)
        v_required_text = f"{v_required:.1f} m/s ({v_required / specs.muzzle_velocity_mps:.2f}x the rocket's {specs.muzzle_velocity_mps:.0f} m/s)"
    else:
        v_required_text = "n/a (vertical launch covers no distance)"

    lines = [
        f"ANALYSIS: {specs.name} from {launch.name} to {target.name}",
        RULE,
        "",
        f"{specs.name.upper()} SPECIFICATIONS:",
        f"* Rocket Caliber: {specs.caliber_mm:.0f} mm",
        f"* Total Rocket Mass: {specs.rocket_mass_kg:.1f} kg",
        f"* Warhead Mass: {specs.warhead_mass_kg:.1f} kg",
        f"* Warhead Share of Mass: {specs.payload_fraction() * 100.0:.1f}%",
        f"* Rocket Length: {specs.rocket_length_m:.2f} m",
        f"* Maximum Range (45 deg optimal): {specs.max_range_45deg_m / 1000.0:.0f} km",
        f"* Operational Range (typical): {op_km:.0f} km",
        "",
        "GEOGRAPHIC DISTANCE:",
        f"* Launch Coordinates: {launch.coordinate} ({launch.description or launch.name})",
        f"* Target Coordinates: {target.coordinate} ({target.description or target.name})",
        f"* Earth Radius: {env_config.earth_radius_m / 1000.0:,.0f} km",
        f"* Haversine Distance: {dist_km:.3f} km",
        "",
        "BALLISTIC CALCULATIONS (NO DRAG, FLAT GROUND):",
        "* Range Formula: R = (v0^2 x sin(2*theta)) / g",
        f"* Initial Velocity: {specs.muzzle_velocity_mps:.1f} m/s",
        f"* Launch Angle: {mission.launch_angle_deg:.0f} degrees",
        f"* Gravity: {env_config.g0} m/s^2",
        f"* Calculated Range: {assessment.theoretical_range_m / 1000.0:.3f} km",
        f"* Flight Time: {assessment.flight_time_s:.1f} seconds",
        f"* Maximum Height: {assessment.max_height_m:.0f} meters",
        f"* Calculated / Operational Range: {assessment.spec_discrepancy_factor:.1f}x",
        "",
        "RANGE ANALYSIS:",
        f"* Required Distance: {dist_km:.1f} km",
        f"* Maximum {specs.name} Range: {op_km:.0f} km",
        f"* Range Deficit: {deficit_km:.1f} km",
        f"* Velocity Needed at {mission.launch_angle_deg:.0f} deg: {v_required_text}",
        f"* Range Factor: {assessment.range_factor:.1f}x the maximum range",
        f"* Beyond Capability: {assessment.violation_pct:.0f}%",
        f"* Within Calculated Range: {'yes' if assessment.within_theoretical_range else 'no'}",
        "",
        "FINAL VERDICT:",
        f"CLAIM STATUS: {result}",
    ]
    if assessment.reachable:
        lines.append("CONCLUSION: TARGET WITHIN OPERATIONAL RANGE")
    else:
        lines.append(f"CONCLUSION: TARGET {deficit_km:.1f} km BEYOND OPERATIONAL RANGE")
    return lines


def save_report(lines: Sequence[str], filename: str):
    with open(filename, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))
        f.write("\n")
    print(f"Saved range report to {filename}")


def save_log_to_txt(log: Logger, filename: str):
    """Write trajectory samples to a text (CSV-style) file for analysis."""
    with open(filename, "w") as f:
        f.write("# t_s,x_m,y_m,vx_mps,vy_mps,speed_mps\n")
        for i in range(len(log.t)):
            f.write(
                f"{log.t[i]:.3f},{log.x[i]:.3f},{log.y[i]:.3f},{log.vx[i]:.3f},{log.vy[i]:.3f},{log.speed[i]:.3f}\n"
            )
        f.write(f"# cutoff_reason={log.cutoff_reason}\n")
    print(f"Saved trajectory log to {filename}")
