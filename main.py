"""
Entry point to run the BM-21 range analysis end to end.

This builds the environment/launcher/mission stack, computes the launch-to-target
great-circle distance and the drag-free trajectory, cross-checks the closed-form
numbers against a numerical integration, and writes a report, a trajectory log
and charts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from Environment.config import EnvironmentConfig

from Hardware.config import HardwareConfig
from Hardware.launcher import LauncherSpecs

from Software.mission_profile import MissionProfile

from Main.ballistics import sample_trajectory
from Main.config import SimulationConfig
from Main.simulation import Simulation
from Main.telemetry import Logger

from Analysis.config import AnalysisConfig
from Analysis.optimization import find_max_range_angle
from Analysis.plotting import animate_range_chart, plot_range_chart, save_animation
from Analysis.range_analysis import RangeAssessment, assess

from Logging.config import LoggingConfig
from Logging.generate_logs import build_report_lines, save_log_to_txt, save_report


@dataclass
class AnalysisRun:
    assessment: RangeAssessment
    log: Logger
    trajectory: Tuple[np.ndarray, np.ndarray, np.ndarray]
    report_lines: List[str]
    best_angle: Optional[Tuple[float, float]] = None


def main_orchestrator(
    env_config: Optional[EnvironmentConfig] = None,
    hw_config: Optional[HardwareConfig] = None,
    mission: Optional[MissionProfile] = None,
    sim_config: Optional[SimulationConfig] = None,
    log_config: Optional[LoggingConfig] = None,
    analysis_config: Optional[AnalysisConfig] = None,
):
    # 1. Instantiate all config objects if not provided
    env_config = env_config or EnvironmentConfig()
    hw_config = hw_config or HardwareConfig()
    mission = mission or MissionProfile()
    sim_config = sim_config or SimulationConfig()
    log_config = log_config or LoggingConfig()
    analysis_config = analysis_config or AnalysisConfig()

    # 2. Instantiate core components using factory methods from configs
    earth = env_config.create_earth_model()
    specs = hw_config.create_launcher_specs()
    sim = Simulation(earth=earth, sim_config=sim_config, integrator=sim_config.create_integrator())

    return sim, specs, mission, env_config, log_config, analysis_config


def run_analysis(
    sim: Simulation,
    specs: LauncherSpecs,
    mission: MissionProfile,
    env_config: EnvironmentConfig,
    analysis_config: AnalysisConfig,
) -> AnalysisRun:
    """Runs the assessment, the numerical flight and, if enabled, the angle search."""
    assessment = assess(mission, specs, env_config)
    log = sim.run(specs.muzzle_velocity_mps, mission.launch_angle_deg)
    trajectory = sample_trajectory(
        specs.muzzle_velocity_mps,
        mission.launch_angle_deg,
        env_config.g0,
        sim.sim_config.trajectory_resolution,
    )
    report_lines = build_report_lines(assessment, mission, specs, env_config)

    best_angle = None
    if analysis_config.run_angle_search:
        best_angle = find_max_range_angle(
            lambda: Simulation(earth=sim.earth, sim_config=sim.sim_config, integrator=sim.integrator),
            specs.muzzle_velocity_mps,
            bounds=analysis_config.angle_search_bounds_deg,
        )

    return AnalysisRun(
        assessment=assessment,
        log=log,
        trajectory=trajectory,
        report_lines=report_lines,
        best_angle=best_angle,
    )


def print_summary(run: AnalysisRun):
    """Prints the report plus the numerical cross-check."""
    for line in run.report_lines:
        print(line)

    log = run.log
    print("\n=== Numerical cross-check ===")
    print(f"Cutoff reason: {log.cutoff_reason}")
    print(f"Steps: {len(log)}")
    if log.impact_range is not None:
        err = log.impact_range - run.assessment.theoretical_range_m
        print(f"Impact range    : {log.impact_range / 1000.0:.3f} km (closed form diff {err:+.3f} m)")
        print(f"Impact time     : {log.impact_time:.2f} s")
    print(f"Max height      : {log.max_height:.0f} m")
    if run.best_angle is not None:
        angle, rng = run.best_angle
        print(f"Best elevation  : {angle:.2f} deg -> {rng / 1000.0:.3f} km")


def main():
    sim, specs, mission, env_config, log_config, analysis_config = main_orchestrator()
    run = run_analysis(sim, specs, mission, env_config, analysis_config)
    print_summary(run)

    save_report(run.report_lines, log_config.report_filename)
    save_log_to_txt(run.log, log_config.log_filename)

    _, x, y = run.trajectory
    if log_config.plot_chart:
        plot_range_chart(
            x, y, run.assessment, mission, specs, env_config, analysis_config,
            filename=analysis_config.chart_filename,
            show=log_config.show_plots,
        )
    if log_config.animate_chart:
        _, anim = animate_range_chart(
            x, y, run.assessment, mission, specs, env_config, analysis_config,
            proof_lines=run.report_lines,
        )
        save_animation(anim, analysis_config.output_video, analysis_config.fps)


if __name__ == "__main__":
    main()
