"""
Functions for plotting and animating the range analysis.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import animation

from Analysis.config import AnalysisConfig
from Analysis.range_analysis import RangeAssessment
from Environment.config import EnvironmentConfig
from Environment.geodesy import coordinate_deltas
from Hardware.launcher import LauncherSpecs
from Software.mission_profile import MissionProfile

# (text, color, bold)
PanelLine = Tuple[str, str, bool]


def chart_limits(
    distance_m: float,
    theoretical_range_m: float,
    operational_range_m: float,
    max_height_m: float,
    analysis_config: AnalysisConfig,
) -> Tuple[float, float]:
    """
    Axis limits that keep every plotted marker on screen.

    Returns
    -------
    (x_max_m, y_max_m)
    """
    farthest = max(distance_m, theoretical_range_m, operational_range_m)
    x_max = max(farthest * analysis_config.chart_x_margin, analysis_config.min_chart_x_m)
    y_max = max(max_height_m * analysis_config.chart_y_margin, analysis_config.min_chart_y_m)
    return x_max, y_max


def legend_lines(
    assessment: RangeAssessment,
    mission: MissionProfile,
    specs: LauncherSpecs,
    env_config: EnvironmentConfig,
) -> List[PanelLine]:
    """Text for the side panel next to the chart."""
    launch = mission.launch_site.coordinate
    target = mission.target.coordinate
    dlat, dlon = coordinate_deltas(launch, target)
    dist_km = assessment.distance_m / 1000.0
    op_km = assessment.max_range_operational_m / 1000.0
    deficit_km = assessment.range_deficit_m / 1000.0
    v0 = specs.muzzle_velocity_mps

    return [
        (f"{specs.name.upper()} RANGE ANALYSIS", "black", True),
        (f"Max range: {op_km:.0f} km", "tab:blue", False),
        (f"Distance: {dist_km:.1f} km", "black", False),
        (f"Shortfall: {deficit_km:.1f} km", "tab:red", False),
        (f"Target {assessment.range_factor:.1f}x the max range", "tab:purple", True),
        (f"Beyond capability: {assessment.violation_pct:.0f}%", "tab:red", False),
        ("Haversine distance:", "tab:blue", True),
        ("d = 2R atan2(sqrt(a), sqrt(1-a))", "tab:blue", False),
        ("a = sin^2(dphi/2) + cos(phi1)cos(phi2)sin^2(dlambda/2)", "tab:blue", False),
        (f"phi1={launch.lat_deg:.4f}, lambda1={launch.lon_deg:.4f}", "tab:blue", False),
        (f"phi2={target.lat_deg:.7f}, lambda2={target.lon_deg:.7f}", "tab:blue", False),
        (f"dphi={dlat:.4f} deg, dlambda={dlon:.4f} deg, R={env_config.earth_radius_m / 1000.0:,.0f} km", "tab:blue", False),
        (f"d = {dist_km:.1f} km", "tab:blue", True),
        ("Projectile range:", "tab:blue", True),
        ("R = v0^2 sin(2 theta) / g", "tab:blue", False),
        (f"v0 = {v0:.0f} m/s, theta = {mission.launch_angle_deg:.0f} deg, g = {env_config.g0} m/s^2", "tab:blue", False),
        (f"R = {assessment.theoretical_range_m / 1000.0:.1f} km (drag-free)", "tab:blue", False),
        (f"Published max range: {op_km:.0f} km", "tab:blue", False),
        (f"Drag-free / published: {assessment.spec_discrepancy_factor:.1f}x", "tab:orange", False),
        ("Range check:", "tab:red", True),
        (f"{dist_km:.1f} km / {op_km:.0f} km = {assessment.range_factor:.1f}x", "tab:red", True),
    ]


def _draw_panel(ax, lines: Sequence[PanelLine], fontsize: float = 13.0):
    ax.set_axis_off()
    ax.set_facecolor((240 / 255, 240 / 255, 1.0))
    n = max(len(lines), 1)
    for idx, (text, color, bold) in enumerate(lines):
        ax.text(
            0.02,
            1.0 - (idx + 0.5) / n,
            text,
            transform=ax.transAxes,
            fontsize=fontsize,
            color=color,
            fontweight="bold" if bold else "normal",
            va="center",
            ha="left",
        )


def _setup_chart(fig):
    # Split roughly like a 1350 px chart beside a 570 px text panel.
    gs = fig.add_gridspec(1, 2, width_ratios=[1350, 570])
    ax_chart = fig.add_subplot(gs[0, 0])
    ax_panel = fig.add_subplot(gs[0, 1])
    return ax_chart, ax_panel


def _draw_static_elements(
    ax,
    x_km: np.ndarray,
    y_m: np.ndarray,
    assessment: RangeAssessment,
    mission: MissionProfile,
    specs: LauncherSpecs,
    x_max_m: float,
    y_max_m: float,
):
    ax.set_xlim(0.0, x_max_m / 1000.0)
    ax.set_ylim(0.0, y_max_m)
    ax.set_xlabel("Distance (km)")
    ax.set_ylabel("Height (m)")
    ax.set_title(f"{specs.name}: {mission.launch_site.description or mission.launch_site.name} to "
                 f"{mission.target.description or mission.target.name} range analysis",
                 color="tab:red", fontweight="bold")
    ax.grid(True, alpha=0.3)

    ax.plot(x_km, y_m, color="tab:blue", alpha=0.3, lw=2, label="Full trajectory (drag-free)")
    op_km = assessment.max_range_operational_m / 1000.0
    ax.plot([op_km, op_km], [0.0, 0.8 * y_max_m], color="tab:green", lw=3,
            label=f"{specs.name} max range ({op_km:.0f} km)")
    dist_km = assessment.distance_m / 1000.0
    ax.plot([dist_km, dist_km], [0.0, 0.8 * y_max_m], color="tab:red", lw=3,
            label=f"{mission.target.name} ({dist_km:.1f} km)")


def plot_range_chart(
    x_m: np.ndarray,
    y_m: np.ndarray,
    assessment: RangeAssessment,
    mission: MissionProfile,
    specs: LauncherSpecs,
    env_config: EnvironmentConfig,
    analysis_config: AnalysisConfig,
    filename: Optional[str] = None,
    show: bool = False,
):
    """Static chart: full trajectory, range markers and the summary panel."""
    x_max, y_max = chart_limits(
        assessment.distance_m,
        assessment.theoretical_range_m,
        assessment.max_range_operational_m,
        assessment.max_height_m,
        analysis_config,
    )
    fig = plt.figure(figsize=analysis_config.figsize, dpi=analysis_config.dpi)
    ax_chart, ax_panel = _setup_chart(fig)

    x_km = np.asarray(x_m, dtype=float) / 1000.0
    y = np.asarray(y_m, dtype=float)
    _draw_static_elements(ax_chart, x_km, y, assessment, mission, specs, x_max, y_max)
    ax_chart.scatter([x_km[-1]], [y[-1]], color="tab:red", s=60, zorder=5, label="Impact (drag-free)")
    ax_chart.legend(loc="upper right")
    _draw_panel(ax_panel, legend_lines(assessment, mission, specs, env_config))
    fig.tight_layout()

    if filename:
        fig.savefig(filename, dpi=analysis_config.dpi)
        print(f"Saved range chart to {filename}")
    if show:
        plt.show()
    return fig


def animation_indices(n_points: int, n_frames: int) -> np.ndarray:
    """Index into the sampled trajectory for each flight frame."""
    if n_points < 1 or n_frames < 1:
        raise ValueError(f"n_points and n_frames must be positive, got {n_points}, {n_frames}")
    idx = (np.arange(n_frames) * n_points) // n_frames
    return np.minimum(idx, n_points - 1)


def animate_range_chart(
    x_m: np.ndarray,
    y_m: np.ndarray,
    assessment: RangeAssessment,
    mission: MissionProfile,
    specs: LauncherSpecs,
    env_config: EnvironmentConfig,
    analysis_config: AnalysisConfig,
    proof_lines: Sequence[str] = (),
):
    """
    Animated chart: the rocket flies along its trajectory for the flight frames,
    then the summary card is held for the proof frames.
    """
    x_km = np.asarray(x_m, dtype=float) / 1000.0
    y = np.asarray(y_m, dtype=float)
    n_points = len(x_km)
    n_flight = analysis_config.flight_frames
    n_proof = analysis_config.proof_frames if proof_lines else 0
    frame_idx = animation_indices(n_points, n_flight)

    x_max, y_max = chart_limits(
        assessment.distance_m,
        assessment.theoretical_range_m,
        assessment.max_range_operational_m,
        assessment.max_height_m,
        analysis_config,
    )
    fig = plt.figure(figsize=analysis_config.figsize, dpi=analysis_config.dpi)
    ax_chart, ax_panel = _setup_chart(fig)
    _draw_static_elements(ax_chart, x_km, y, assessment, mission, specs, x_max, y_max)
    _draw_panel(ax_panel, legend_lines(assessment, mission, specs, env_config))

    active_line, = ax_chart.plot([], [], color="tab:blue", lw=4, label="Active trajectory")
    trail_line, = ax_chart.plot([], [], color="tab:red", alpha=0.6, lw=2)
    rocket, = ax_chart.plot([], [], "o", color="tab:red", markersize=10, label="Rocket position")
    ax_chart.legend(loc="upper right")

    # Full-figure card shown after the flight.
    ax_proof = fig.add_axes([0.0, 0.0, 1.0, 1.0])
    ax_proof.set_axis_off()
    ax_proof.set_visible(False)
    if proof_lines:
        _draw_proof_card(ax_proof, proof_lines, mission, specs)

    def update(frame):
        if frame >= n_flight:
            ax_proof.set_visible(True)
            return active_line, trail_line, rocket, ax_proof

        ax_proof.set_visible(False)
        progress = min(int((frame + 1) / n_flight * n_points), n_points)
        active_line.set_data(x_km[:progress], y[:progress])
        i = frame_idx[frame]
        rocket.set_data([x_km[i]], [y[i]])
        if frame > 5:
            trail = frame_idx[frame - 5 : frame + 1]
            trail_line.set_data(x_km[trail], y[trail])
        else:
            trail_line.set_data([], [])
        return active_line, trail_line, rocket, ax_proof

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=n_flight + n_proof,
        interval=1000.0 / analysis_config.fps,
        blit=False,
        repeat=False,
    )
    return fig, anim


def _draw_proof_card(ax, proof_lines: Sequence[str], mission: MissionProfile, specs: LauncherSpecs):
    ax.add_patch(plt.Rectangle((0.0, 0.0), 1.0, 1.0, transform=ax.transAxes, color="white", zorder=0))
    ax.add_patch(plt.Rectangle((0.0, 0.92), 1.0, 0.08, transform=ax.transAxes, color=(0.78, 0.0, 0.0), zorder=1))
    ax.text(0.02, 0.96, f"RANGE CHECK: {specs.name} from {mission.launch_site.name} to {mission.target.name}",
            transform=ax.transAxes, color="white", fontsize=22, fontweight="bold", va="center", zorder=2)
    ax.plot([0.5, 0.5], [0.05, 0.9], transform=ax.transAxes, color="0.6", lw=2, zorder=1)

    mid = len(proof_lines) // 2
    columns = (proof_lines[:mid], proof_lines[mid:])
    for col, lines in enumerate(columns):
        x0 = 0.02 + 0.5 * col
        for i, text in enumerate(lines):
            y_pos = 0.88 - i * 0.032
            if y_pos < 0.05:
                break
            color, size, weight = _proof_style(text)
            ax.text(x0, y_pos, text, transform=ax.transAxes, color=color, fontsize=size,
                    fontweight=weight, va="top", zorder=2)


def _proof_style(text: str) -> Tuple[str, float, str]:
    if "IMPOSSIBLE" in text:
        return "tab:red", 15.0, "bold"
    if "POSSIBLE" in text or "COMPLETE" in text:
        return "tab:green", 15.0, "bold"
    if text.isupper() and text.endswith(":"):
        return "tab:blue", 14.0, "bold"
    if text.startswith("="):
        return "0.4", 12.0, "normal"
    return "black", 13.0, "normal"


def save_animation(anim, filename: str, fps: int) -> str:
    """
    Write the animation to disk.

    Uses ffmpeg for MP4 when it is installed; otherwise falls back to an
    animated GIF through Pillow next to the requested path.

    Returns
    -------
    str
        The path actually written.
    """
    path = Path(filename)
    if animation.writers.is_available("ffmpeg"):
        writer = animation.FFMpegWriter(fps=fps)
    else:
        path = path.with_suffix(".gif")
        writer = animation.PillowWriter(fps=fps)
    anim.save(str(path), writer=writer)
    print(f"Saved animation to {path}")
    return str(path)
