import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest
import matplotlib.pyplot as plt

from Analysis import plotting
from Analysis.config import AnalysisConfig
from Analysis.range_analysis import assess
from Environment.config import EnvironmentConfig
from Hardware.config import HardwareConfig
from Logging.generate_logs import build_report_lines
from Main.ballistics import sample_trajectory
from Software.mission_profile import MissionProfile


@pytest.fixture
def scenario():
    mission = MissionProfile()
    specs = HardwareConfig().create_launcher_specs()
    env = EnvironmentConfig()
    assessment = assess(mission, specs, env)
    _, x, y = sample_trajectory(specs.muzzle_velocity_mps, mission.launch_angle_deg, env.g0, 90)
    yield assessment, mission, specs, env, x, y
    plt.close("all")


def test_chart_limits_cover_every_marker():
    cfg = AnalysisConfig()
    x_max, y_max = plotting.chart_limits(142_300.0, 48_532.0, 15_000.0, 12_133.0, cfg)
    assert x_max == pytest.approx(142_300.0 * 1.1)
    assert y_max == pytest.approx(12_133.0 * 1.5)


def test_chart_limits_minimums():
    cfg = AnalysisConfig()
    x_max, y_max = plotting.chart_limits(1_000.0, 2_000.0, 1_500.0, 100.0, cfg)
    assert x_max == 25_000.0
    assert y_max == 800.0


def test_animation_indices():
    idx = plotting.animation_indices(450, 225)
    assert len(idx) == 225
    assert idx[0] == 0
    assert idx[1] == 2
    assert idx[-1] == 448
    np.testing.assert_array_equal(plotting.animation_indices(3, 5), [0, 0, 1, 1, 2])
    with pytest.raises(ValueError):
        plotting.animation_indices(0, 5)


def test_legend_lines_content(scenario):
    assessment, mission, specs, env, _, _ = scenario
    lines = plotting.legend_lines(assessment, mission, specs, env)
    texts = [text for text, _, _ in lines]
    assert "Max range: 15 km" in texts
    assert "Distance: 142.3 km" in texts
    assert "Shortfall: 127.3 km" in texts
    assert "Target 9.5x the max range" in texts
    assert "R = 48.5 km (drag-free)" in texts
    assert all(isinstance(bold, bool) for _, _, bold in lines)


def test_plot_range_chart_saves_file(scenario, tmp_path):
    assessment, mission, specs, env, x, y = scenario
    cfg = AnalysisConfig(width_px=640, height_px=360, dpi=50)
    path = tmp_path / "chart.png"
    fig = plotting.plot_range_chart(x, y, assessment, mission, specs, env, cfg, filename=str(path))
    assert path.exists() and path.stat().st_size > 0
    ax_chart = fig.axes[0]
    assert ax_chart.get_xlim()[1] == pytest.approx(assessment.distance_m * 1.1 / 1000.0)


def test_animation_frame_count_and_proof_card(scenario):
    assessment, mission, specs, env, x, y = scenario
    cfg = AnalysisConfig(fps=2, video_duration_s=3, proof_hold_s=1, width_px=320, height_px=180, dpi=40)
    lines = build_report_lines(assessment, mission, specs, env)
    fig, anim = plotting.animate_range_chart(x, y, assessment, mission, specs, env, cfg, proof_lines=lines)

    frames = list(anim.new_frame_seq())
    assert len(frames) == cfg.flight_frames + cfg.proof_frames

    update = anim._func
    artists = update(0)
    proof_ax = artists[-1]
    assert not proof_ax.get_visible()
    update(cfg.flight_frames - 1)
    assert artists[0].get_xdata()[-1] == pytest.approx(x[-1] / 1000.0)
    update(cfg.flight_frames)
    assert proof_ax.get_visible()


def test_animation_without_proof_lines_has_only_flight_frames(scenario):
    assessment, mission, specs, env, x, y = scenario
    cfg = AnalysisConfig(fps=2, video_duration_s=2, width_px=320, height_px=180, dpi=40)
    _, anim = plotting.animate_range_chart(x, y, assessment, mission, specs, env, cfg)
    assert len(list(anim.new_frame_seq())) == cfg.flight_frames


def test_save_animation_falls_back_to_gif(scenario, tmp_path, monkeypatch):
    assessment, mission, specs, env, x, y = scenario
    cfg = AnalysisConfig(fps=2, video_duration_s=1, proof_hold_s=0, width_px=160, height_px=90, dpi=20)
    _, anim = plotting.animate_range_chart(x, y, assessment, mission, specs, env, cfg)
    monkeypatch.setattr(plotting.animation.writers, "is_available", lambda name: False)
    written = plotting.save_animation(anim, str(tmp_path / "clip.mp4"), cfg.fps)
    assert written.endswith("clip.gif")
    assert (tmp_path / "clip.gif").exists()
