"""
Configuration for charts, animation and the angle search.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class AnalysisConfig:
    # --- Animation ---
    fps: int = 15
    video_duration_s: int = 15
    proof_hold_s: int = 3  # summary card shown after the flight
    output_video: str = "bm21_range_analysis.mp4"

    # --- Figure ---
    width_px: int = 1920
    height_px: int = 1080
    dpi: int = 100
    chart_filename: str = "bm21_range_chart.png"

    # --- Chart limits ---
    min_chart_x_m: float = 25_000.0
    min_chart_y_m: float = 800.0
    chart_x_margin: float = 1.1
    chart_y_margin: float = 1.5

    # --- Angle search ---
    run_angle_search: bool = True
    angle_search_bounds_deg: Tuple[float, float] = (5.0, 85.0)

    def __post_init__(self):
        if self.fps <= 0 or self.video_duration_s <= 0 or self.proof_hold_s < 0:
            raise ValueError(
                f"fps and video_duration_s must be positive and proof_hold_s non-negative, "
                f"got fps={self.fps}, video_duration_s={self.video_duration_s}, proof_hold_s={self.proof_hold_s}"
            )

    @property
    def flight_frames(self) -> int:
        return self.fps * self.video_duration_s

    @property
    def proof_frames(self) -> int:
        return self.fps * self.proof_hold_s

    @property
    def figsize(self) -> Tuple[float, float]:
        return self.width_px / self.dpi, self.height_px / self.dpi
