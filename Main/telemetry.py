"""
Minimal in-memory logger for trajectories.
"""

from typing import Optional

import numpy as np

from .state import State


class Logger:
    """
    Minimal in-memory logger for trajectories.
    """

    def __init__(self):
        self.t = []
        self.x = []
        self.y = []
        self.vx = []
        self.vy = []
        self.speed = []
        self.cutoff_reason = ""
        self.impact_time: Optional[float] = None
        self.impact_range: Optional[float] = None

    def record(self, t: float, state: State):
        self.t.append(float(t))
        self.x.append(float(state.pos[0]))
        self.y.append(float(state.pos[1]))
        self.vx.append(float(state.vel[0]))
        self.vy.append(float(state.vel[1]))
        self.speed.append(float(np.linalg.norm(state.vel)))

    def __len__(self) -> int:
        return len(self.t)

    @property
    def max_height(self) -> float:
        return max(self.y) if self.y else 0.0
