"""
State container for planar projectile motion.
"""

from dataclasses import dataclass
import numpy as np


@dataclass
class State:
    pos: np.ndarray  # [x downrange, y up] in m
    vel: np.ndarray  # [vx, vy] in m/s

    def copy(self) -> "State":
        """
        Return a copy of the state suitable for use in integrators.

        pos and vel are copied as new numpy arrays.
        """
        return State(pos=self.pos.copy(), vel=self.vel.copy())
