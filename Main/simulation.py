"""
Simulation glue: launch state, integration loop and ground-impact detection.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from Environment.gravity import EarthModel
from .config import SimulationConfig
from .integrators import Integrator, RK4
from .state import State
from .telemetry import Logger


def launch_state(v0: float, angle_deg: float) -> State:
    """State at the muzzle: origin, velocity along the launch elevation."""
    if not np.isfinite(v0) or v0 <= 0.0:
        raise ValueError(f"v0 must be positive and finite, got {v0!r}")
    if not np.isfinite(angle_deg) or not 0.0 < angle_deg <= 90.0:
        raise ValueError(f"angle_deg must be within (0, 90], got {angle_deg!r}")
    theta = np.deg2rad(angle_deg)
    return State(
        pos=np.zeros(2, dtype=float),
        vel=np.array([v0 * np.cos(theta), v0 * np.sin(theta)], dtype=float),
    )


class Simulation:
    def __init__(
        self,
        earth: EarthModel,
        sim_config: SimulationConfig,
        integrator: Optional[Integrator] = None,
    ):
        self.earth = earth
        self.sim_config = sim_config
        self.integrator = integrator or RK4()
        self._accel = earth.gravity_accel()

    def _rhs(self, t: float, state: State):
        return state.vel.copy(), self._accel.copy()

    def run(self, v0: float, angle_deg: float, dt: Optional[float] = None, duration: Optional[float] = None) -> Logger:
        """
        Integrate the flight from launch until the rocket returns to the ground.

        Parameters
        ----------
        v0 : float
            Launch speed [m/s].
        angle_deg : float
            Launch elevation [deg].
        dt, duration : float, optional
            Step size and time budget [s]; default to the simulation config.

        Returns
        -------
        Logger
            Every integration step, ending on the interpolated impact point when
            the ground is reached (cutoff_reason "ground_impact"), or on the last
            step otherwise ("max_duration").
        """
        dt = float(self.sim_config.dt_s if dt is None else dt)
        duration = float(self.sim_config.max_duration_s if duration is None else duration)
        if not np.isfinite(dt) or dt <= 0.0:
            raise ValueError(f"dt must be positive and finite, got {dt!r}")
        if not np.isfinite(duration) or duration <= 0.0:
            raise ValueError(f"duration must be positive and finite, got {duration!r}")

        log = Logger()
        state = launch_state(v0, angle_deg)
        t = 0.0
        log.record(t, state)

        n_steps = int(np.ceil(duration / dt))
        for _ in range(n_steps):
            new_state = self.integrator.step(self._rhs, state, t, dt)
            t_new = t + dt

            if new_state.pos[1] < 0.0 and new_state.vel[1] < 0.0:
                y0 = state.pos[1]
                y1 = new_state.pos[1]
                if y0 > 0.0:
                    # Linear interpolation of the crossing inside the last step.
                    frac = y0 / (y0 - y1)
                    impact = State(
                        pos=state.pos + frac * (new_state.pos - state.pos),
                        vel=state.vel + frac * (new_state.vel - state.vel),
                    )
                    tau = frac * dt
                else:
                    # Step started on the ground (whole flight inside one step):
                    # positive root of y0 + vy*tau + a*tau^2/2 = 0 under constant gravity.
                    a = self._accel
                    vy = state.vel[1]
                    disc = max(vy * vy - 2.0 * a[1] * y0, 0.0)
                    tau = float(np.clip((-vy - np.sqrt(disc)) / a[1], 0.0, dt))
                    impact = State(
                        pos=state.pos + state.vel * tau + 0.5 * a * tau**2,
                        vel=state.vel + a * tau,
                    )
                impact.pos[1] = 0.0
                t_impact = t + tau
                log.record(t_impact, impact)
                log.impact_time = t_impact
                log.impact_range = float(impact.pos[0])
                log.cutoff_reason = "ground_impact"
                return log

            state = new_state
            t = t_new
            log.record(t, state)

        log.cutoff_reason = "max_duration"
        return log
