"""
Numerical integrators for the translational equations of motion.
"""

from __future__ import annotations

from typing import Callable, Tuple

import numpy as np

from .state import State

DerivFn = Callable[[float, State], Tuple[np.ndarray, np.ndarray]]


class Integrator:
    def step(self, deriv_fn: DerivFn, state: State, t: float, dt: float) -> State:
        raise NotImplementedError


class RK4(Integrator):
    def step(self, deriv_fn: DerivFn, state: State, t: float, dt: float) -> State:
        k1_r, k1_v = deriv_fn(t, state)

        s2 = _state_increment(state, k1_r, k1_v, dt * 0.5)
        k2_r, k2_v = deriv_fn(t + 0.5 * dt, s2)

        s3 = _state_increment(state, k2_r, k2_v, dt * 0.5)
        k3_r, k3_v = deriv_fn(t + 0.5 * dt, s3)

        s4 = _state_increment(state, k3_r, k3_v, dt)
        k4_r, k4_v = deriv_fn(t + dt, s4)

        dr = (dt / 6.0) * (k1_r + 2 * k2_r + 2 * k3_r + k4_r)
        dv = (dt / 6.0) * (k1_v + 2 * k2_v + 2 * k3_v + k4_v)

        return _state_increment(state, dr, dv, scale=1.0)


class SemiImplicitEuler(Integrator):
    """First order, velocity updated before position."""

    def step(self, deriv_fn: DerivFn, state: State, t: float, dt: float) -> State:
        _, a = deriv_fn(t, state)
        vel = state.vel + a * dt
        pos = state.pos + vel * dt
        return State(pos=pos, vel=vel)


def _state_increment(state: State, dr: np.ndarray, dv: np.ndarray, scale: float) -> State:
    return State(
        pos=state.pos + dr * scale,
        vel=state.vel + dv * scale,
    )


def create_integrator(name: str) -> Integrator:
    key = str(name).lower()
    if key in ("rk4", "runge-kutta", "rk"):
        return RK4()
    if key in ("euler", "semi_implicit_euler", "symplectic_euler"):
        return SemiImplicitEuler()
    raise ValueError(f"Unknown integrator '{name}'. Expected 'rk4' or 'euler'.")
