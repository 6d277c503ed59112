import numpy as np
import pytest

from Main.integrators import RK4, SemiImplicitEuler, create_integrator
from Main.state import State


def harmonic_deriv(t, state):
    k_spring = 1.0
    x = state.pos[0]
    vx = state.vel[0]
    ax = -k_spring * x
    dr_dt = np.array([vx, 0.0])
    dv_dt = np.array([ax, 0.0])
    return dr_dt, dv_dt


def total_energy(state):
    k = 0.5 * np.dot(state.vel, state.vel)
    u = 0.5 * np.dot(state.pos, state.pos)
    return k + u


def run_integrator(integrator, steps=1000, dt=0.01):
    state = State(pos=np.array([1.0, 0.0]), vel=np.array([0.0, 0.0]))
    t = 0.0
    energies = []
    for _ in range(steps):
        energies.append(total_energy(state))
        state = integrator.step(harmonic_deriv, state, t, dt)
        t += dt
    energies.append(total_energy(state))
    return energies


def test_rk4_energy_conservation():
    energies = run_integrator(RK4(), steps=500, dt=0.005)
    drift = abs(energies[-1] - energies[0])
    assert drift < 1e-3


def test_semi_implicit_euler_energy_bounded():
    energies = run_integrator(SemiImplicitEuler(), steps=500, dt=0.0005)
    drift = abs(energies[-1] - energies[0])
    assert drift < 0.2


def test_rk4_exact_for_constant_acceleration():
    g = 9.81

    def falling(t, state):
        return state.vel.copy(), np.array([0.0, -g])

    state = State(pos=np.zeros(2), vel=np.array([10.0, 20.0]))
    dt = 0.5
    new_state = RK4().step(falling, state, 0.0, dt)
    np.testing.assert_allclose(new_state.pos, [10.0 * dt, 20.0 * dt - 0.5 * g * dt**2], atol=1e-12)
    np.testing.assert_allclose(new_state.vel, [10.0, 20.0 - g * dt], atol=1e-12)


def test_step_does_not_mutate_input_state():
    state = State(pos=np.array([1.0, 2.0]), vel=np.array([3.0, 4.0]))
    snapshot = state.copy()
    RK4().step(harmonic_deriv, state, 0.0, 0.1)
    np.testing.assert_array_equal(state.pos, snapshot.pos)
    np.testing.assert_array_equal(state.vel, snapshot.vel)


def test_create_integrator_names():
    assert isinstance(create_integrator("rk4"), RK4)
    assert isinstance(create_integrator("RK"), RK4)
    assert isinstance(create_integrator("euler"), SemiImplicitEuler)
    with pytest.raises(ValueError, match="Unknown integrator"):
        create_integrator("leapfrog")
