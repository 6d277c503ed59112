import numpy as np
import pytest

from Environment.gravity import EarthModel
from Main.ballistics import flight_time, max_height, projectile_range
from Main.config import SimulationConfig
from Main.integrators import RK4, SemiImplicitEuler
from Main.simulation import Simulation, launch_state


class DummyEarth:
    def __init__(self, g0=9.81):
        self.g0 = g0

    def gravity_accel(self):
        return np.array([0.0, -self.g0])


def make_sim(dt=0.05, duration=600.0, integrator=None, earth=None):
    cfg = SimulationConfig(dt_s=dt, max_duration_s=duration)
    return Simulation(earth=earth or EarthModel(radius=6_371_000.0, g0=9.81), sim_config=cfg, integrator=integrator)


def test_launch_state_components():
    state = launch_state(100.0, 30.0)
    np.testing.assert_allclose(state.pos, [0.0, 0.0])
    np.testing.assert_allclose(state.vel, [100.0 * np.cos(np.pi / 6), 50.0])
    with pytest.raises(ValueError):
        launch_state(100.0, 0.0)
    with pytest.raises(ValueError):
        launch_state(-1.0, 45.0)


def test_rk4_run_matches_closed_form():
    sim = make_sim()
    log = sim.run(690.0, 45.0)
    assert log.cutoff_reason == "ground_impact"
    assert log.impact_range == pytest.approx(projectile_range(690.0, 45.0, 9.81), rel=1e-6)
    assert log.impact_time == pytest.approx(flight_time(690.0, 45.0, 9.81), rel=1e-6)
    assert log.max_height == pytest.approx(max_height(690.0, 45.0, 9.81), rel=1e-4)
    assert log.y[-1] == 0.0
    assert log.x[-1] == log.impact_range


def test_max_duration_cutoff():
    sim = make_sim(dt=0.1, duration=10.0)
    log = sim.run(690.0, 45.0)
    assert log.cutoff_reason == "max_duration"
    assert log.impact_range is None
    assert log.t[-1] == pytest.approx(10.0)
    assert len(log) == 101


def test_explicit_dt_and_duration_override_config():
    sim = make_sim(dt=1.0, duration=1.0)
    log = sim.run(100.0, 45.0, dt=0.01, duration=30.0)
    assert log.cutoff_reason == "ground_impact"
    assert log.impact_range == pytest.approx(projectile_range(100.0, 45.0, 9.81), rel=1e-6)


def test_invalid_step_rejected():
    sim = make_sim()
    with pytest.raises(ValueError, match="dt"):
        sim.run(100.0, 45.0, dt=0.0)
    with pytest.raises(ValueError, match="duration"):
        sim.run(100.0, 45.0, duration=-1.0)


def test_euler_run_lands_close_to_closed_form():
    sim = make_sim(dt=0.01, integrator=SemiImplicitEuler())
    log = sim.run(690.0, 45.0)
    assert log.cutoff_reason == "ground_impact"
    assert log.impact_range == pytest.approx(projectile_range(690.0, 45.0, 9.81), rel=1e-3)


def test_simulation_uses_earth_gravity():
    sim = make_sim(earth=DummyEarth(g0=1.62))
    log = sim.run(100.0, 45.0)
    assert log.impact_range == pytest.approx(100.0**2 / 1.62, rel=1e-6)


def test_default_integrator_is_rk4():
    sim = Simulation(earth=DummyEarth(), sim_config=SimulationConfig())
    assert isinstance(sim.integrator, RK4)


def test_flight_shorter_than_one_step_lands_downrange():
    sim = make_sim()
    log = sim.run(690.0, 0.01)
    assert log.cutoff_reason == "ground_impact"
    assert log.impact_range == pytest.approx(projectile_range(690.0, 0.01, 9.81), rel=1e-9)
    assert log.impact_range == pytest.approx(16.94, abs=0.01)
    assert log.impact_time == pytest.approx(flight_time(690.0, 0.01, 9.81), rel=1e-9)
    assert len(log) == 2


def test_step_longer_than_flight_lands_at_closed_form_point():
    sim = make_sim()
    log = sim.run(690.0, 45.0, dt=120.0)
    assert log.cutoff_reason == "ground_impact"
    assert log.impact_time == pytest.approx(flight_time(690.0, 45.0, 9.81), rel=1e-9)
    assert log.impact_range == pytest.approx(projectile_range(690.0, 45.0, 9.81), rel=1e-9)
    assert log.y[-1] == 0.0
    assert log.vy[-1] == pytest.approx(-690.0 * np.sin(np.pi / 4))


def test_euler_single_step_flight_uses_kinematic_root():
    sim = make_sim(dt=1.0, integrator=SemiImplicitEuler())
    log = sim.run(5.0, 30.0)
    assert log.impact_range == pytest.approx(projectile_range(5.0, 30.0, 9.81), rel=1e-9)
