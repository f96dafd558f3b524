import random

import pytest

from likeview.config import BurstConfig
from likeview.engine import BurstEngine, EngineState


@pytest.fixture
def engine():
    return BurstEngine(BurstConfig(), random.Random(7))


def run_to_completion(engine, start=1000, step=16, limit=200):
    now = start
    for _ in range(limit):
        res = engine.on_frame(now)
        if res.completed:
            return now
        now += step
    raise AssertionError("burst never completed")


def test_starts_idle(engine):
    assert engine.state is EngineState.IDLE
    assert engine.start_ms is None
    assert engine.render() == []


def test_frame_while_idle_leaves_clock_unset(engine):
    res = engine.on_frame(5000)
    assert res.completed
    assert engine.start_ms is None


def test_trigger_does_not_start_clock(engine):
    engine.on_trigger((250.0, 250.0))
    assert engine.state is EngineState.RUNNING
    assert engine.start_ms is None
    assert engine.dirty
    assert 12 <= len(engine.store) <= 15


def test_clock_starts_on_first_frame(engine):
    engine.on_trigger((250.0, 250.0))
    res = engine.on_frame(1000)
    assert engine.start_ms == 1000
    assert not res.completed
    assert res.live == len(engine.store)
    assert all(p.current_distance == 0.0 for p in engine.particles)


def test_burst_completes_and_resets(engine):
    engine.on_trigger((250.0, 250.0))
    engine.on_frame(1000)
    res = engine.on_frame(1300)
    assert res.completed
    assert len(engine.store) == 0
    assert engine.start_ms is None
    assert engine.state is EngineState.IDLE


def test_distance_invariants_every_frame(engine):
    engine.on_trigger((100.0, 100.0))
    last = {}
    now = 0
    while True:
        res = engine.on_frame(now)
        for p in engine.particles:
            assert 0.0 <= p.current_distance <= p.target_distance
            assert p.current_distance >= last.get(id(p), 0.0)
            last[id(p)] = p.current_distance
        if res.completed:
            break
        now += 16
    assert now >= 300


def test_distance_never_decreases_if_clock_goes_back(engine):
    engine.on_trigger((0.0, 0.0))
    engine.on_frame(0)
    engine.on_frame(200)
    before = [p.current_distance for p in engine.particles]
    engine.on_frame(100)
    after = [p.current_distance for p in engine.particles]
    assert after == before


def test_retrigger_discards_in_flight_burst(engine):
    engine.on_trigger((10.0, 10.0))
    engine.on_frame(0)
    engine.on_frame(100)
    engine.on_trigger((400.0, 400.0))
    assert engine.start_ms is None
    assert 12 <= len(engine.store) <= 15
    assert all(p.position == (400.0, 400.0) for p in engine.particles)
    assert all(p.current_distance == 0.0 for p in engine.particles)


def test_retrigger_store_size_matches_new_cohort():
    a = BurstEngine(rng=random.Random(11))
    b = BurstEngine(rng=random.Random(11))
    a.on_trigger((0.0, 0.0))
    b.on_trigger((0.0, 0.0))
    # a gets a second trigger mid-flight; b gets the same second cohort fresh
    a.on_frame(0)
    a.on_trigger((5.0, 5.0))
    b.store.clear()
    b.on_trigger((5.0, 5.0))
    assert len(a.store) == len(b.store)


def test_render_order_is_insertion_order(engine):
    engine.on_trigger((250.0, 250.0))
    engine.on_frame(0)
    engine.on_frame(120)
    sprites = engine.render()
    assert [s.size for s in sprites] == [p.size for p in engine.particles]
    for s, p in zip(sprites, engine.particles):
        assert (s.x, s.y) == pytest.approx(p.point())
        assert s.color[:3] == (228, 13, 86)
        assert s.color[3] == p.alpha


def test_render_is_a_pure_read(engine):
    engine.on_trigger((250.0, 250.0))
    engine.on_frame(0)
    engine.on_frame(50)
    assert engine.render() == engine.render()
    assert engine.dirty
    engine.mark_clean()
    assert not engine.dirty


def test_same_seed_same_animation():
    a = BurstEngine(rng=random.Random(3))
    b = BurstEngine(rng=random.Random(3))
    for e in (a, b):
        e.on_trigger((50.0, 60.0))
        e.on_frame(0)
        e.on_frame(90)
    assert a.render() == b.render()


def test_all_particles_retire_together_at_duration(engine):
    engine.on_trigger((0.0, 0.0))
    end = run_to_completion(engine, start=0, step=20)
    assert end == 300


def test_custom_duration():
    e = BurstEngine(BurstConfig(duration_ms=600), random.Random(1))
    e.on_trigger((0.0, 0.0))
    e.on_frame(0)
    assert not e.on_frame(300).completed
    assert e.on_frame(600).completed
