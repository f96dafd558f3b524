import random
from dataclasses import FrozenInstanceError

import pytest

from likeview.config import ANIMATION_DURATION_MS, BurstConfig
from likeview.engine import advance, generate_burst
from likeview.engine.advance import fade_alpha


def test_duration_constant():
    assert ANIMATION_DURATION_MS == 300


def test_start_of_animation(make_particle):
    st = advance(make_particle(), 0)
    assert st.distance == 0.0
    assert st.alpha == 255
    assert not st.done


def test_end_of_animation_is_done_and_idempotent(make_particle):
    p = make_particle(target=65.0)
    for elapsed in (300, 301, 450, 10_000):
        st = advance(p, elapsed)
        assert st.distance == 65.0
        assert st.alpha == 0
        assert st.done


def test_thirteen_particles_straight_down():
    cfg = BurstConfig(particle_count=(13, 13), target_distance=(65, 65), angle=(0, 0))
    cohort = generate_burst((250.0, 250.0), random.Random(2024), cfg)
    assert len(cohort) == 13
    for p in cohort:
        assert advance(p, 0).distance == 0.0
        end = advance(p, 300)
        assert (end.distance, end.alpha, end.done) == (65.0, 0, True)


def test_midway_distance_within_bounds(make_particle):
    p = make_particle(target=60.0)
    st = advance(p, 150)
    assert 0.0 < st.distance < 60.0
    assert not st.done


def test_negative_elapsed_is_treated_as_start(make_particle):
    st = advance(make_particle(), -40)
    assert st.distance == 0.0
    assert st.alpha == 255


def test_alpha_truncates_before_dividing():
    # decelerate(0.5) = 0.75 -> int(191.25) = 191 -> 191 // 3 * 2 = 126
    assert fade_alpha(255, 0.5) == 129
    # decelerate(0.1) = 0.19 -> int(48.45) = 48 -> 32
    assert fade_alpha(255, 0.1) == 223


def test_alpha_uses_particle_base_alpha(make_particle):
    p = make_particle(color=(228, 13, 86, 90))
    # 90 * 0.75 = 67.5 -> 67 -> 22 * 2 = 44
    assert advance(p, 150).alpha == 211


def test_custom_duration(make_particle):
    p = make_particle(target=70.0)
    assert advance(p, 500, duration_ms=1000).distance < 70.0
    assert advance(p, 1000, duration_ms=1000).done


@pytest.mark.parametrize("elapsed", [0, 17, 33, 100, 166, 250, 299, 300, 400])
def test_distance_stays_in_range(make_particle, elapsed):
    p = make_particle(target=62.0)
    st = advance(p, elapsed)
    assert 0.0 <= st.distance <= 62.0


def test_clamped_progress_past_the_end(make_particle):
    assert advance(make_particle(target=60.0), 10 ** 9) == advance(make_particle(target=60.0), 300)


@pytest.mark.parametrize("name", ["x", "y", "target_distance", "size", "angle", "color"])
def test_particle_shape_is_fixed(make_particle, name):
    p = make_particle()
    with pytest.raises(FrozenInstanceError):
        setattr(p, name, 1.0)


def test_particle_progress_is_mutable(make_particle):
    p = make_particle()
    p.current_distance = 12.5
    p.alpha = 40
    assert (p.current_distance, p.alpha) == (12.5, 40)
