from likeview.engine import ParticleStore


def test_replace_and_clear(make_particle):
    store = ParticleStore()
    assert len(store) == 0 and not store
    store.replace([make_particle(), make_particle()])
    assert len(store) == 2 and store
    store.clear()
    assert len(store) == 0


def test_retain_keeps_order_and_counts_removed(make_particle):
    ps = [make_particle(target=t) for t in (60, 61, 62, 63, 64)]
    store = ParticleStore()
    store.replace(ps)
    removed = store.retain(lambda p: p.target_distance % 2 == 1)
    assert removed == 3
    assert [p.target_distance for p in store] == [61, 63]


def test_retain_visits_every_particle_once(make_particle):
    # Removing adjacent entries must not skip the one that follows.
    ps = [make_particle(target=60 + i) for i in range(6)]
    store = ParticleStore()
    store.replace(ps)
    seen = []

    def keep(p):
        seen.append(p.target_distance)
        p.current_distance = 1.0
        return False

    store.retain(keep)
    assert seen == [60, 61, 62, 63, 64, 65]
    assert len(store) == 0
    assert all(p.current_distance == 1.0 for p in ps)


def test_snapshot_is_a_copy(make_particle):
    store = ParticleStore()
    store.replace([make_particle()])
    snap = store.snapshot()
    snap.clear()
    assert len(store) == 1
