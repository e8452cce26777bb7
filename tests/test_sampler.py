from sim_server.card_utils.sampler import Sampler


def test_draw_one_empty_pool():
    assert Sampler().draw_one([]) is None


def test_draw_one_uses_floor_of_scaled_value(scripted_sampler):
    sampler = scripted_sampler(0.99, 0.25)
    pool = ["a", "b", "c", "d"]

    assert sampler.draw_one(pool) == "d"
    assert sampler.draw_one(pool) == "b"


def test_draw_one_is_with_replacement(scripted_sampler):
    sampler = scripted_sampler(0.0, 0.0)
    pool = ["a", "b"]

    assert [sampler.draw_one(pool), sampler.draw_one(pool)] == ["a", "a"]
    assert pool == ["a", "b"]


def test_draw_many_removes_from_working_copy(scripted_sampler):
    sampler = scripted_sampler(0.5, 0.0, 0.99)
    pool = ["a", "b", "c", "d"]

    assert sampler.draw_many(pool, 3) == ["c", "a", "d"]
    assert pool == ["a", "b", "c", "d"]


def test_draw_many_returns_distinct_objects():
    pool = [object() for _ in range(30)]
    for _ in range(50):
        drawn = Sampler().draw_many(pool, 12)
        assert len(drawn) == 12
        assert len({id(x) for x in drawn}) == 12
        assert all(any(x is p for p in pool) for x in drawn)


def test_draw_many_short_pool():
    pool = ["a", "b"]
    assert sorted(Sampler().draw_many(pool, 5)) == ["a", "b"]
    assert Sampler().draw_many([], 3) == []
    assert Sampler().draw_many(pool, 0) == []
    assert Sampler().draw_many(pool, -2) == []


def test_draw_first_walks_the_chain(scripted_sampler):
    sampler = scripted_sampler(0.0)
    assert sampler.draw_first([], ["x"], ["y"]) == "x"
    assert sampler.draw_first([], []) is None
    assert sampler.draw_first() is None


def test_shuffle_is_a_permutation():
    pool = list(range(24))
    shuffled = Sampler().shuffle(pool)

    assert sorted(shuffled) == pool
    assert pool == list(range(24))


def test_default_source_is_private():
    a, b = Sampler(), Sampler()
    assert a.rng is not b.rng
