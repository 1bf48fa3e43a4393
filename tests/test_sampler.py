from babel_library.engine.sampler import CoordinateSampler, SamplerConfig


def test_sampler_is_reproducible_with_seed() -> None:
    a = CoordinateSampler(SamplerConfig(seed=42))
    b = CoordinateSampler(SamplerConfig(seed=42))
    assert [a() for _ in range(10)] == [b.sample() for _ in range(10)]


def test_sampler_stays_within_bounds() -> None:
    s = CoordinateSampler(SamplerConfig(seed=0))
    for _ in range(500):
        c = s()
        assert 0 <= c.wall <= 4
        assert 0 <= c.shelf <= 5
        assert 0 <= c.volume <= 32
        assert 0 <= c.page <= 410
