import statistics

import pytest

from isokf.noise import GaussianNoiseGen, RandomSampler


def test_instance_is_singleton():
    GaussianNoiseGen.instance().seed(5)
    first = GaussianNoiseGen.instance().randn(3)
    GaussianNoiseGen.instance().seed(5)
    second = GaussianNoiseGen.instance().randn(3)
    assert len(first) == 3
    assert first == second

    sampled = RandomSampler.instance().sample([1, 2, 3, 4], 2)
    assert len(sampled) == 2
    assert set(sampled) <= {1, 2, 3, 4}
    assert RandomSampler.instance().sample([9], 1) == [9]


def test_seed_reproduces_sequence():
    gen = GaussianNoiseGen.instance()
    gen.seed(1234)
    first = gen.randn(20)
    gen.seed(1234)
    second = gen.randn(20)
    assert first == second


def test_randn_count_and_scalar():
    gen = GaussianNoiseGen()
    values = gen.randn(7)
    assert len(values) == 7
    assert all(isinstance(v, float) for v in values)
    assert isinstance(gen.randn(), float)


def test_call_matches_randn_sequence():
    gen = GaussianNoiseGen()
    gen.seed(42)
    via_call = [gen() for _ in range(5)]
    gen.seed(42)
    assert gen.randn(5) == via_call


def test_standard_normal_statistics():
    gen = GaussianNoiseGen()
    gen.seed(7)
    values = gen.randn(20000)
    assert abs(statistics.fmean(values)) < 0.05
    assert abs(statistics.stdev(values) - 1.0) < 0.05


def test_zero_deviation_returns_mean():
    gen = GaussianNoiseGen(mean=5.0, std_dev=0.0)
    assert gen.randn(3) == [5.0, 5.0, 5.0]


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        GaussianNoiseGen().randn(-1)


def test_sampler_preserves_order_and_uniqueness():
    items = list(range(100))
    out = RandomSampler.instance().sample(items, 10)
    assert len(out) == 10
    assert out == sorted(out)
    assert len(set(out)) == 10
    assert set(out) <= set(items)


def test_sampler_more_than_available_returns_all():
    items = ["a", "b", "c"]
    assert RandomSampler().sample(items, 10) == items


def test_sampler_zero_and_negative():
    sampler = RandomSampler()
    assert sampler.sample([1, 2, 3], 0) == []
    with pytest.raises(ValueError):
        sampler.sample([1, 2, 3], -2)