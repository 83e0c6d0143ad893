import math

import numpy as np
import pytest

from isokf.normal import MultivariateNormal, UnivariateNormal


def gen_covar(v0=1.0, v1=1.0, theta=0.0):
    c, s = math.cos(theta), math.sin(theta)
    rot = np.array([[c, -s], [s, c]])
    return rot @ np.diag([v0, v1]) @ rot.T


MEAN = np.array([-1.0, 0.5])


def test_univariate_seed_reproducible():
    gen1 = UnivariateNormal(0, 1.0)
    samples1 = gen1.samples(10)
    assert samples1.shape == (10,)

    gen2 = UnivariateNormal(0, 2.0)
    gen2.set_seed(1234)
    samples2 = gen2.samples(10)

    gen3 = UnivariateNormal(0, 2.0)
    gen3.set_seed(1234)
    samples3 = gen3.samples(10)
    np.testing.assert_array_equal(samples2, samples3)


def test_univariate_scaling_relation():
    gen_a = UnivariateNormal(0, 1.0)
    gen_a.set_seed(99)
    a = gen_a.samples(8)
    gen_b = UnivariateNormal(3.0, 2.0)
    gen_b.set_seed(99)
    b = gen_b.samples(8)
    np.testing.assert_allclose(b, 2.0 * a + 3.0)


def test_univariate_zero_deviation():
    gen = UnivariateNormal()
    gen.set_mean(4.5)
    gen.set_std_dev(0.0)
    np.testing.assert_array_equal(gen.samples(5), np.full(5, 4.5))


def test_multivariate_seed():
    covar = gen_covar(3.0, 0.1, math.pi / 5.0)
    n_samples = 10

    gen1 = MultivariateNormal(MEAN, covar)
    samples1 = gen1.samples(n_samples)
    gen2 = MultivariateNormal(MEAN, covar)
    samples2 = gen2.samples(n_samples)
    assert samples1.shape == (2, n_samples)
    assert not np.array_equal(samples1, samples2)

    gen3 = MultivariateNormal(MEAN, covar)
    gen3.set_seed(1234)
    samples3 = gen3.samples(n_samples)
    gen4 = MultivariateNormal(MEAN, covar)
    gen4.set_seed(1234)
    samples4 = gen4.samples(n_samples)
    np.testing.assert_array_equal(samples3, samples4)


@pytest.mark.parametrize("use_cholesky", [False, True])
def test_multivariate_statistics(use_cholesky):
    covar = gen_covar(3.0, 0.1, math.pi / 5.0)
    gen = MultivariateNormal(MEAN, covar, use_cholesky)
    gen.set_seed(2024)
    s = gen.samples(40000)
    np.testing.assert_allclose(s.mean(axis=1), MEAN, atol=0.05)
    np.testing.assert_allclose(np.cov(s), covar, atol=0.1)


def test_covar_property_and_set_mean():
    covar = np.eye(3)
    gen = MultivariateNormal([1.0, 0.0, -1.4], covar)
    np.testing.assert_array_equal(gen.covar, covar)
    gen.set_mean([0.0, 0.0, 0.0])
    gen.set_covar(np.zeros((3, 3)))
    np.testing.assert_array_equal(gen.samples(4), np.zeros((3, 4)))


def test_singular_covariance_with_solver():
    covar = np.array([[1.0, 1.0], [1.0, 1.0]])
    gen = MultivariateNormal([0.0, 0.0], covar)
    s = gen.samples(50)
    np.testing.assert_allclose(s[0], s[1], atol=1e-9)


def test_cholesky_fails_on_indefinite():
    covar = np.array([[1.0, 2.0], [2.0, 1.0]])
    with pytest.raises(ValueError):
        MultivariateNormal([0.0, 0.0], covar, use_cholesky=True)


def test_non_square_covariance_rejected():
    with pytest.raises(ValueError):
        MultivariateNormal([0.0, 0.0], np.ones((2, 3)))


def test_mean_dimension_mismatch_rejected():
    gen = MultivariateNormal([0.0, 0.0, 0.0], np.eye(2))
    with pytest.raises(ValueError):
        gen.samples(3)