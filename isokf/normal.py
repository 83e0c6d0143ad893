"""Sampling from univariate and multivariate normal distributions."""

from __future__ import annotations

import numpy as np

from isokf.noise import GaussianNoiseGen


class MultivariateNormal:
    """Multivariate normal distribution with a precomputed transform for sampling."""

    def __init__(self, mean, covar, use_cholesky=False):
        self._mean = np.empty(0)
        self._sigma = np.empty((0, 0))
        self._tf = np.empty((0, 0))
        self.set_mean(mean)
        self.set_covar(covar, use_cholesky)

    @property
    def covar(self) -> np.ndarray:
        """The covariance matrix."""
        return self._sigma

    @property
    def mean(self) -> np.ndarray:
        """The mean vector."""
        return self._mean

    def set_seed(self, seed: int) -> None:
        """Seed the shared Gaussian noise generator."""
        GaussianNoiseGen.instance().seed(seed)

    def set_mean(self, mean) -> None:
        self._mean = np.asarray(mean, dtype=float).reshape(-1)

    def set_covar(self, covar, use_cholesky=False) -> None:
        """Set the covariance and compute the transform applied to unit normals."""
        sigma = np.atleast_2d(np.asarray(covar, dtype=float))
        if sigma.shape[0] != sigma.shape[1]:
            raise ValueError(f"covariance must be square, got shape {sigma.shape}")
        self._sigma = sigma
        if use_cholesky:
            try:
                self._tf = np.linalg.cholesky(sigma)
            except np.linalg.LinAlgError as exc:
                raise ValueError(
                    "Failed computing the Cholesky decomposition. Use solver instead"
                ) from exc
        else:
            try:
                eigvals, eigvecs = np.linalg.eigh(sigma)
            except np.linalg.LinAlgError as exc:
                raise ValueError("Failed computing the self-adjoint eigen decomposition") from exc
            self._tf = eigvecs @ np.diag(np.sqrt(np.maximum(eigvals, 0.0)))

    def samples(self, n: int) -> np.ndarray:
        """Draw ``n`` samples, returned as the columns of a ``dim x n`` matrix."""
        dim = self._sigma.shape[0]
        if self._mean.shape[0] != dim:
            raise ValueError(
                f"mean has dimension {self._mean.shape[0]}, covariance {dim}"
            )
        raw = GaussianNoiseGen.instance().randn(dim * n)
        # Fill column by column, one column per sample.
        z = np.asarray(raw, dtype=float).reshape(n, dim).T
        return self._tf @ z + self._mean[:, np.newaxis]


class UnivariateNormal:
    """Scalar normal distribution drawing from the shared noise generator."""

    def __init__(self, mean=0.0, std_dev=1.0):
        self.mean = float(mean)
        self.std_dev = float(std_dev)

    def set_seed(self, seed: int) -> None:
        """Seed the shared Gaussian noise generator."""
        GaussianNoiseGen.instance().seed(seed)

    def set_mean(self, mean) -> None:
        self.mean = float(mean)

    def set_std_dev(self, std_dev) -> None:
        self.std_dev = float(std_dev)

    def samples(self, n: int) -> np.ndarray:
        """Draw ``n`` samples as a one-dimensional array."""
        raw = np.asarray(GaussianNoiseGen.instance().randn(n), dtype=float)
        return self.std_dev * raw + self.mean