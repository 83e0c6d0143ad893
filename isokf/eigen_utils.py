"""Conversions between Python containers and numpy arrays, plus covariance helpers.

Quaternions are numpy arrays in ``(w, x, y, z)`` order.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np


def to_vector(array) -> list[float]:
    """Copy a one-dimensional (row or column) array into a list of floats."""
    return [float(v) for v in np.asarray(array, dtype=float).reshape(-1)]


def from_vector(values: Iterable[float]) -> np.ndarray:
    """Copy a sequence of numbers into a one-dimensional array."""
    return np.array(list(values), dtype=float)


def to_matrix(rows: Sequence[Sequence[float]]) -> np.ndarray:
    """Build a matrix from nested rows; the first row sets the column count."""
    n_rows = len(rows)
    n_cols = len(rows[0]) if n_rows else 1
    result = np.zeros((n_rows, n_cols))
    for r, row in enumerate(rows):
        if len(row) < n_cols:
            raise ValueError(f"row {r} has {len(row)} elements, expected {n_cols}")
        result[r, :] = list(row)[:n_cols]
    return result


def to_col_matrix(vectors: Sequence) -> np.ndarray:
    """Stack vectors as the columns of a matrix."""
    if not len(vectors):
        return np.zeros((0, 0))
    return np.column_stack([np.asarray(v, dtype=float).reshape(-1) for v in vectors])


def to_row_matrix(vectors: Sequence) -> np.ndarray:
    """Stack vectors as the rows of a matrix."""
    if not len(vectors):
        return np.zeros((0, 0))
    return np.vstack([np.asarray(v, dtype=float).reshape(-1) for v in vectors])


def to_quat(values) -> np.ndarray:
    """Quaternion ``(w, x, y, z)`` from a 4-vector or a 4x1 matrix."""
    arr = np.asarray(values, dtype=float)
    if arr.ndim == 2 and arr.shape != (4, 1):
        raise ValueError(f"cannot convert a matrix of shape {arr.shape} to a quaternion")
    if arr.ndim > 2 or arr.size != 4:
        raise ValueError(f"cannot convert {arr.size} values to a quaternion")
    return arr.reshape(4).copy()


def from_quat(q) -> np.ndarray:
    """4-vector ``(w, x, y, z)`` of a quaternion."""
    return to_quat(q)


def from_matrix(matrix) -> list[list[float]]:
    """Copy a matrix into nested lists of floats."""
    return [[float(v) for v in row] for row in np.atleast_2d(np.asarray(matrix, dtype=float))]


def sample_covariance(vectors: Sequence) -> np.ndarray:
    """Unbiased sample covariance of a list of equally sized vectors."""
    if not len(vectors):
        raise ValueError("at least one vector is required")
    cov, _ = calc_cov_mean(to_col_matrix(vectors))
    return cov


def calc_cov_mean(samples) -> tuple[np.ndarray, np.ndarray]:
    """Covariance and mean of samples stored as the columns of a matrix."""
    m = np.atleast_2d(np.asarray(samples, dtype=float))
    mu = m.mean(axis=1)
    centred = m - mu[:, np.newaxis]
    with np.errstate(divide="ignore", invalid="ignore"):
        cov = (centred @ centred.T) / float(m.shape[1] - 1)
    return cov, mu


def get_shape(matrix) -> str:
    """Shape as ``[rows x cols]`` text, e.g. ``[3x1]``."""
    arr = np.asarray(matrix)
    rows = arr.shape[0] if arr.ndim >= 1 else 1
    cols = arr.shape[1] if arr.ndim >= 2 else 1
    return f"[{rows}x{cols}]"


def format_quat(q) -> str:
    """Quaternion as `` (w,x,y,z) w x y z``."""
    w, x, y, z = to_quat(q)
    return f" (w,x,y,z) {w:g} {x:g} {y:g} {z:g}"


def format_point(p) -> str:
    """3D point as `` (x,y,z) x y z``."""
    arr = np.asarray(p, dtype=float).reshape(-1)
    if arr.size != 3:
        raise ValueError(f"expected a 3-element point, got {arr.size} elements")
    x, y, z = arr
    return f" (x,y,z) {x:g} {y:g} {z:g}"