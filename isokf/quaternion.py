"""Conversions between small rotation vectors and unit quaternions.

Quaternions are numpy arrays in ``(w, x, y, z)`` order.
"""

from __future__ import annotations

import math

import numpy as np


def _as_vec3(theta) -> np.ndarray:
    vec = np.asarray(theta, dtype=float).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"expected a 3-element vector, got {vec.size} elements")
    return vec


def _as_quat(q) -> np.ndarray:
    vec = np.asarray(q, dtype=float).reshape(-1)
    if vec.shape != (4,):
        raise ValueError(f"expected a 4-element quaternion, got {vec.size} elements")
    return vec


def small_angle_to_quaternion(theta) -> np.ndarray:
    """Unit quaternion from the small-angle approximation ``theta``."""
    vec = _as_vec3(theta)
    q_squared = float(vec @ vec) / 4.0
    if q_squared < 1.0:
        return np.array([math.sqrt(1.0 - q_squared), *(vec * 0.5)])
    w = 1.0 / math.sqrt(1.0 + q_squared)
    return np.array([w, *(vec * (w * 0.5))])


def theta2quat(theta) -> np.ndarray:
    """Normalized quaternion ``(1, theta/2)``."""
    vec = _as_vec3(theta)
    q = np.array([1.0, *(0.5 * vec)])
    return q / np.linalg.norm(q)


def quat2theta(q) -> np.ndarray:
    """Rotation vector ``2 * (x, y, z)`` of a quaternion."""
    return _as_quat(q)[1:] * 2.0