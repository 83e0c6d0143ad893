"""Measurement records with noise helpers and linear interpolation."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field

import numpy as np

from isokf.verification import expect_true


class ObservationType(enum.Enum):
    """Kind of information a measurement carries."""

    UNKNOWN = "UNKNOWN"
    PROPAGATION = "PROP"
    PRIVATE_OBSERVATION = "PRIV"
    JOINT_OBSERVATION = "JOINT"

    def __str__(self) -> str:
        return self.value


def _stamp_str(t: float) -> str:
    return f"{float(t):.9f}"


def _format_vec(values: np.ndarray) -> str:
    texts = [f"{float(v):.4g}" for v in np.asarray(values).reshape(-1)]
    if not texts:
        return ""
    width = max(len(t) for t in texts)
    return " ".join(t.rjust(width) for t in texts)


def _is_column(r: np.ndarray) -> bool:
    return r.ndim == 1 or (r.ndim == 2 and r.shape[1] == 1)


@dataclass
class MeasData:
    """A single sensor measurement with its noise description.

    ``R`` is either a full covariance matrix or a column of its diagonal.
    Timestamps are given in seconds.
    """

    t_m: float = 0.0
    t_p: float = 0.0
    id_sensor: int = 0
    meas_type: str = ""
    meta_info: str = ""
    obs_type: ObservationType = ObservationType.UNKNOWN
    z: np.ndarray = field(default_factory=lambda: np.zeros(0))
    R: np.ndarray = field(default_factory=lambda: np.zeros(0))

    def __post_init__(self) -> None:
        self.z = np.asarray(self.z, dtype=float)
        self.R = np.asarray(self.R, dtype=float)

    def has_meas_noise(self) -> bool:
        """Whether ``R`` is non-empty with a non-negligible norm."""
        return bool(self.R.size) and float(np.linalg.norm(self.R)) > 1e-11

    def get_R(self) -> np.ndarray:
        """The covariance matrix, expanding a diagonal column if needed."""
        if _is_column(self.R):
            return np.diag(self.R.reshape(-1))
        return self.R.copy()

    @classmethod
    def lin_interpolate(cls, m_a: "MeasData", m_c: "MeasData", t_b: float) -> "MeasData":
        """Interpolate linearly between ``m_a`` and ``m_c`` at time ``t_b``."""
        expect_true(m_a.id_sensor == m_c.id_sensor,
                    "m_a.id_sensor == m_c.id_sensor", "wrong sensor IDs!")
        expect_true(m_a.obs_type == m_c.obs_type,
                    "m_a.obs_type == m_c.obs_type", "wrong observation types!")
        dt_ac = float(m_c.t_m) - float(m_a.t_m)
        if dt_ac == 0.0:
            raise ValueError("cannot interpolate between measurements at the same time")
        ratio = (float(t_b) - float(m_a.t_m)) / dt_ac
        return dataclasses.replace(
            m_a,
            t_m=t_b,
            t_p=t_b,
            z=m_a.z + (m_c.z - m_a.z) * ratio,
            R=m_a.R + (m_c.R - m_a.R) * ratio,
        )

    def str_short(self) -> str:
        """One-line summary of time, sensor and measurement type."""
        return (
            f"MeasData: t_m={_stamp_str(self.t_m):<16}"
            f", ID={self.id_sensor!s:<3}"
            f", meas_type={self.meas_type:<20}"
        )

    def __str__(self) -> str:
        diag = self.R if _is_column(self.R) else np.diagonal(self.R)
        return (
            f"MeasData: t_m={_stamp_str(self.t_m):<16}"
            f", t_p={_stamp_str(self.t_p):<16}"
            f", ID={self.id_sensor!s:<3}"
            f", meas_type={self.meas_type:<20}"
            f", meta info={self.meta_info:<12}"
            f", obs. type={str(self.obs_type):<2}"
            f", z=[{_format_vec(self.z)}]"
            f", diag(R)=[{_format_vec(diag)}]"
        )