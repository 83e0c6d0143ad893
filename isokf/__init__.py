"""Helpers for isolated Kalman filtering: Gaussian sampling, covariance and quaternion utilities, measurement records, runtime checks, profiling and timed locking."""

__version__ = "0.1.0"

__all__ = [
    "eigen_utils",
    "mathutils",
    "measurement",
    "noise",
    "normal",
    "profiler",
    "quaternion",
    "timed_lock",
    "verification",
]