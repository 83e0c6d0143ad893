# isokf

Building blocks for isolated Kalman filtering, built on NumPy: seeded
Gaussian sampling, covariance and quaternion helpers, measurement records,
runtime checks, a wall-clock profiler and a timed lock guard.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Modules

### `isokf.verification`

- `verify(condition, expression, msg, expected, fail)` compares
  `bool(condition)` with `expected`. On a mismatch it logs an error through
  the `isokf.verification` logger. With `fail=True` it then raises
  `VerificationError`, a subclass of `RuntimeError`. Otherwise it returns
  `False`. On a match it returns `True`.
- `expect_true`, `expect_false` and `expect_true_throw` are shorthands for
  the common cases.

### `isokf.noise`

- `GaussianNoiseGen.instance()` returns the shared standard-normal generator.
  `seed(seed)` restarts its sequence. `randn()` returns one sample and
  `randn(n)` returns a list of `n` samples. Calling the generator also returns
  one sample.
- `RandomSampler.instance()` returns the shared sampler.
  `sample(items, n)` picks `min(n, len(items))` distinct elements and keeps
  them in their original order.

A negative count raises `ValueError` in both classes.

### `isokf.normal`

- `MultivariateNormal(mean, covar, use_cholesky=False)` precomputes a
  transform from the covariance. By default it uses an eigen decomposition
  and clips negative eigenvalues to zero. With `use_cholesky=True` it uses a
  Cholesky factor, and raises `ValueError` if the matrix is not positive
  definite.
  - `samples(n)` returns a `dim x n` array with one sample per column.
  - The `covar` and `mean` properties give the current parameters.
  - `set_mean`, `set_covar` and `set_seed` change them.
- `UnivariateNormal(mean=0.0, std_dev=1.0)`: `samples(n)` returns a
  one-dimensional array. It also has `set_mean`, `set_std_dev` and
  `set_seed`.

Both samplers draw from the shared `GaussianNoiseGen`, and `set_seed` seeds
that shared generator. Re-seeding with the same value therefore reproduces
the same draws.

### `isokf.quaternion`

Quaternions are NumPy arrays in `(w, x, y, z)` order.

- `small_angle_to_quaternion(theta)` gives the unit quaternion for the
  small-angle approximation of the 3-vector `theta`.
- `theta2quat(theta)` normalises `(1, theta/2)`.
- `quat2theta(q)` returns `2 * (x, y, z)`.

### `isokf.eigen_utils`

- Conversions:
  - `to_vector` and `from_vector` convert between arrays and lists.
  - `to_matrix` and `from_matrix` convert between nested lists and matrices.
  - `to_col_matrix` and `to_row_matrix` stack vectors into a matrix.
  - `to_quat` and `from_quat` accept a 4-vector or a 4x1 matrix.
- Statistics:
  - `sample_covariance(vectors)` gives the unbiased covariance of a list of
    vectors.
  - `calc_cov_mean(samples)` returns `(covariance, mean)` for samples stored
    as the columns of a matrix.
- Formatting:
  - `get_shape` returns text such as `[3x1]`.
  - `format_quat` returns ` (w,x,y,z) w x y z`.
  - `format_point` returns ` (x,y,z) x y z`.

### `isokf.mathutils`

- `roundn(value, precision)` rounds halves away from zero.
- `mean(values)` raises `ValueError` when `values` is empty.
- `stddev(values)` is the sample standard deviation, dividing by `n - 1`. It
  needs at least two values.
- `max_value` and `min_value` return `sys.float_info.max` for an empty input.

### `isokf.profiler`

`Profiler(name="", verbose=False)` measures wall-clock time since it was
created or since `start()` was last called. `elapsed_sec()` and
`elapsed_ms()` report that time. Used as a context manager, it restarts when
the block is entered. If `verbose` is set, it prints `<name>: <seconds> [sec]`
when the block is left.

### `isokf.timed_lock`

`TimedLockGuard(mutex, timeout_ms)` works with any lock that has
`acquire(timeout=...)` and `release()`. `timeout_ms` may be a number or a
`datetime.timedelta`.

- `try_lock()` reports whether the lock was acquired within the timeout.
- Used as a context manager, it raises `TimeoutError` if the lock cannot be
  acquired in time, and releases the lock on exit.
- The `locked` property tells whether the guard holds the lock.

### `isokf.measurement`

`ObservationType` names the kind of measurement: `UNKNOWN`, `PROPAGATION`,
`PRIVATE_OBSERVATION` or `JOINT_OBSERVATION`. Their text forms are
`UNKNOWN`, `PROP`, `PRIV` and `JOINT`.

`MeasData` is a dataclass with these fields:

- `t_m` and `t_p`: times in seconds, as floats.
- `id_sensor`, `meas_type`, `meta_info` and `obs_type`.
- `z`: the measurement vector.
- `R`: either a full covariance matrix or a column holding its diagonal.

Its methods:

- `has_meas_noise()` tells whether `R` is non-empty with a norm above `1e-11`.
- `get_R()` returns the full matrix, expanding a diagonal column.
- `MeasData.lin_interpolate(m_a, m_c, t_b)` interpolates `z` and `R`
  linearly and sets both times to `t_b`. A mismatch in sensor ID or
  observation type is logged as an error. Two measurements at the same time
  raise `ValueError`.
- `str()` and `str_short()` give one-line summaries.

## Examples

### Sampling from a Gaussian

```python
import numpy as np
from isokf.normal import MultivariateNormal

mvn = MultivariateNormal(np.array([-1.0, 0.5]), np.array([[2.0, 0.3], [0.3, 0.5]]), False)
mvn.set_seed(1234)
draws = mvn.samples(10)  # shape (2, 10), one sample per column
```

### Interpolating a measurement

```python
import numpy as np
from isokf.measurement import MeasData, ObservationType

a = MeasData(t_m=1.0, t_p=1.0, id_sensor=1, obs_type=ObservationType.PRIVATE_OBSERVATION,
             z=np.array([0.0]), R=np.array([1.0]))
c = MeasData(t_m=2.0, t_p=2.0, id_sensor=1, obs_type=ObservationType.PRIVATE_OBSERVATION,
             z=np.array([2.0]), R=np.array([3.0]))
b = MeasData.lin_interpolate(a, c, 1.5)  # z == [1.0], R == [2.0]
```

### Timing a block of code

```python
from isokf.profiler import Profiler

with Profiler("update", True):
    ...  # prints "update: <seconds> [sec]" when the block ends
```

### Guarding a lock with a timeout

```python
import threading
from isokf.timed_lock import TimedLockGuard

lock = threading.Lock()
with TimedLockGuard(lock, 100):
    ...  # raises TimeoutError if the lock is not acquired within 100 ms
```

### Runtime checks

```python
from isokf.verification import expect_true, expect_true_throw

ok = expect_true(1 + 1 == 2, "1 + 1 == 2", "arithmetic works")  # True; logs and returns False on failure
expect_true_throw(ok, "ok", "must hold")  # raises VerificationError on failure
```

## What the package does not do

The package contains no Kalman filter, no time-stamped history buffers and
no timestamp type. Measurement times are plain float seconds. It offers no
command-line tool and no persistence. These are helpers to build a filter
with, not a filter.