"""Pytest configuration file with shared integrands and a thread-spawning check."""

import math
import os
from concurrent.futures import ThreadPoolExecutor, TimeoutError

import pytest

__all__ = ["extra_threads_ok", "rational_integrand", "rational_exact"]


@pytest.fixture(autouse=True, scope="session")
def _limit_blas_threads():
    os.environ.setdefault("OMP_NUM_THREADS", "1")
    os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
    os.environ.setdefault("MKL_NUM_THREADS", "1")


@pytest.fixture(scope="session")
def threads_ok():
    """Return a callable that checks thread-spawning capability.

    The returned function has signature `check(n=2, timeout=1.0) -> bool` and
    returns True if at least `n` threads can be started and joined within `timeout`.
    """
    def _can_spawn(n: int = 2, timeout: float = 1.0) -> bool:
        try:
            with ThreadPoolExecutor(max_workers=n) as ex:
                futs = [ex.submit(lambda: None) for _ in range(n)]
                for f in futs:
                    f.result(timeout=timeout)
            return True
        except (RuntimeError, MemoryError, OSError, TimeoutError):
            return False
    return _can_spawn


@pytest.fixture(scope="session")
def extra_threads_ok(threads_ok):
    """Convenience: True iff we can start >= 2 threads (common case)."""
    return threads_ok(2)


@pytest.fixture(scope="session")
def rational_integrand():
    """f(x) = (x + 3) / (x^2 + 4)."""
    return lambda x: (x + 3.0) / (x * x + 4.0)


@pytest.fixture(scope="session")
def rational_exact():
    """Integral of (x + 3) / (x^2 + 4) over [0, 2]: 0.5 ln 2 + 3 pi / 8."""
    return 0.5 * math.log(2.0) + 3.0 * math.pi / 8.0
