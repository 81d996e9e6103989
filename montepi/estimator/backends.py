# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Backend registry.

Maps a backend name to a runner that builds its own seeded random source and
calls the matching estimator. The CLI only ever goes through `run_estimate`.
"""

from typing import Callable, Optional

from montepi.estimator.core import RunResult, estimate_pi
from montepi.estimator.exceptions import InvalidArgument
from montepi.estimator.tensor import DEFAULT_BATCH_SIZE, estimate_pi_tensor
from montepi.runtime.bootstrap import make_random_source, make_torch_generator

Runner = Callable[[int, Optional[int], int, int], RunResult]


def _run_python(count: int, seed: Optional[int], batch_size: int, progress_interval: int) -> RunResult:
    return estimate_pi(count, rng=make_random_source(seed), progress_interval=progress_interval)


def _run_torch(count: int, seed: Optional[int], batch_size: int, progress_interval: int) -> RunResult:
    return estimate_pi_tensor(count, generator=make_torch_generator(seed), batch_size=batch_size)


BACKENDS: dict[str, Runner] = {
    "python": _run_python,
    "torch": _run_torch,
}


def run_estimate(
    count: int,
    backend: str = "python",
    seed: Optional[int] = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
    progress_interval: int = 0,
) -> RunResult:
    """
    Run one estimation with the named backend.

    The same backend, seed and count always give the same RunResult.
    progress_interval only applies to the python backend and batch_size
    only to the torch backend.

    Raises:
        InvalidArgument: Unknown backend, or any invalid run parameter.
    """
    runner = BACKENDS.get(backend)
    if runner is None:
        raise InvalidArgument(
            f"Unknown backend '{backend}'. Choose one of: {', '.join(sorted(BACKENDS))}"
        )
    return runner(count, seed, batch_size, progress_interval)
