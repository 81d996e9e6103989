# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Reference Monte Carlo estimator.

Draw `count` points uniformly from the unit square [0, 1) x [0, 1) and count
the ones with x² + y² < 1. The fraction inside approximates the area of the
quarter circle, pi / 4, so the estimate is 4 * inside / count.

Points exactly on the arc are excluded by the strict inequality. They have
probability zero anyway.

The random source is injected. Passing a seeded random.Random gives a fully
reproducible run; passing nothing gets a fresh OS-seeded one. The
process-global `random` state is never read or advanced.
"""

import logging
import random
from typing import NamedTuple, Optional

from montepi.estimator.exceptions import InvalidArgument
from montepi.logging.logger import get_logger

logger: logging.Logger = get_logger(__name__)


class RunResult(NamedTuple):
    """Outcome of one estimation run."""

    count: int
    inside: int
    estimate: float


def validate_count(count: object) -> int:
    """
    Check that `count` is a positive integer and return it.

    bool is rejected even though it subclasses int: `estimate_pi(True)` is
    almost certainly a bug at the call site.

    Raises:
        InvalidArgument: count is None, not an int, zero or negative.
    """
    if count is None:
        raise InvalidArgument("Sample count is required")
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgument(
            f"Sample count must be an integer, got {type(count).__name__} {count!r}"
        )
    if count <= 0:
        raise InvalidArgument(f"Sample count must be positive, got {count}")
    return count


def parse_count(text: str) -> int:
    """Parse a command-line token into a validated sample count."""
    try:
        value = int(text.strip())
    except ValueError as err:
        raise InvalidArgument(f"Sample count must be an integer, got '{text}'") from err
    return validate_count(value)


def estimate_pi(
    count: int,
    rng: Optional[random.Random] = None,
    progress_interval: int = 0,
) -> RunResult:
    """
    Estimate pi from `count` random points.

    Args:
        count: Number of sample points. Must be a positive integer.
        rng: Random source providing `.random()`. None means a fresh OS-seeded
             random.Random.
        progress_interval: Log a progress entry every N samples. 0 disables.

    Returns:
        RunResult with count, inside and estimate.

    Raises:
        InvalidArgument: Invalid count or negative progress_interval.
    """
    count = validate_count(count)
    if isinstance(progress_interval, bool) or not isinstance(progress_interval, int):
        raise InvalidArgument(f"progress_interval must be an integer, got {progress_interval!r}")
    if progress_interval < 0:
        raise InvalidArgument(f"progress_interval must be >= 0, got {progress_interval}")

    source = rng if rng is not None else random.Random()

    inside = 0
    for attempt in range(1, count + 1):
        x = source.random()
        y = source.random()
        if x * x + y * y < 1.0:
            inside += 1

        if progress_interval and attempt % progress_interval == 0:
            logger.info(
                "Sampling progress",
                extra={
                    "attempts": attempt,
                    "inside": inside,
                    "running_estimate": 4.0 * inside / attempt,
                },
            )

    return RunResult(count=count, inside=inside, estimate=4.0 * inside / count)
