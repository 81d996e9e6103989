# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Batched PyTorch backend.

Same experiment as the reference loop, but points are drawn as (n, 2) float64
tensors and tested in one vectorized comparison per batch. Batches are capped
at `batch_size` points so a run of a billion samples never tries to allocate
a billion-row tensor.

Results are not bit-identical to the python backend for the same seed: the
two backends use different generators.
"""

import logging
from typing import Optional

import torch

from montepi.estimator.core import RunResult, validate_count
from montepi.estimator.exceptions import InvalidArgument
from montepi.logging.logger import get_logger

logger: logging.Logger = get_logger(__name__)

DEFAULT_BATCH_SIZE = 1_000_000


def count_inside(points: torch.Tensor) -> int:
    """Number of rows (x, y) with x² + y² < 1."""
    return int((points.pow(2).sum(dim=1) < 1.0).sum().item())


@torch.no_grad()
def estimate_pi_tensor(
    count: int,
    generator: Optional[torch.Generator] = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> RunResult:
    """
    Estimate pi from `count` random points using batched tensors.

    Args:
        count: Number of sample points. Must be a positive integer.
        generator: CPU torch.Generator. None means a fresh one seeded from OS entropy.
        batch_size: Maximum points drawn per batch.

    Raises:
        InvalidArgument: Invalid count or non-positive batch_size.
    """
    count = validate_count(count)
    if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
        raise InvalidArgument(f"batch_size must be a positive integer, got {batch_size!r}")

    if generator is None:
        generator = torch.Generator()
        generator.seed()

    inside = 0
    remaining = count
    batches = 0
    while remaining > 0:
        n = min(batch_size, remaining)
        points = torch.rand((n, 2), generator=generator, dtype=torch.float64)
        inside += count_inside(points)
        remaining -= n
        batches += 1

    logger.debug(
        "Tensor sampling finished",
        extra={"count": count, "batches": batches, "batch_size": batch_size},
    )

    return RunResult(count=count, inside=inside, estimate=4.0 * inside / count)
