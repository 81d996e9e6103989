# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Monte Carlo pi estimation.

  - core: RunResult, count validation and the reference sampling loop
  - tensor: batched PyTorch backend
  - backends: backend registry and seeded dispatch
"""

from montepi.estimator.core import RunResult, estimate_pi, parse_count, validate_count
from montepi.estimator.exceptions import EstimatorError, InvalidArgument

__all__ = [
    "EstimatorError",
    "InvalidArgument",
    "RunResult",
    "estimate_pi",
    "parse_count",
    "validate_count",
]
