# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Run report writer.

Two outputs:
  - the estimate line printed on stdout, e.g.
        Final pi estimate from 10 attempts = 3.2
  - an optional JSON run record for scripts and notebooks:
        {"abs_error": ..., "backend": "python", "count": 10, "estimate": 3.2,
         "inside": 8, "seed": 42}

The JSON record is key-sorted so two runs with the same seed produce
byte-identical files.
"""

import json
import math
from pathlib import Path
from typing import Optional

from montepi.estimator.core import RunResult
from montepi.logging.logger import get_logger

logger = get_logger(__name__)


def format_estimate_line(result: RunResult) -> str:
    """The one line montepi prints for a finished run."""
    return f"Final pi estimate from {result.count} attempts = {result.estimate}"


def result_to_dict(
    result: RunResult,
    seed: Optional[int] = None,
    backend: str = "python",
) -> dict[str, object]:
    """Flatten a run into plain JSON-friendly values."""
    return {
        "count": result.count,
        "inside": result.inside,
        "estimate": result.estimate,
        "abs_error": abs(result.estimate - math.pi),
        "seed": seed,
        "backend": backend,
    }


def write_result(
    result: RunResult,
    output_path: Path,
    seed: Optional[int] = None,
    backend: str = "python",
) -> Path:
    """
    Write the JSON run record, creating parent directories as needed.

    Returns the path written.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(result_to_dict(result, seed=seed, backend=backend), indent=2, sort_keys=True)
        + "\n",
        encoding="utf-8",
    )

    logger.info("Run record written", extra={"output": str(output_path)})

    return output_path
