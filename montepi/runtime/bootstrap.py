# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for montepi.

Two jobs:
  1. Validate the environment and log a startup line before sampling.
  2. Build the random sources a run owns.

Random sources are always explicit objects handed to the estimator. Nothing
here seeds the process-global `random` module or torch's default generator,
so a seeded run can never be disturbed by other code drawing numbers.
"""

import random
from pathlib import Path
from typing import Optional

import torch

from montepi.config.schema import GlobalConfig
from montepi.logging.logger import get_logger
from montepi.runtime.environment import check_minimum_python, get_system_info


def make_random_source(seed: Optional[int] = None) -> random.Random:
    """
    Create a private random.Random for the python backend.

    Args:
        seed: Non-negative seed. None seeds from OS entropy.
    """
    return random.Random(seed)


def make_torch_generator(seed: Optional[int] = None) -> torch.Generator:
    """
    Create a private CPU torch.Generator for the torch backend.

    A fresh torch.Generator starts from a fixed default seed, so the
    unseeded case has to ask for OS entropy explicitly.
    """
    generator = torch.Generator()
    if seed is None:
        generator.seed()
    else:
        generator.manual_seed(seed)
    return generator


def bootstrap(config: GlobalConfig) -> None:
    """
    Run the bootstrap sequence: environment check, then the startup log line.

    Args:
        config: The validated global configuration.
    """
    check_minimum_python()

    log_file = None
    if config.log_file is not None:
        log_file = Path(config.log_file)

    logger = get_logger("montepi.runtime", log_level=config.log_level, log_file=log_file)

    system_info = get_system_info()
    logger.info(
        "montepi bootstrap complete",
        extra={
            "seed": config.seed,
            "python_version": system_info.python_version,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
            "hostname": system_info.hostname,
        },
    )
