# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
montepi — Monte Carlo estimation of pi.

Subsystems:
  - estimator: sampling backends (pure Python and PyTorch)
  - reporting: the report line and the JSON run record
  - config: YAML + pydantic configuration
  - runtime: environment checks and random source construction
  - cli: the `montepi` command
"""

__version__ = "0.1.0"
