# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for montepi.

Each config section is a frozen pydantic model:
  - frozen=True: immutable after construction
  - extra="forbid": unknown fields fail immediately
  - validate_default=True: defaults get type-checked too

A config file looks like:

    global:
      config_version: "1.0.0"
      seed: 42
      log_level: "INFO"
    estimator:
      backend: "torch"
      batch_size: 500000
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# torch.Generator.manual_seed takes an unsigned 64-bit seed.
MAX_SEED = 2**64 - 1

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GlobalConfig(BaseModel):
    """Cross-cutting settings: reproducibility and observability."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    seed: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_SEED,
        description="Seed for the random source. None draws from OS entropy",
    )
    log_level: str = Field(
        default="WARNING",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got '{value}'")
        return upper


class EstimatorConfig(BaseModel):
    """Knobs for the sampling run itself."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    backend: Literal["python", "torch"] = Field(
        default="python",
        description="Sampling backend: the reference loop or batched PyTorch",
    )
    batch_size: int = Field(
        default=1_000_000,
        ge=1,
        description="Points drawn per batch by the torch backend",
    )
    progress_interval: int = Field(
        default=0,
        ge=0,
        description="Log progress every N samples in the python backend. 0 disables",
    )


class MontePiConfig(BaseModel):
    """
    Top-level config container. Only `global:` is required; a missing
    `estimator:` section means all defaults.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    estimator: EstimatorConfig = Field(default_factory=EstimatorConfig)
