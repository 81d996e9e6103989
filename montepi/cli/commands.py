# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Command handler for the montepi CLI.

The handler loads config, bootstraps the runtime, runs the estimator and
reports. It returns an exit code instead of raising, so every failure path
ends in exactly one structured log entry plus the matching code.

The estimate line is the only thing written to stdout. Everything else goes
through the structured logger on stderr.
"""

import argparse
import logging
import sys
from pathlib import Path

from montepi.cli.exit_codes import CONFIG_ERROR, RUNTIME_ERROR, SUCCESS, USER_ERROR
from montepi.config.exceptions import ConfigError
from montepi.config.loader import load_config
from montepi.config.schema import MontePiConfig
from montepi.estimator.backends import run_estimate
from montepi.estimator.exceptions import InvalidArgument
from montepi.logging.logger import apply_log_level, get_logger
from montepi.reporting.writer import format_estimate_line, write_result
from montepi.runtime.bootstrap import bootstrap

DEFAULT_CONFIG_VERSION = "1.0.0"


def _default_config() -> MontePiConfig:
    return MontePiConfig.model_validate({"global": {"config_version": DEFAULT_CONFIG_VERSION}})


def _load_and_bootstrap(
    args: argparse.Namespace,
) -> tuple[int, MontePiConfig | None, logging.Logger]:
    """
    Load config (or defaults), settle the log level, run bootstrap.

    --log-level wins over the config's log_level. Returns
    (exit_code, config, logger); on a non-SUCCESS code the caller returns
    it immediately.
    """
    logger = get_logger("montepi.cli", log_level=args.log_level or "WARNING")

    if args.config is not None:
        try:
            config = load_config(Path(args.config))
        except ConfigError as err:
            logger.error(
                "Configuration error",
                extra={"config": args.config, "error": str(err)},
            )
            return CONFIG_ERROR, None, logger
    else:
        config = _default_config()
        logger.debug("No config provided, running with defaults")

    log_level = args.log_level or config.global_config.log_level
    global_config = config.global_config.model_copy(update={"log_level": log_level})

    log_file = Path(global_config.log_file) if global_config.log_file is not None else None
    logger = get_logger("montepi.cli", log_level=log_level, log_file=log_file)

    bootstrap(global_config)
    apply_log_level(log_level, log_file=log_file)

    return SUCCESS, config, logger


def handle_estimate(args: argparse.Namespace) -> int:
    """Run one estimation and print the estimate line."""
    exit_code, config, logger = _load_and_bootstrap(args)
    if exit_code != SUCCESS or config is None:
        return exit_code

    seed = args.seed if args.seed is not None else config.global_config.seed
    backend = args.backend or config.estimator.backend

    try:
        logger.info(
            "Estimation started",
            extra={"count": args.number, "backend": backend, "seed": seed},
        )

        result = run_estimate(
            args.number,
            backend=backend,
            seed=seed,
            batch_size=config.estimator.batch_size,
            progress_interval=config.estimator.progress_interval,
        )

        sys.stdout.write(format_estimate_line(result) + "\n")
        sys.stdout.flush()

        if args.output is not None:
            write_result(result, Path(args.output), seed=seed, backend=backend)

        logger.info(
            "Estimation finished",
            extra={"count": result.count, "inside": result.inside, "estimate": result.estimate},
        )
        return SUCCESS

    except InvalidArgument as err:
        logger.error("Invalid argument", extra={"error": str(err)})
        return USER_ERROR
    except Exception as err:
        logger.error("Runtime error", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR
