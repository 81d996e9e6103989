# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Exceptions raised by the estimator."""


class EstimatorError(Exception):
    """Base for all estimator errors."""


class InvalidArgument(EstimatorError, ValueError):
    """
    Raised for a sample count that is missing, not an integer, zero or
    negative, and for other out-of-range run parameters. Detected before any
    sampling happens.
    """
