# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the reference estimator.

Randomness is handled two ways:
  - a scripted source that returns fixed coordinates, for exact assertions
  - seeded random.Random instances, for determinism and bounds
"""

import json
import logging
import random
from collections.abc import Iterable, Iterator

import pytest

from montepi.estimator.core import RunResult, estimate_pi, parse_count, validate_count
from montepi.estimator.exceptions import EstimatorError, InvalidArgument
from montepi.logging.logger import get_logger


class ScriptedSource:
    """Stands in for random.Random and hands out a fixed sequence."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = iter(values)

    def random(self) -> float:
        return next(self._values)


class TestValidateCount:
    @pytest.mark.parametrize("count", [1, 10, 100_000])
    def test_positive_integers_pass_through(self, count: int) -> None:
        assert validate_count(count) == count

    @pytest.mark.parametrize("count", [0, -1, -100])
    def test_non_positive_counts_are_rejected(self, count: int) -> None:
        with pytest.raises(InvalidArgument, match="positive"):
            validate_count(count)

    @pytest.mark.parametrize("count", [1.5, 10.0, "10", True, False])
    def test_non_integers_are_rejected(self, count: object) -> None:
        with pytest.raises(InvalidArgument, match="integer"):
            validate_count(count)

    def test_missing_count_is_rejected(self) -> None:
        with pytest.raises(InvalidArgument, match="required"):
            validate_count(None)

    def test_invalid_argument_is_a_value_error(self) -> None:
        assert issubclass(InvalidArgument, ValueError)
        assert issubclass(InvalidArgument, EstimatorError)


class TestParseCount:
    def test_parses_decimal_text(self) -> None:
        assert parse_count("10") == 10

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert parse_count(" 7 ") == 7

    @pytest.mark.parametrize("text", ["abc", "1.5", "", "ten"])
    def test_non_integer_text_is_rejected(self, text: str) -> None:
        with pytest.raises(InvalidArgument):
            parse_count(text)

    @pytest.mark.parametrize("text", ["0", "-3"])
    def test_non_positive_text_is_rejected(self, text: str) -> None:
        with pytest.raises(InvalidArgument, match="positive"):
            parse_count(text)


class TestScriptedSampling:
    def test_counts_points_inside_quarter_circle(self) -> None:
        # (0.0, 0.0) inside, (0.9, 0.9) outside, (0.5, 0.5) inside, (0.1, 0.2) inside
        source = ScriptedSource([0.0, 0.0, 0.9, 0.9, 0.5, 0.5, 0.1, 0.2])
        result = estimate_pi(4, rng=source)
        assert result == RunResult(count=4, inside=3, estimate=3.0)

    def test_points_on_the_arc_are_excluded(self) -> None:
        source = ScriptedSource([1.0, 0.0, 0.0, 1.0])
        result = estimate_pi(2, rng=source)
        assert result.inside == 0
        assert result.estimate == 0.0

    def test_all_points_inside_gives_four(self) -> None:
        source = ScriptedSource([0.1] * 20)
        result = estimate_pi(10, rng=source)
        assert result.inside == 10
        assert result.estimate == 4.0

    def test_draws_exactly_two_values_per_sample(self) -> None:
        source = ScriptedSource([0.2, 0.3, 0.4, 0.5])
        estimate_pi(2, rng=source)
        with pytest.raises(StopIteration):
            source.random()


class TestSeededSampling:
    @pytest.mark.parametrize("count", [1, 7, 1000])
    def test_inside_and_estimate_are_bounded(self, count: int) -> None:
        result = estimate_pi(count, rng=random.Random(count))
        assert 0 <= result.inside <= count
        assert 0.0 <= result.estimate <= 4.0
        assert result.count == count

    def test_same_seed_gives_same_result(self) -> None:
        first = estimate_pi(5000, rng=random.Random(42))
        second = estimate_pi(5000, rng=random.Random(42))
        assert first == second

    def test_estimate_matches_inside_ratio(self) -> None:
        result = estimate_pi(2000, rng=random.Random(3))
        assert result.estimate == 4.0 * result.inside / 2000

    def test_global_random_state_is_untouched(self) -> None:
        random.seed(1234)
        state = random.getstate()
        estimate_pi(500, rng=random.Random(9))
        estimate_pi(500)
        assert random.getstate() == state

    def test_large_run_lands_near_pi(self) -> None:
        result = estimate_pi(100_000, rng=random.Random(12345))
        assert 2.8 <= result.estimate <= 3.4

    def test_run_result_is_immutable(self) -> None:
        result = estimate_pi(10, rng=random.Random(0))
        with pytest.raises(AttributeError):
            result.inside = 0  # type: ignore[misc]


class TestInvalidRuns:
    @pytest.mark.parametrize("count", [0, -5, 2.5, "100"])
    def test_invalid_count_fails_before_sampling(self, count: object) -> None:
        source = ScriptedSource([])
        with pytest.raises(InvalidArgument):
            estimate_pi(count, rng=source)  # type: ignore[arg-type]

    def test_negative_progress_interval_is_rejected(self) -> None:
        with pytest.raises(InvalidArgument, match="progress_interval"):
            estimate_pi(10, rng=random.Random(0), progress_interval=-1)

    def test_progress_logging_does_not_change_result(self) -> None:
        plain = estimate_pi(300, rng=random.Random(5))
        logged = estimate_pi(300, rng=random.Random(5), progress_interval=100)
        assert plain == logged


@pytest.fixture()
def captured_core_logger(capsys: pytest.CaptureFixture[str]) -> Iterator[logging.Logger]:
    """
    Rebind the estimator's module logger to the captured stderr at INFO.

    Its original handlers were bound to the real stderr at import time, so
    they're swapped out for the test and restored afterwards.
    """
    logger = logging.getLogger("montepi.estimator.core")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    get_logger("montepi.estimator.core", log_level="INFO")
    yield logger
    logger.handlers.clear()
    logger.handlers.extend(saved_handlers)
    logger.setLevel(saved_level)


class TestProgressLogging:
    def test_progress_entries_are_emitted_at_each_interval(
        self,
        captured_core_logger: logging.Logger,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        # 100 points inside, then 100 outside, then 100 inside again.
        values = [0.1, 0.1] * 100 + [0.9, 0.9] * 100 + [0.1, 0.1] * 100
        result = estimate_pi(300, rng=ScriptedSource(values), progress_interval=100)

        entries = [
            json.loads(line)
            for line in capsys.readouterr().err.splitlines()
            if line.startswith("{")
        ]
        progress = [e for e in entries if e["msg"] == "Sampling progress"]

        assert [e["attempts"] for e in progress] == [100, 200, 300]
        assert [e["inside"] for e in progress] == [100, 100, 200]
        assert [e["running_estimate"] for e in progress] == [4.0, 2.0, 4.0 * 200 / 300]
        assert all(e["level"] == "INFO" for e in progress)
        assert progress[-1]["running_estimate"] == result.estimate

    def test_no_progress_entries_when_disabled(
        self,
        captured_core_logger: logging.Logger,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        estimate_pi(300, rng=random.Random(1))
        assert "Sampling progress" not in capsys.readouterr().err
