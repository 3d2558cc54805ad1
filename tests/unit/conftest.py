# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for testing hdrsweep.

Sample histograms in these tests use one-second ticks with microsecond
timestamps, and values recorded in microseconds.
"""

from collections.abc import Callable, Iterable

import pytest

from hdrsweep.common.config import AnalyzerConfig, ServiceLevelExpectation
from hdrsweep.common.constants import MICROS_PER_SECOND
from hdrsweep.common.models import Histogram, MetricData, RunMetadata
from hdrsweep.post_processors import RunResult, RunResultsProcessor

TickFactory = Callable[..., Histogram]


@pytest.fixture
def tick() -> TickFactory:
    """Factory for a histogram covering one-second tick ``index``."""

    def _tick(index: int, values: Iterable[int], tick_seconds: int = 1) -> Histogram:
        start = index * tick_seconds * MICROS_PER_SECOND
        return Histogram.from_values(
            values,
            start_timestamp=start,
            end_timestamp=start + tick_seconds * MICROS_PER_SECOND,
        )

    return _tick


@pytest.fixture
def p99_sle() -> ServiceLevelExpectation:
    """p99 must stay at or below 5ms over a window of 3 ticks."""
    return ServiceLevelExpectation(percentile=99, moving_window=3, max_value=5)


@pytest.fixture
def metric_data() -> MetricData:
    return MetricData()


@pytest.fixture
def run_factory(tick: TickFactory, metric_data: MetricData) -> Callable[..., RunResult]:
    """Factory running a full aggregation pass for one run of constant-latency ticks."""

    def _run(
        config: AnalyzerConfig,
        target_rate: float,
        latency_us: int | None,
        ticks: int = 5,
        samples_per_tick: int = 100,
        operation_name: str = "write",
        metric_name: str = "response_time",
    ) -> RunResult:
        processor = RunResultsProcessor(
            config,
            RunMetadata(
                operation_name=operation_name,
                metric_name=metric_name,
                target_rate=target_rate,
            ),
        )
        if latency_us is not None:
            processor.process(
                tick(i, [latency_us] * samples_per_tick) for i in range(ticks)
            )
        return processor.finalize(metric_data)

    return _run
