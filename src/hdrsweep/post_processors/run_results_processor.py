# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from hdrsweep.common.config import AnalyzerConfig, ServiceLevelExpectation
from hdrsweep.common.exceptions import InvalidStateError
from hdrsweep.common.mixins import HdrSweepLoggerMixin
from hdrsweep.common.models import Histogram, MetricData, RunMetadata
from hdrsweep.post_processors.interval_aggregator import IntervalAggregator


@dataclass
class RunResult:
    """The finalized aggregation of one run.

    ``intervals[0]`` always covers the full run; the remaining entries are the
    configured sub-intervals in configuration order.
    """

    metadata: RunMetadata
    intervals: list[IntervalAggregator] = field(default_factory=list)

    @property
    def operation_name(self) -> str:
        return self.metadata.operation_name

    @property
    def metric_name(self) -> str:
        return self.metadata.metric_name

    @property
    def group_name(self) -> str:
        return self.metadata.group_name

    @property
    def target_rate(self) -> float:
        return self.metadata.target_rate

    @property
    def records_count(self) -> int:
        return self.metadata.records_count

    @property
    def summary(self) -> IntervalAggregator | None:
        """The full-run aggregator, if the run has one."""
        return self.intervals[0] if self.intervals else None

    def moving_window_max(self, sle: ServiceLevelExpectation) -> float | None:
        """The full-run moving window maximum for ``sle``, or None if it was not tracked."""
        summary = self.summary
        if summary is None:
            return None
        for tracked, max_value in zip(
            summary.sle_config, summary.moving_window_max, strict=True
        ):
            if tracked.long_name == sle.long_name:
                return max_value
        return None

    def check_sle(self, sle: ServiceLevelExpectation) -> bool:
        """Whether the run held ``sle`` over its whole duration."""
        max_value = self.moving_window_max(sle)
        if max_value is None:
            raise InvalidStateError(
                f"SLE {sle.long_name} was not tracked for run {self.group_name} at {self.target_rate}"
            )
        return max_value <= sle.max_value


class RunResultsProcessor(HdrSweepLoggerMixin):
    """Feeds the sample histograms of one run into its interval aggregators.

    One aggregator covers the full run, one more is created for each configured
    interval. Open-ended intervals are widened to the end of every histogram
    seen so that they extend to the end of the run.
    """

    def __init__(self, config: AnalyzerConfig, run: RunMetadata, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config
        self.run = run
        template = Histogram(
            significant_figures=config.significant_figures,
            highest_trackable_value=config.highest_trackable_value,
        )
        self._open_ended: list[IntervalAggregator] = []
        self.aggregators: list[IntervalAggregator] = [
            IntervalAggregator(
                config.sle_config,
                config.full_run_interval,
                config.histogram_factor,
                template=template,
            )
        ]
        for interval_config in config.intervals:
            aggregator = IntervalAggregator(
                config.sle_config,
                interval_config.to_interval(),
                config.histogram_factor,
                template=template,
            )
            self.aggregators.append(aggregator)
            if interval_config.is_open_ended:
                self._open_ended.append(aggregator)
        self._finalized = False

    def add(self, histograms: Sequence[Histogram]) -> None:
        """Add one batch of sample histograms (one time-series point)."""
        if self._finalized:
            raise InvalidStateError("Cannot add histograms to a finalized run")
        for histogram in histograms:
            if histogram is None:
                continue
            for aggregator in self._open_ended:
                aggregator.adjust_bounds(histogram.end_timestamp)
        for aggregator in self.aggregators:
            aggregator.add(histograms)

    def process(self, histograms: Iterable[Histogram]) -> None:
        """Add a flat sequence of tick histograms, grouped into batches of
        ``merge_histograms`` ticks per time-series point."""
        batch: list[Histogram] = []
        for histogram in histograms:
            batch.append(histogram)
            if len(batch) == self.config.merge_histograms:
                self.add(batch)
                batch = []
        if batch:
            self.add(batch)

    def finalize(self, metric_data: MetricData) -> RunResult:
        """Finalize every interval into ``metric_data`` and return the run result."""
        if self._finalized:
            raise InvalidStateError("Run results were already finalized")
        self._finalized = True

        total_count = self.aggregators[0].histogram.total_count
        run = self.run.model_copy(update={"records_count": total_count})
        self.debug(
            lambda: f"Finalizing run {run.group_name} at {run.target_rate} {run.rate_units} "
            f"with {total_count} records"
        )
        for aggregator in self.aggregators:
            aggregator.finalize(
                run,
                metric_data,
                percentiles=self.config.percentiles,
                merge_histograms=self.config.merge_histograms,
            )
        return RunResult(metadata=run, intervals=list(self.aggregators))
