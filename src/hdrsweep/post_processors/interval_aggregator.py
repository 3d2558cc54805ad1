# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterable, Sequence

from hdrsweep.common.config import ServiceLevelExpectation
from hdrsweep.common.constants import MICROS_PER_SECOND
from hdrsweep.common.enums import REPORTED_STATISTICS, StatisticType
from hdrsweep.common.exceptions import HistogramError
from hdrsweep.common.mixins import HdrSweepLoggerMixin
from hdrsweep.common.models import (
    Histogram,
    Interval,
    Marker,
    Metric,
    MetricData,
    MetricValue,
    RunMetadata,
)
from hdrsweep.metrics import MovingWindowHistogram, extract_statistic

PERCENTILE_NAMES = "PERCENTILE_NAMES"
PERCENTILE_VALUES = "PERCENTILE_VALUES"
PERCENTILE_COUNTS = "PERCENTILE_COUNTS"
MW_VALUES = "VALUES"
MW_COUNTS = "COUNTS"


class _SLETracker:
    """Moving window state and output series for one service level expectation."""

    def __init__(self, sle: ServiceLevelExpectation, template: Histogram) -> None:
        self.sle = sle
        self.window = MovingWindowHistogram(
            template, sle.percentile, sle.moving_window
        )
        self.values: list[float] = []
        self.counts: list[float] = []
        self.max_value: float = 0.0


class IntervalAggregator(HdrSweepLoggerMixin):
    """Aggregates the sample histograms of one (operation, metric, interval).

    Each call to `add` represents one time-series point: the histograms of the
    batch that fall inside the interval are merged into a per-call sum, and
    every reported statistic of that sum is appended to its series. Threshold
    windows track a trailing percentile across calls. `finalize` turns the
    accumulated state into `Metric` records.
    """

    def __init__(
        self,
        sle_config: Sequence[ServiceLevelExpectation],
        interval: Interval,
        histogram_factor: float,
        template: Histogram | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.interval = interval.model_copy()
        self.histogram_factor = histogram_factor
        self._template = template or Histogram()
        self.histogram = self._template.empty_like()
        self._series: dict[StatisticType, list[float]] = {
            statistic: [] for statistic in REPORTED_STATISTICS
        }
        self._trackers = [_SLETracker(sle, self._template) for sle in sle_config]
        self.metric: Metric | None = None

    @property
    def sle_config(self) -> list[ServiceLevelExpectation]:
        return [tracker.sle for tracker in self._trackers]

    @property
    def series(self) -> dict[StatisticType, list[float]]:
        return self._series

    @property
    def moving_window_max(self) -> list[float]:
        """Highest moving-window value seen per threshold, in configuration order."""
        return [tracker.max_value for tracker in self._trackers]

    def moving_window_series(self, index: int) -> tuple[list[float], list[float]]:
        tracker = self._trackers[index]
        return tracker.values, tracker.counts

    def adjust_bounds(self, timestamp: int) -> None:
        self.interval.adjust(timestamp)

    def add(self, histograms: Iterable[Histogram]) -> int:
        """Merge the histograms of one batch that lie inside the interval.

        Returns:
            The number of histograms merged.
        """
        batch_sum = self._template.empty_like()
        added = 0
        for histogram in histograms:
            if histogram is None:
                raise HistogramError(
                    f"Missing histogram in batch for interval {self.interval}"
                )
            if not self.interval.contains(
                histogram.start_timestamp, histogram.end_timestamp
            ):
                continue
            self.histogram.add(histogram)
            batch_sum.add(histogram)
            for tracker in self._trackers:
                tracker.window.add(histogram)
            added += 1

        if added > 0:
            for statistic, values in self._series.items():
                values.append(
                    extract_statistic(statistic, batch_sum, self.histogram_factor)
                )

        for tracker in self._trackers:
            mw_value = tracker.window.value_at_percentile() / self.histogram_factor
            tracker.values.append(mw_value)
            tracker.counts.append(float(tracker.window.total_count))
            tracker.max_value = max(tracker.max_value, mw_value)

        self.trace(lambda: f"Merged {added} histograms into {self.interval}")
        return added

    def finalize(
        self,
        run: RunMetadata,
        metric_data: MetricData,
        percentiles: Sequence[float] | None = None,
        merge_histograms: int = 1,
    ) -> Metric | None:
        """Build the interval's summary metric and one moving-window metric per threshold.

        Returns:
            The summary metric, or None if the interval saw no samples or has
            an empty time range.
        """
        total_count = self.histogram.total_count
        start = self.histogram.start_timestamp
        finish = self.histogram.end_timestamp
        self.debug(
            lambda: f"Finalizing interval {self.interval}: total_count={total_count}, "
            f"start={start}, finish={finish}"
        )
        if total_count == 0 or finish <= start:
            return None

        metric_interval_name = f"{run.metric_name} {self.interval.name}".strip()
        metric = Metric(
            name=metric_interval_name,
            operation=run.operation_name,
            units=run.time_units,
            start=start,
            finish=finish,
            delay=run.interval_length * merge_histograms,
            total_values=total_count,
            retry=run.step,
            percent_of_high_bound=run.rate_percent,
            target_rate=run.target_rate,
            actual_rate=total_count / ((finish - start) / MICROS_PER_SECOND),
            mean_value=self.histogram.mean / self.histogram_factor,
        )
        metric_data.add(metric)
        for statistic, values in self._series.items():
            metric.add(MetricValue(name=str(statistic), values=list(values)))

        if percentiles:
            self._add_percentile_distribution(metric, percentiles)

        for tracker in self._trackers:
            sle = tracker.sle
            self.debug(lambda: f"SLE {sle.long_name} moving window max {tracker.max_value}")
            mw_metric = Metric(
                name=f"{run.metric_name} {sle.long_name} {self.interval.name}".strip(),
                operation=run.operation_name,
                units=run.time_units,
                start=start,
                finish=finish,
                delay=run.interval_length,
                total_values=total_count,
                retry=run.step,
                percent_of_high_bound=run.rate_percent,
                target_rate=run.target_rate,
            )
            mw_metric.add(MetricValue(name=MW_VALUES, values=list(tracker.values)))
            mw_metric.add(MetricValue(name=MW_COUNTS, values=list(tracker.counts)))
            if sle.has_marker:
                mw_metric.add_marker(
                    Marker(name=sle.marker_label, x_value=None, y_value=sle.marker_value)
                )
            metric_data.add(mw_metric)

        self.metric = metric
        return metric

    def _add_percentile_distribution(
        self, metric: Metric, percentiles: Sequence[float]
    ) -> None:
        """Add percentile values and the number of samples at or above each of them."""
        high_value = self.histogram.value_at_percentile(100)
        values: list[float] = []
        counts: list[float] = []
        for percentile in percentiles:
            value = self.histogram.value_at_percentile(percentile)
            values.append(value / self.histogram_factor)
            counts.append(float(self.histogram.count_between(value, high_value)))
        metric.add(MetricValue(name=PERCENTILE_NAMES, values=list(percentiles)))
        metric.add(MetricValue(name=PERCENTILE_VALUES, values=values))
        metric.add(MetricValue(name=PERCENTILE_COUNTS, values=counts))
