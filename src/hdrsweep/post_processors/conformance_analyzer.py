# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from hdrsweep.common.config import ServiceLevelExpectation
from hdrsweep.common.constants import NO_DATA_VALUE
from hdrsweep.common.enums import REPORTED_STATISTICS, StatisticType
from hdrsweep.common.metric_utils import format_rate
from hdrsweep.common.mixins import HdrSweepLoggerMixin
from hdrsweep.common.models import (
    Marker,
    Metric,
    MetricData,
    MetricValue,
    ThresholdConformance,
)
from hdrsweep.metrics import extract_statistic
from hdrsweep.post_processors.run_results_processor import RunResult


@dataclass
class _SweepState:
    """Accumulator of the rate sweep over one operation/metric group."""

    pending: list[ServiceLevelExpectation]
    broken_rates: dict[str, float] = field(default_factory=dict)
    last_passing_rates: dict[str, float] = field(default_factory=dict)
    markers: list[Marker] = field(default_factory=list)


class ConformanceAnalyzer(HdrSweepLoggerMixin):
    """Finds the rate at which each service level expectation breaks across a rate sweep.

    Runs are grouped by operation and metric name and scanned in increasing
    rate order. The first run whose moving-window value exceeds a threshold
    breaks it; that run's rate is reported as the threshold's conforming rate.
    Thresholds that never break report the highest tested rate, labeled
    ``(unbroken)``. Alongside, cross-rate summary series of every reported
    statistic are emitted for each group.
    """

    def __init__(
        self,
        sle_config: Sequence[ServiceLevelExpectation],
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.sle_config = list(sle_config)

    @staticmethod
    def group_results(results: Iterable[RunResult]) -> dict[str, list[RunResult]]:
        """Split results by operation and metric name, each group sorted by target rate."""
        groups: dict[str, list[RunResult]] = {}
        for result in results:
            groups.setdefault(result.group_name, []).append(result)
        return {
            name: sorted(group, key=lambda result: result.target_rate)
            for name, group in groups.items()
        }

    def process(
        self, results: Iterable[RunResult], metric_data: MetricData
    ) -> list[ThresholdConformance]:
        """Analyze every group, appending the cross-rate records to ``metric_data``."""
        conformance: list[ThresholdConformance] = []
        for group_name, group in self.group_results(results).items():
            conformance.extend(self.process_group(group_name, group, metric_data))
        return conformance

    def find_breaks(self, group_name: str, results: Sequence[RunResult]) -> _SweepState:
        """Scan runs in increasing rate order, dropping each threshold at its first break."""
        state = _SweepState(pending=list(self.sle_config))
        for result in results:
            if result.records_count == 0:
                continue
            still_pending: list[ServiceLevelExpectation] = []
            for sle in state.pending:
                if result.check_sle(sle):
                    state.last_passing_rates[sle.long_name] = result.target_rate
                    still_pending.append(sle)
                    continue
                self.info(
                    lambda: f"{group_name} SLE {sle} broken at {format_rate(result.target_rate)} "
                    f"{result.metadata.rate_units}"
                )
                state.broken_rates[sle.long_name] = result.target_rate
                state.markers.append(
                    Marker(
                        name=f"{sle.name_with_max} (broken)",
                        x_value=result.target_rate,
                        y_value=sle.max_value,
                    )
                )
            state.pending = still_pending
        return state

    def process_group(
        self,
        group_name: str,
        results: Sequence[RunResult],
        metric_data: MetricData,
    ) -> list[ThresholdConformance]:
        empty_count = sum(1 for result in results if result.records_count == 0)
        self.debug(lambda: f"{group_name}: {len(results)} runs, {empty_count} empty")
        if empty_count == len(results):
            return []

        state = self.find_breaks(group_name, results)
        max_rate = results[-1].target_rate
        for sle in state.pending:
            self.info(lambda: f"{group_name} SLE {sle} was not broken")
            state.markers.append(
                Marker(
                    name=f"{sle.name_with_max} (unbroken)",
                    x_value=max_rate,
                    y_value=sle.max_value,
                )
            )

        reference = next(result for result in results if result.records_count > 0)
        operation = reference.operation_name
        metric_name = reference.metric_name
        units = reference.metadata.time_units
        rate_units = reference.metadata.rate_units
        x_values = [format_rate(result.target_rate) for result in results]

        summaries = {
            kind: Metric(
                name=f"{metric_name} {kind}",
                operation=operation,
                units=units,
                x_units=rate_units,
                x_values=x_values,
            )
            for kind in ("summary_hdr", "summary_max", "summary_avg")
        }
        hdr_series, max_series, avg_series = self._summary_series(results)
        for statistic in REPORTED_STATISTICS:
            summaries["summary_hdr"].add(
                MetricValue(name=str(statistic), values=hdr_series[statistic])
            )
            summaries["summary_max"].add(
                MetricValue(name=str(statistic), values=max_series[statistic])
            )
            summaries["summary_avg"].add(
                MetricValue(name=str(statistic), values=avg_series[statistic])
            )
        for summary in summaries.values():
            metric_data.add(summary)

        conformance: list[ThresholdConformance] = []
        for sle in self.sle_config:
            broken = sle.long_name in state.broken_rates
            rate = state.broken_rates[sle.long_name] if broken else max_rate
            label = "broken" if broken else "unbroken"
            sle_operation = f"{operation} {sle.long_name}"
            metric_data.add(
                Metric(
                    name=f"{metric_name} conforming_rate ({label})",
                    operation=sle_operation,
                    units=rate_units,
                    value=rate,
                )
            )
            metric_data.add(
                Metric(
                    name=f"{metric_name} summary_max",
                    operation=sle_operation,
                    units=units,
                    x_units=rate_units,
                    x_values=x_values,
                    group=f"{group_name} mw_summary_max",
                ).add(
                    MetricValue(
                        name=sle.long_name,
                        values=[self._moving_window_max(result, sle) for result in results],
                    )
                )
            )
            conformance.append(
                ThresholdConformance(
                    group_name=group_name,
                    sle=sle,
                    broken=broken,
                    conforming_rate=rate,
                    last_passing_rate=state.last_passing_rates.get(sle.long_name),
                )
            )

        for summary in summaries.values():
            summary.set_markers(state.markers)
        return conformance

    def _summary_series(
        self, results: Sequence[RunResult]
    ) -> tuple[
        dict[StatisticType, list[float]],
        dict[StatisticType, list[float]],
        dict[StatisticType, list[float]],
    ]:
        """Per statistic: the full-run histogram value (empty runs skipped), and the
        max and mean of the full-run time-series (-1 for runs without data)."""
        hdr_series = {statistic: [] for statistic in REPORTED_STATISTICS}
        max_series = {statistic: [] for statistic in REPORTED_STATISTICS}
        avg_series = {statistic: [] for statistic in REPORTED_STATISTICS}
        for result in results:
            summary = result.summary
            metric = (
                summary.metric
                if summary is not None and result.records_count > 0
                else None
            )
            if metric is not None:
                for statistic in REPORTED_STATISTICS:
                    hdr_series[statistic].append(
                        extract_statistic(
                            statistic, summary.histogram, summary.histogram_factor
                        )
                    )
            for statistic in REPORTED_STATISTICS:
                metric_value = (
                    metric.by_type(statistic) if metric is not None else None
                )
                if metric_value is None:
                    max_series[statistic].append(NO_DATA_VALUE)
                    avg_series[statistic].append(NO_DATA_VALUE)
                elif statistic == StatisticType.COUNTS:
                    max_series[statistic].append(metric_value.sum_value())
                    avg_series[statistic].append(metric_value.sum_value())
                else:
                    max_series[statistic].append(metric_value.max_value())
                    avg_series[statistic].append(metric_value.avg_value())
        return hdr_series, max_series, avg_series

    @staticmethod
    def _moving_window_max(result: RunResult, sle: ServiceLevelExpectation) -> float:
        if result.records_count == 0:
            return NO_DATA_VALUE
        max_value = result.moving_window_max(sle)
        return NO_DATA_VALUE if max_value is None else max_value
