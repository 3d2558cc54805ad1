# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Time-stamped HDR histogram used as the unit of sample data.

Wraps ``hdrh.histogram.HdrHistogram`` and adds the start/end time range of the
measurement tick the histogram covers. Timestamps are integer microseconds;
recorded values are in whatever unit the producer used (usually ns or us), and
are scaled to the reporting unit by the consumers.
"""

from __future__ import annotations

from collections.abc import Iterable

from hdrh.histogram import HdrHistogram

from hdrsweep.common.constants import (
    DEFAULT_HIGHEST_TRACKABLE_VALUE,
    DEFAULT_LOWEST_TRACKABLE_VALUE,
    DEFAULT_SIGNIFICANT_FIGURES,
    INTERVAL_MAX,
    INTERVAL_MIN,
)
from hdrsweep.common.exceptions import HistogramError


class Histogram:
    """Mergeable, percentile-queryable value distribution for one time range.

    An empty histogram has ``start_timestamp == INTERVAL_MAX`` and
    ``end_timestamp == INTERVAL_MIN`` so that merging into it always adopts the
    other histogram's range.
    """

    def __init__(
        self,
        significant_figures: int = DEFAULT_SIGNIFICANT_FIGURES,
        lowest_trackable_value: int = DEFAULT_LOWEST_TRACKABLE_VALUE,
        highest_trackable_value: int = DEFAULT_HIGHEST_TRACKABLE_VALUE,
        start_timestamp: int = INTERVAL_MAX,
        end_timestamp: int = INTERVAL_MIN,
    ) -> None:
        self.significant_figures = significant_figures
        self.lowest_trackable_value = lowest_trackable_value
        self.highest_trackable_value = highest_trackable_value
        self.start_timestamp = start_timestamp
        self.end_timestamp = end_timestamp
        self._histogram = HdrHistogram(
            lowest_trackable_value, highest_trackable_value, significant_figures
        )

    @classmethod
    def from_values(
        cls,
        values: Iterable[int],
        start_timestamp: int,
        end_timestamp: int,
        **kwargs,
    ) -> Histogram:
        """Build a histogram covering ``[start_timestamp, end_timestamp)`` from raw values."""
        histogram = cls(
            start_timestamp=start_timestamp, end_timestamp=end_timestamp, **kwargs
        )
        for value in values:
            histogram.record_value(value)
        return histogram

    def empty_like(self) -> Histogram:
        """Create an empty histogram with the same precision and range."""
        return Histogram(
            significant_figures=self.significant_figures,
            lowest_trackable_value=self.lowest_trackable_value,
            highest_trackable_value=self.highest_trackable_value,
        )

    def copy(self) -> Histogram:
        histogram = self.empty_like()
        histogram.add(self)
        return histogram

    def record_value(self, value: int, count: int = 1) -> None:
        if not self._histogram.record_value(int(value), count):
            raise HistogramError(
                f"Value {value} is outside the trackable range "
                f"[{self.lowest_trackable_value}, {self.highest_trackable_value}]"
            )

    def add(self, other: Histogram) -> None:
        """Merge the counts and time range of ``other`` into this histogram."""
        if other is None:
            raise HistogramError("Cannot merge a missing histogram")
        if other.total_count:
            try:
                self._histogram.add(other._histogram)
            except IndexError as e:
                raise HistogramError(f"Cannot merge histogram: {e}") from e
        self.start_timestamp = min(self.start_timestamp, other.start_timestamp)
        self.end_timestamp = max(self.end_timestamp, other.end_timestamp)

    @property
    def total_count(self) -> int:
        return int(self._histogram.get_total_count())

    @property
    def min_value(self) -> int:
        if self.total_count == 0:
            return 0
        return int(self._histogram.get_min_value())

    @property
    def max_value(self) -> int:
        if self.total_count == 0:
            return 0
        return int(self._histogram.get_max_value())

    @property
    def mean(self) -> float:
        if self.total_count == 0:
            return 0.0
        return float(self._histogram.get_mean_value())

    @property
    def elapsed(self) -> int:
        """Length of the covered time range in microseconds (0 when empty)."""
        if self.end_timestamp <= self.start_timestamp:
            return 0
        return self.end_timestamp - self.start_timestamp

    def value_at_percentile(self, percentile: float) -> int:
        if self.total_count == 0:
            return 0
        return int(self._histogram.get_value_at_percentile(percentile))

    def count_between(self, low_value: int, high_value: int) -> int:
        """Count samples whose value is equivalent to a value in ``[low_value, high_value]``."""
        low = self._histogram.get_lowest_equivalent_value(low_value)
        high = self._histogram.get_highest_equivalent_value(high_value)
        return sum(
            item.count_at_value_iterated_to
            for item in self._histogram.get_recorded_iterator()
            if low <= item.value_iterated_to <= high
        )

    def __repr__(self) -> str:
        return (
            f"Histogram(total_count={self.total_count}, "
            f"start_timestamp={self.start_timestamp}, end_timestamp={self.end_timestamp})"
        )
