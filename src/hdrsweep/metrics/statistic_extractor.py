# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Scalar statistics derived from a histogram.

Every extractor is a pure function of ``(histogram, factor)``. Value statistics
are divided by ``factor`` to convert from recorded units to reporting units;
the sample count is returned unscaled.
"""

from collections.abc import Callable

from hdrsweep.common.constants import MICROS_PER_SECOND, NO_DATA_VALUE
from hdrsweep.common.enums import StatisticType
from hdrsweep.common.models import Histogram


def _percentile(percentile: float) -> Callable[[Histogram, float], float]:
    def extract(histogram: Histogram, factor: float) -> float:
        return histogram.value_at_percentile(percentile) / factor

    return extract


def _throughput(histogram: Histogram, factor: float) -> float:
    elapsed_us = histogram.end_timestamp - histogram.start_timestamp
    if elapsed_us <= 0:
        return NO_DATA_VALUE
    return histogram.total_count * MICROS_PER_SECOND / elapsed_us


_EXTRACTORS: dict[StatisticType, Callable[[Histogram, float], float]] = {
    StatisticType.COUNTS: lambda histogram, _: float(histogram.total_count),
    StatisticType.P0_VALUES: lambda histogram, factor: histogram.min_value / factor,
    StatisticType.P50_VALUES: _percentile(50),
    StatisticType.P90_VALUES: _percentile(90),
    StatisticType.P99_VALUES: _percentile(99),
    StatisticType.P999_VALUES: _percentile(99.9),
    StatisticType.P9999_VALUES: _percentile(99.99),
    StatisticType.P100_VALUES: lambda histogram, factor: histogram.max_value / factor,
    StatisticType.THROUGHPUT: _throughput,
}


def extract_statistic(
    statistic: StatisticType, histogram: Histogram, factor: float = 1.0
) -> float:
    """Compute a single statistic of ``histogram`` in reporting units."""
    return _EXTRACTORS[statistic](histogram, factor)
