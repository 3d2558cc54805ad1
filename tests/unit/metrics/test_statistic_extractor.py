# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from hdrsweep.common.enums import REPORTED_STATISTICS, StatisticType
from hdrsweep.common.models import Histogram
from hdrsweep.metrics import extract_statistic


@pytest.fixture
def one_to_thousand() -> Histogram:
    """Values 1..1000 recorded over two seconds."""
    return Histogram.from_values(range(1, 1001), 0, 2_000_000)


class TestExtractStatistic:
    @pytest.mark.parametrize(
        "statistic,expected",
        [
            (StatisticType.COUNTS, 1000),
            (StatisticType.P0_VALUES, 1),
            (StatisticType.P50_VALUES, 500),
            (StatisticType.P90_VALUES, 900),
            (StatisticType.P99_VALUES, 990),
            (StatisticType.P999_VALUES, 999),
            (StatisticType.P9999_VALUES, 1000),
            (StatisticType.P100_VALUES, 1000),
            (StatisticType.THROUGHPUT, 500),
        ],
    )
    def test_known_values(self, one_to_thousand, statistic, expected):
        assert extract_statistic(statistic, one_to_thousand) == pytest.approx(expected)

    def test_values_are_scaled_but_counts_are_not(self, one_to_thousand):
        assert extract_statistic(
            StatisticType.P50_VALUES, one_to_thousand, 1000
        ) == pytest.approx(0.5)
        assert extract_statistic(StatisticType.COUNTS, one_to_thousand, 1000) == 1000
        assert extract_statistic(
            StatisticType.THROUGHPUT, one_to_thousand, 1000
        ) == pytest.approx(500)

    def test_percentiles_within_precision_for_large_values(self):
        values = range(1_000, 1_000_001, 1_000)
        histogram = Histogram.from_values(values, 0, 1_000_000)
        assert extract_statistic(
            StatisticType.P90_VALUES, histogram
        ) == pytest.approx(900_000, rel=1e-3)
        assert extract_statistic(
            StatisticType.P99_VALUES, histogram
        ) == pytest.approx(990_000, rel=1e-3)

    @pytest.mark.parametrize("start,end", [(1_000, 1_000), (2_000, 1_000)])
    def test_throughput_without_elapsed_time(self, start, end):
        histogram = Histogram.from_values([1, 2, 3], start, end)
        assert extract_statistic(StatisticType.THROUGHPUT, histogram) == -1

    def test_every_statistic_has_an_extractor(self, one_to_thousand):
        for statistic in StatisticType:
            extract_statistic(statistic, one_to_thousand)

    def test_reported_statistics_exclude_throughput(self):
        assert len(REPORTED_STATISTICS) == 8
        assert StatisticType.THROUGHPUT not in REPORTED_STATISTICS
