# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from hdrsweep.common.enums.base_enums import CaseInsensitiveStrEnum


class StatisticType(CaseInsensitiveStrEnum):
    """The statistic kinds that can be derived from a histogram.

    The value of each member doubles as the name of the series it produces in
    the exported metric records.
    """

    COUNTS = "COUNTS"
    """Total number of samples in the histogram."""

    P0_VALUES = "P0_VALUES"
    """Minimum recorded value."""

    P50_VALUES = "P50_VALUES"
    P90_VALUES = "P90_VALUES"
    P99_VALUES = "P99_VALUES"
    P999_VALUES = "P999_VALUES"
    P9999_VALUES = "P9999_VALUES"

    P100_VALUES = "P100_VALUES"
    """Maximum recorded value."""

    THROUGHPUT = "THROUGHPUT"
    """Samples per second over the histogram's time range."""


REPORTED_STATISTICS: tuple[StatisticType, ...] = (
    StatisticType.COUNTS,
    StatisticType.P0_VALUES,
    StatisticType.P50_VALUES,
    StatisticType.P90_VALUES,
    StatisticType.P99_VALUES,
    StatisticType.P999_VALUES,
    StatisticType.P9999_VALUES,
    StatisticType.P100_VALUES,
)
"""The statistics tracked per interval, in report order."""
