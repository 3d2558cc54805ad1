# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

MICROS_PER_MILLI = 1_000
MICROS_PER_SECOND = 1_000_000

# Unbounded interval sentinels. These are never scaled when converting units.
INTERVAL_MIN = -(2**63)
INTERVAL_MAX = 2**63 - 1

# Value reported in place of a statistic when a run or interval has no data.
NO_DATA_VALUE = -1.0

DEFAULT_SIGNIFICANT_FIGURES = 3
DEFAULT_LOWEST_TRACKABLE_VALUE = 1
# One hour in nanoseconds, enough headroom for latencies recorded in ns.
DEFAULT_HIGHEST_TRACKABLE_VALUE = 3_600_000_000_000
