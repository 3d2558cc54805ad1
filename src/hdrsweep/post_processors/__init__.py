# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from hdrsweep.post_processors.conformance_analyzer import (
    ConformanceAnalyzer,
)
from hdrsweep.post_processors.interval_aggregator import (
    MW_COUNTS,
    MW_VALUES,
    PERCENTILE_COUNTS,
    PERCENTILE_NAMES,
    PERCENTILE_VALUES,
    IntervalAggregator,
)
from hdrsweep.post_processors.run_results_processor import (
    RunResult,
    RunResultsProcessor,
)

__all__ = [
    "ConformanceAnalyzer",
    "IntervalAggregator",
    "MW_COUNTS",
    "MW_VALUES",
    "PERCENTILE_COUNTS",
    "PERCENTILE_NAMES",
    "PERCENTILE_VALUES",
    "RunResult",
    "RunResultsProcessor",
]
