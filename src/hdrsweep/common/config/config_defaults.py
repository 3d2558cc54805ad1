# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass

from hdrsweep.common.constants import (
    DEFAULT_HIGHEST_TRACKABLE_VALUE,
    DEFAULT_SIGNIFICANT_FIGURES,
)
from hdrsweep.common.enums import HdrSweepLogLevel


@dataclass(frozen=True)
class AnalyzerDefaults:
    PERCENTILES = None
    MERGE_HISTOGRAMS = 1
    HISTOGRAM_FACTOR = 1000.0
    SIGNIFICANT_FIGURES = DEFAULT_SIGNIFICANT_FIGURES
    HIGHEST_TRACKABLE_VALUE = DEFAULT_HIGHEST_TRACKABLE_VALUE


@dataclass(frozen=True)
class LoggingDefaults:
    LOG_LEVEL = HdrSweepLogLevel.INFO
    LOG_FILE = None
    RICH_TRACEBACKS = True
