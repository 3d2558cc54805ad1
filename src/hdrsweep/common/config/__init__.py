# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from hdrsweep.common.config.analyzer_config import (
    AnalyzerConfig,
    IntervalConfig,
)
from hdrsweep.common.config.base_config import (
    BaseConfig,
)
from hdrsweep.common.config.config_defaults import (
    AnalyzerDefaults,
    LoggingDefaults,
)
from hdrsweep.common.config.logging_config import (
    LoggingConfig,
)
from hdrsweep.common.config.sle_config import (
    ServiceLevelExpectation,
)

__all__ = [
    "AnalyzerConfig",
    "AnalyzerDefaults",
    "BaseConfig",
    "IntervalConfig",
    "LoggingConfig",
    "LoggingDefaults",
    "ServiceLevelExpectation",
]
