# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from hdrsweep.common.enums.base_enums import (
    CaseInsensitiveStrEnum,
)
from hdrsweep.common.enums.logging_enums import (
    HdrSweepLogLevel,
)
from hdrsweep.common.enums.metric_enums import (
    REPORTED_STATISTICS,
    StatisticType,
)

__all__ = [
    "CaseInsensitiveStrEnum",
    "HdrSweepLogLevel",
    "REPORTED_STATISTICS",
    "StatisticType",
]
