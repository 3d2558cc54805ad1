# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from hdrsweep.common.models.base_models import (
    HdrSweepBaseModel,
)
from hdrsweep.common.models.histogram import (
    Histogram,
)
from hdrsweep.common.models.interval import (
    Interval,
    scale_bound,
)
from hdrsweep.common.models.metric_models import (
    Marker,
    Metric,
    MetricData,
    MetricValue,
)
from hdrsweep.common.models.run_models import (
    RunMetadata,
    ThresholdConformance,
)

__all__ = [
    "HdrSweepBaseModel",
    "Histogram",
    "Interval",
    "Marker",
    "Metric",
    "MetricData",
    "MetricValue",
    "RunMetadata",
    "ThresholdConformance",
    "scale_bound",
]
