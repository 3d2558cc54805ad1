# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from hdrsweep.metrics.moving_window import (
    MovingWindowHistogram,
)
from hdrsweep.metrics.statistic_extractor import (
    extract_statistic,
)

__all__ = [
    "MovingWindowHistogram",
    "extract_statistic",
]
