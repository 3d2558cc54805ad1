# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from hdrsweep.common.mixins.hdrsweep_logger_mixin import (
    HdrSweepLoggerMixin,
)

__all__ = [
    "HdrSweepLoggerMixin",
]
