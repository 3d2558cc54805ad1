# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from hdrsweep.common.hdrsweep_logger import HdrSweepLogger


class HdrSweepLoggerMixin(HdrSweepLogger):
    """Mixin that gives a class lazy logging methods (self.debug, self.info, ...).

    The logger name defaults to the class name so log lines point at the
    component that emitted them.
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        super().__init__(logger_name=logger_name or self.__class__.__name__, **kwargs)
