# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pathlib import Path
from typing import Annotated

from pydantic import Field

from hdrsweep.common.config.base_config import BaseConfig
from hdrsweep.common.config.config_defaults import LoggingDefaults
from hdrsweep.common.enums import HdrSweepLogLevel


class LoggingConfig(BaseConfig):
    """Console and file logging options."""

    log_level: Annotated[
        HdrSweepLogLevel,
        Field(
            description="Set the logging verbosity level. Use `DEBUG` to follow interval and sweep decisions, "
            "or `TRACE` to see every merged histogram.",
        ),
    ] = LoggingDefaults.LOG_LEVEL

    log_file: Annotated[
        Path | None,
        Field(
            description="Optional file that receives a plain-text copy of the log output.",
        ),
    ] = LoggingDefaults.LOG_FILE

    rich_tracebacks: Annotated[
        bool,
        Field(
            description="Render exception tracebacks with Rich formatting.",
        ),
    ] = LoggingDefaults.RICH_TRACEBACKS
