# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Annotated

from pydantic import ConfigDict, Field

from hdrsweep.common.config.base_config import BaseConfig


class ServiceLevelExpectation(BaseConfig):
    """A latency ceiling at a given percentile, checked over a trailing window of samples."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    percentile: Annotated[
        float,
        Field(
            ge=0,
            le=100,
            description="The percentile to check (e.g. 99 or 99.9).",
        ),
    ]

    moving_window: Annotated[
        int,
        Field(
            ge=1,
            description="Number of most recent sample histograms the percentile is computed over.",
        ),
    ]

    max_value: Annotated[
        float,
        Field(
            ge=0,
            description="Maximum allowed value at the percentile, in reporting units.",
        ),
    ]

    marker_name: Annotated[
        str | None,
        Field(
            description="Label of the threshold marker. Defaults to the threshold name with its max value.",
        ),
    ] = None

    marker_value: Annotated[
        float | None,
        Field(
            description="Y value of the threshold marker. Only positive values produce a marker.",
        ),
    ] = None

    @property
    def name(self) -> str:
        return f"p{self.percentile:g}"

    @property
    def long_name(self) -> str:
        return f"{self.name}_mw{self.moving_window}"

    @property
    def name_with_max(self) -> str:
        return f"{self.long_name} <= {self.max_value:g}"

    @property
    def marker_label(self) -> str:
        return self.marker_name or self.name_with_max

    @property
    def has_marker(self) -> bool:
        return self.marker_value is not None and self.marker_value > 0

    def __str__(self) -> str:
        return self.name_with_max
