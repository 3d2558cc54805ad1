# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field

from hdrsweep.common.config.sle_config import ServiceLevelExpectation
from hdrsweep.common.models.base_models import HdrSweepBaseModel


class RunMetadata(HdrSweepBaseModel):
    """Context of a single benchmark run at one target rate."""

    operation_name: str = Field(description="Operation label (e.g. 'write')")
    metric_name: str = Field(description="Metric label (e.g. 'response_time')")
    time_units: str = Field(default="ms", description="Units of reported values")
    rate_units: str = Field(default="op/s", description="Units of the target rate")
    interval_length: float = Field(
        default=1000.0, description="Length of one histogram tick in ms"
    )
    step: int = Field(default=0, description="Index of the run within the sweep")
    target_rate: float = Field(description="Offered load rate of the run")
    rate_percent: float = Field(
        default=100.0, description="Target rate as a percent of the highest rate"
    )
    records_count: int = Field(
        default=0, ge=0, description="Number of samples recorded by the run"
    )

    @property
    def group_name(self) -> str:
        return f"{self.operation_name} {self.metric_name}"


class ThresholdConformance(HdrSweepBaseModel):
    """Outcome of the rate sweep for one threshold in one operation/metric group."""

    group_name: str = Field(description="'<operation> <metric>' group key")
    sle: ServiceLevelExpectation
    broken: bool = Field(description="Whether any tested rate broke the threshold")
    conforming_rate: float = Field(
        description="Rate of the first breaking run, or the max tested rate when unbroken"
    )
    last_passing_rate: float | None = Field(
        default=None,
        description="Highest tested rate below the break that held the threshold",
    )
