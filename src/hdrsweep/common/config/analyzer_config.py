# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Annotated, Any

from pydantic import Field, ValidationError, field_validator, model_validator
from typing_extensions import Self

from hdrsweep.common.config.base_config import BaseConfig
from hdrsweep.common.config.config_defaults import AnalyzerDefaults
from hdrsweep.common.config.logging_config import LoggingConfig
from hdrsweep.common.config.sle_config import ServiceLevelExpectation
from hdrsweep.common.constants import INTERVAL_MIN
from hdrsweep.common.exceptions import ConfigurationError
from hdrsweep.common.hdrsweep_logger import HdrSweepLogger
from hdrsweep.common.models.interval import Interval

_logger = HdrSweepLogger(__name__)


class IntervalConfig(BaseConfig):
    """A named sub-interval of a run, with bounds in milliseconds relative to the
    time base of the sample histograms."""

    name: Annotated[
        str,
        Field(
            min_length=1,
            description="Name of the interval, appended to the metric name in reports.",
        ),
    ]

    start: Annotated[
        int,
        Field(
            ge=0,
            description="Inclusive start of the interval in milliseconds.",
        ),
    ] = 0

    finish: Annotated[
        int | None,
        Field(
            description="Exclusive end of the interval in milliseconds. "
            "If not set, the interval is open-ended and grows to cover the rest of the run.",
        ),
    ] = None

    @model_validator(mode="after")
    def validate_bounds(self) -> Self:
        if self.finish is not None and self.finish <= self.start:
            raise ValueError(
                f"Interval '{self.name}' finish ({self.finish}) must be after start ({self.start})"
            )
        return self

    @property
    def is_open_ended(self) -> bool:
        return self.finish is None

    def to_interval(self) -> Interval:
        """Create the microsecond interval. Open-ended intervals start empty and
        are widened as histograms arrive."""
        finish = self.start if self.finish is None else self.finish
        return Interval.from_millis(self.start, finish, self.name)


class AnalyzerConfig(BaseConfig):
    """Configuration for interval aggregation and the rate sweep analysis."""

    @field_validator("sle_config")
    @classmethod
    def validate_unique_sle_names(
        cls, sle_config: list[ServiceLevelExpectation]
    ) -> list[ServiceLevelExpectation]:
        names = [sle.long_name for sle in sle_config]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate service level expectations: {duplicates}")
        return sle_config

    @field_validator("intervals")
    @classmethod
    def validate_unique_interval_names(
        cls, intervals: list[IntervalConfig]
    ) -> list[IntervalConfig]:
        names = [interval.name for interval in intervals]
        if len(names) != len(set(names)):
            raise ValueError(f"Interval names must be unique, got {names}")
        return intervals

    @field_validator("percentiles")
    @classmethod
    def validate_percentiles(cls, percentiles: list[float] | None) -> list[float] | None:
        if percentiles is None:
            return None
        for p in percentiles:
            if not 0 <= p <= 100:
                raise ValueError(f"Percentile {p} must be between 0 and 100")
        return percentiles

    sle_config: Annotated[
        list[ServiceLevelExpectation],
        Field(
            description="Ordered list of service level expectations checked during the rate sweep.",
        ),
    ] = []

    intervals: Annotated[
        list[IntervalConfig],
        Field(
            description="Named sub-intervals reported in addition to the full run.",
        ),
    ] = []

    percentiles: Annotated[
        list[float] | None,
        Field(
            description="Percentiles reported with their values and tail counts for each interval.",
        ),
    ] = AnalyzerDefaults.PERCENTILES

    merge_histograms: Annotated[
        int,
        Field(
            ge=1,
            description="Number of sample histograms merged into one time-series point.",
        ),
    ] = AnalyzerDefaults.MERGE_HISTOGRAMS

    histogram_factor: Annotated[
        float,
        Field(
            gt=0,
            description="Divisor converting recorded values to reporting units (e.g. 1000 for us -> ms).",
        ),
    ] = AnalyzerDefaults.HISTOGRAM_FACTOR

    significant_figures: Annotated[
        int,
        Field(
            ge=1,
            le=5,
            description="Precision of the histograms built during aggregation.",
        ),
    ] = AnalyzerDefaults.SIGNIFICANT_FIGURES

    highest_trackable_value: Annotated[
        int,
        Field(
            gt=1,
            description="Highest value the aggregation histograms can hold.",
        ),
    ] = AnalyzerDefaults.HIGHEST_TRACKABLE_VALUE

    logging: Annotated[
        LoggingConfig,
        Field(
            description="Logging configuration",
        ),
    ] = LoggingConfig()

    @property
    def full_run_interval(self) -> Interval:
        """The unnamed interval that covers the whole run."""
        return Interval(name="", start=INTERVAL_MIN)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate a raw configuration mapping, raising ConfigurationError on failure."""
        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid analyzer configuration: {e}") from e
        _logger.debug(
            lambda: f"Loaded analyzer config with {len(config.sle_config)} SLEs "
            f"and {len(config.intervals)} intervals"
        )
        return config
