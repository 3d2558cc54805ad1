# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Output records produced by the aggregation and conformance passes.

A ``Metric`` is a named time-series (or cross-rate series) made of one or more
equal-length ``MetricValue`` sequences. ``MetricData`` collects them in the
order they are produced, which is the canonical report order. A value of
``-1`` in any series means "no data".
"""

from collections.abc import Iterator

import numpy as np
import orjson
from pydantic import Field, PrivateAttr

from hdrsweep.common.enums import StatisticType
from hdrsweep.common.exceptions import InvalidStateError
from hdrsweep.common.models.base_models import HdrSweepBaseModel


class Marker(HdrSweepBaseModel):
    """Annotation for a threshold line or the point where it was broken."""

    name: str = Field(description="Label of the marker")
    x_value: float | None = Field(
        default=None,
        description="X position of the marker, or None for a horizontal line across the series",
    )
    y_value: float = Field(description="Y position (threshold value) of the marker")


class MetricValue(HdrSweepBaseModel):
    """A single named numeric series of a metric."""

    name: str = Field(description="The name of the series (e.g. 'P99_VALUES')")
    values: list[float] = Field(default_factory=list)

    def sum_value(self) -> float:
        return float(np.sum(self.values)) if self.values else 0.0

    def max_value(self) -> float:
        return float(np.max(self.values)) if self.values else 0.0

    def avg_value(self) -> float:
        return float(np.mean(self.values)) if self.values else 0.0


class Metric(HdrSweepBaseModel):
    """A report record: one or more named series plus the run context they belong to."""

    name: str = Field(description="Display name of the metric")
    operation: str | None = Field(default=None, description="Operation label")
    units: str | None = Field(default=None, description="Y axis units")
    x_units: str | None = Field(default=None, description="X axis units")
    x_values: list[str] | None = Field(
        default=None, description="X axis category labels"
    )
    group: str | None = Field(
        default=None, description="Group name for joint presentation"
    )
    start: int | None = Field(default=None, description="Start timestamp (us)")
    finish: int | None = Field(default=None, description="End timestamp (us)")
    delay: float | None = Field(
        default=None, description="Length of one time-series step"
    )
    total_values: int | None = Field(
        default=None, description="Number of samples behind the metric"
    )
    retry: int | None = Field(default=None, description="Step index of the run")
    percent_of_high_bound: float | None = Field(
        default=None, description="Target rate as a percent of the highest rate"
    )
    target_rate: float | None = Field(default=None, description="Offered load rate")
    actual_rate: float | None = Field(
        default=None, description="Measured samples per second"
    )
    mean_value: float | None = Field(default=None, description="Mean sample value")
    value: float | None = Field(default=None, description="Scalar value of the metric")
    values: list[MetricValue] = Field(default_factory=list)
    markers: list[Marker] = Field(default_factory=list)

    _markers_set: bool = PrivateAttr(default=False)

    def add(self, metric_value: MetricValue) -> "Metric":
        self.values.append(metric_value)
        return self

    def add_marker(self, marker: Marker) -> "Metric":
        self.markers.append(marker)
        return self

    def set_markers(self, markers: list[Marker]) -> None:
        """Attach the final marker list. Allowed once per metric."""
        if self._markers_set:
            raise InvalidStateError(f"Markers of metric '{self.name}' already set")
        self.markers = list(markers)
        self._markers_set = True

    def by_name(self, name: str) -> MetricValue | None:
        return next((mv for mv in self.values if mv.name == name), None)

    def by_type(self, statistic: StatisticType) -> MetricValue | None:
        return self.by_name(str(statistic))


class MetricData:
    """Append-only, insertion-ordered collection of the metrics of one processing pass."""

    def __init__(self) -> None:
        self._metrics: list[Metric] = []

    def add(self, metric: Metric) -> Metric:
        self._metrics.append(metric)
        return metric

    def by_name(self, name: str, operation: str | None = None) -> list[Metric]:
        return [
            metric
            for metric in self._metrics
            if metric.name == name
            and (operation is None or metric.operation == operation)
        ]

    def to_json(self) -> bytes:
        """Serialize all metrics, in order, for a downstream renderer."""
        return orjson.dumps(
            [metric.model_dump(exclude_none=True) for metric in self._metrics],
            option=orjson.OPT_SERIALIZE_NUMPY,
        )

    def __iter__(self) -> Iterator[Metric]:
        return iter(self._metrics)

    def __len__(self) -> int:
        return len(self._metrics)

    def __getitem__(self, index: int) -> Metric:
        return self._metrics[index]
