# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field
from typing_extensions import Self

from hdrsweep.common.constants import INTERVAL_MAX, INTERVAL_MIN, MICROS_PER_MILLI
from hdrsweep.common.models.base_models import HdrSweepBaseModel


def scale_bound(value: int, factor: int) -> int:
    """Scale an interval bound, leaving the unbounded sentinels untouched."""
    if value in (INTERVAL_MIN, INTERVAL_MAX):
        return value
    return value * factor


class Interval(HdrSweepBaseModel):
    """A named half-open time range ``[start, finish)`` in microseconds."""

    name: str = Field(default="", description="The name of the interval")
    start: int = Field(
        default=INTERVAL_MIN, description="Inclusive start of the interval (us)"
    )
    finish: int = Field(
        default=INTERVAL_MAX, description="Exclusive end of the interval (us)"
    )

    @classmethod
    def from_millis(
        cls,
        start: int = INTERVAL_MIN,
        finish: int = INTERVAL_MAX,
        name: str = "",
    ) -> Self:
        """Create an interval from millisecond bounds."""
        return cls(
            name=name,
            start=scale_bound(start, MICROS_PER_MILLI),
            finish=scale_bound(finish, MICROS_PER_MILLI),
        )

    @property
    def is_bounded(self) -> bool:
        return self.start != INTERVAL_MIN and self.finish != INTERVAL_MAX

    def contains(self, start: int, end: int) -> bool:
        """Whether both ``start`` and ``end`` fall inside ``[self.start, self.finish)``."""
        return (
            self.start <= start < self.finish and self.start <= end < self.finish
        )

    def adjust(self, timestamp: int) -> None:
        """Widen the interval end so that ``timestamp`` falls inside it."""
        if timestamp >= self.finish:
            self.finish = timestamp + 1

    def __str__(self) -> str:
        return f"{self.name or '<total>'} [{self.start}, {self.finish})"
