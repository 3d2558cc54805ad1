# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections import deque

from hdrsweep.common.exceptions import ConfigurationError
from hdrsweep.common.mixins import HdrSweepLoggerMixin
from hdrsweep.common.models import Histogram


class MovingWindowHistogram(HdrSweepLoggerMixin):
    """Running sum of the most recent ``window_size`` sample histograms.

    Histograms cannot be subtracted safely, so evicting the oldest entry
    rebuilds the sum from the histograms still in the window. The window size is
    a small configured constant, which keeps the rebuild cheap.

    Invariant: ``sum_histogram`` is the exact merge of the queued histograms.
    """

    def __init__(
        self,
        template: Histogram,
        percentile: float,
        window_size: int,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        if window_size < 1:
            raise ConfigurationError(
                f"Moving window size must be at least 1, got {window_size}"
            )
        self.percentile = percentile
        self.window_size = window_size
        self._template = template
        self._window: deque[Histogram] = deque()
        self.sum_histogram = template.empty_like()

    def add(self, histogram: Histogram) -> None:
        self.sum_histogram.add(histogram)
        self._window.append(histogram)
        if len(self._window) > self.window_size:
            self._window.popleft()
            self._rebuild()

    def _rebuild(self) -> None:
        sum_histogram = self._template.empty_like()
        for histogram in self._window:
            sum_histogram.add(histogram)
        self.sum_histogram = sum_histogram
        self.trace(
            lambda: f"Rebuilt p{self.percentile:g} window sum from {len(self._window)} histograms"
        )

    @property
    def total_count(self) -> int:
        return self.sum_histogram.total_count

    def value_at_percentile(self, percentile: float | None = None) -> int:
        """Value at ``percentile`` (defaults to the tracked percentile) over the window."""
        return self.sum_histogram.value_at_percentile(
            self.percentile if percentile is None else percentile
        )

    def __len__(self) -> int:
        return len(self._window)
