# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import numpy as np
import pytest

from hdrsweep.common.exceptions import ConfigurationError
from hdrsweep.common.models import Histogram
from hdrsweep.metrics import MovingWindowHistogram


def _random_ticks(count: int, seed: int = 42) -> list[Histogram]:
    rng = np.random.default_rng(seed)
    ticks = []
    for i in range(count):
        values = rng.integers(100, 50_000, size=int(rng.integers(1, 200)))
        ticks.append(
            Histogram.from_values(values.tolist(), i * 1_000_000, (i + 1) * 1_000_000)
        )
    return ticks


class TestMovingWindowHistogram:
    def test_window_size_must_be_positive(self):
        with pytest.raises(ConfigurationError, match="at least 1"):
            MovingWindowHistogram(Histogram(), percentile=99, window_size=0)

    def test_sum_grows_until_window_is_full(self, tick):
        window = MovingWindowHistogram(Histogram(), percentile=50, window_size=3)
        for i in range(3):
            window.add(tick(i, [100] * 10))
            assert len(window) == i + 1
            assert window.total_count == 10 * (i + 1)

    def test_oldest_histogram_is_evicted(self, tick):
        window = MovingWindowHistogram(Histogram(), percentile=100, window_size=2)
        window.add(tick(0, [9_000]))
        window.add(tick(1, [100]))
        assert window.value_at_percentile() == pytest.approx(9_000, rel=1e-3)

        window.add(tick(2, [200]))

        assert len(window) == 2
        assert window.total_count == 2
        assert window.value_at_percentile() == 200
        assert window.sum_histogram.start_timestamp == 1_000_000
        assert window.sum_histogram.end_timestamp == 3_000_000

    @pytest.mark.parametrize("window_size", [1, 3, 7])
    def test_sum_matches_merge_of_last_window(self, window_size):
        ticks = _random_ticks(20)
        window = MovingWindowHistogram(Histogram(), percentile=99, window_size=window_size)
        for histogram in ticks:
            window.add(histogram)

        expected = Histogram()
        for histogram in ticks[-window_size:]:
            expected.add(histogram)

        assert window.total_count == expected.total_count
        for percentile in (0, 50, 90, 99, 99.9, 100):
            assert window.value_at_percentile(percentile) == expected.value_at_percentile(
                percentile
            )

    def test_inputs_are_not_mutated(self, tick):
        window = MovingWindowHistogram(Histogram(), percentile=99, window_size=1)
        first = tick(0, [1, 2, 3])
        window.add(first)
        window.add(tick(1, [4]))
        assert first.total_count == 3
