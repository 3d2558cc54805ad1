# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest

from hdrsweep.common.metric_utils import format_rate


class TestFormatRate:
    @pytest.mark.parametrize(
        "rate,expected",
        [
            (1000.0, "1000"),
            (1000, "1000"),
            (1234.5678, "1234.57"),
            (0.5, "0.5"),
            (2.10, "2.1"),
            (0.0, "0"),
            (0.001, "0"),
        ],
    )
    def test_format_rate(self, rate: float, expected: str):
        assert format_rate(rate) == expected
