# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


def format_rate(rate: float) -> str:
    """Format a rate as an axis label with at most two decimals.

    Examples:
        >>> format_rate(1000.0)
        "1000"
        >>> format_rate(1234.5678)
        "1234.57"
        >>> format_rate(0.5)
        "0.5"
    """
    text = f"{round(rate, 2):.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text
