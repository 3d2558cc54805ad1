# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class HdrSweepError(Exception):
    """Base class for all exceptions raised by hdrsweep."""


class ConfigurationError(HdrSweepError):
    """Exception raised when something fails to configure, or there is a configuration error."""


class HistogramError(HdrSweepError):
    """Exception raised when a histogram cannot be merged or is missing."""


class InvalidStateError(HdrSweepError):
    """Exception raised when something is in an invalid state."""
