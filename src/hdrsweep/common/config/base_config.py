# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class BaseConfig(BaseModel):
    """Base class for all hdrsweep configuration models. Unknown keys are rejected
    so that typos in threshold or interval definitions surface immediately."""

    model_config = ConfigDict(extra="forbid", validate_default=True)
