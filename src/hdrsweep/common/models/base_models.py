# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class HdrSweepBaseModel(BaseModel):
    """Base model for all hdrsweep data models. Allows arbitrary types (histograms)
    and keeps validation on assignment so models stay consistent after mutation."""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
    )
