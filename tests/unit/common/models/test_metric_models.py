# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import orjson
import pytest

from hdrsweep.common.enums import StatisticType
from hdrsweep.common.exceptions import InvalidStateError
from hdrsweep.common.models import Marker, Metric, MetricData, MetricValue


class TestMetricValue:
    def test_aggregates(self):
        mv = MetricValue(name="P99_VALUES", values=[1.0, 4.0, 7.0])
        assert mv.sum_value() == 12.0
        assert mv.max_value() == 7.0
        assert mv.avg_value() == 4.0

    def test_aggregates_of_empty_series(self):
        mv = MetricValue(name="P99_VALUES")
        assert mv.sum_value() == 0.0
        assert mv.max_value() == 0.0
        assert mv.avg_value() == 0.0


class TestMetric:
    def test_add_and_lookup_series(self):
        metric = Metric(name="response_time").add(
            MetricValue(name="COUNTS", values=[10.0])
        )
        metric.add(MetricValue(name="P50_VALUES", values=[2.0]))

        assert metric.by_type(StatisticType.COUNTS).values == [10.0]
        assert metric.by_name("P50_VALUES").values == [2.0]
        assert metric.by_type(StatisticType.P99_VALUES) is None

    def test_set_markers_only_once(self):
        metric = Metric(name="response_time summary_max")
        markers = [Marker(name="p99_mw3 <= 5 (broken)", x_value=3000, y_value=5)]

        metric.set_markers(markers)
        markers.append(Marker(name="late", y_value=1))

        assert len(metric.markers) == 1
        with pytest.raises(InvalidStateError, match="already set"):
            metric.set_markers([])


class TestMetricData:
    def test_insertion_order_and_lookup(self):
        data = MetricData()
        data.add(Metric(name="a", operation="read"))
        data.add(Metric(name="b", operation="read"))
        data.add(Metric(name="a", operation="write"))

        assert [m.name for m in data] == ["a", "b", "a"]
        assert len(data) == 3
        assert data[1].name == "b"
        assert len(data.by_name("a")) == 2
        assert data.by_name("a", operation="write")[0].operation == "write"

    def test_to_json_skips_unset_fields(self):
        data = MetricData()
        data.add(
            Metric(name="response_time conforming_rate (broken)", value=3000.0)
        )

        records = orjson.loads(data.to_json())

        assert records == [
            {
                "name": "response_time conforming_rate (broken)",
                "value": 3000.0,
                "values": [],
                "markers": [],
            }
        ]
