"""Tests for the wire models in edgeclient.models."""

from __future__ import annotations

import time
import uuid

import pytest
from pydantic import ValidationError

from edgeclient.models import (
    AddEventRequest,
    BaseReading,
    Device,
    DeviceResourceResponse,
    Event,
    MultiTransmissionsResponse,
    to_wire,
)


class TestParsing:
    def test_camel_case_body(self) -> None:
        res = DeviceResourceResponse.model_validate({
            "apiVersion": "v3",
            "requestId": "abc",
            "statusCode": 200,
            "resource": {
                "name": "Temperature",
                "isHidden": True,
                "properties": {"valueType": "Float32", "readWrite": "RW", "defaultValue": "0"},
            },
        })
        assert res.request_id == "abc"
        assert res.resource.is_hidden is True
        assert res.resource.properties.read_write == "RW"
        assert res.resource.properties.default_value == "0"

    def test_snake_case_accepted(self) -> None:
        assert Device(profile_name="Thermostat").profile_name == "Thermostat"
        assert Device.model_validate({"profile_name": "X"}).profile_name == "X"

    def test_unknown_fields_ignored(self) -> None:
        res = MultiTransmissionsResponse.model_validate({"totalCount": 0, "somethingNew": 1})
        assert res.total_count == 0
        assert not hasattr(res, "somethingNew")

    def test_missing_fields_default(self) -> None:
        res = DeviceResourceResponse.model_validate({})
        assert res.status_code == 0
        assert res.resource.name == ""

    def test_frozen(self) -> None:
        res = DeviceResourceResponse.model_validate({"statusCode": 200})
        with pytest.raises(ValidationError):
            res.status_code = 500


class TestToWire:
    def test_camel_case_and_none_dropped(self) -> None:
        reading = BaseReading(device_name="d", resource_name="r", value_type="Int32", value="1")
        wire = to_wire(reading)
        assert wire["deviceName"] == "d"
        assert wire["valueType"] == "Int32"
        assert "units" not in wire
        assert "binaryValue" not in wire

    def test_request_carries_api_version(self) -> None:
        wire = to_wire(AddEventRequest(event=Event(id="e", device_name="d")))
        assert wire["apiVersion"] == "v3"
        assert "requestId" not in wire
        assert wire["event"]["deviceName"] == "d"


class TestEventNew:
    def test_fresh_id_and_origin(self) -> None:
        before = time.time_ns()
        event = Event.new("Thermostat", "thermo-1", "Temperature")
        after = time.time_ns()
        assert uuid.UUID(event.id)
        assert before <= event.origin <= after
        assert event.profile_name == "Thermostat"
        assert event.device_name == "thermo-1"
        assert event.source_name == "Temperature"
        assert event.readings == []

    def test_ids_differ(self) -> None:
        assert Event.new("p", "d", "s").id != Event.new("p", "d", "s").id
