"""Tests for DeviceProfileClient, including the device-resource cache."""

from __future__ import annotations

import json
import threading

import httpx
import pytest

from edgeclient.clients import DeviceProfileClient
from edgeclient.exceptions import (
    ConflictError,
    ContractInvalidError,
    ErrorKind,
    NotFoundError,
    ServerError,
)
from edgeclient.models import DeviceProfile, DeviceProfileRequest, DeviceResourceResponse
from edgeclient.transport import Transport

BASE_URL = "http://edgex.local:59881"

RESOURCE_BODY = {
    "apiVersion": "v3",
    "statusCode": 200,
    "resource": {
        "name": "Temperature",
        "description": "Ambient temperature",
        "isHidden": False,
        "properties": {"valueType": "Float32", "readWrite": "R", "units": "C"},
    },
}


@pytest.fixture
def client(transport: Transport) -> DeviceProfileClient:
    return DeviceProfileClient(BASE_URL, transport=transport)


# ---------------------------------------------------------------------------
# Device resource cache
# ---------------------------------------------------------------------------


class TestDeviceResourceCache:
    def test_miss_fetches_and_parses(self, service, client: DeviceProfileClient) -> None:
        service.reply(RESOURCE_BODY)
        res = client.device_resource_by_profile_name_and_resource_name("Thermostat", "Temperature")
        assert isinstance(res, DeviceResourceResponse)
        assert res.resource.name == "Temperature"
        assert res.resource.properties.value_type == "Float32"
        assert service.last.method == "GET"
        assert service.last_path == "/api/v3/deviceresource/profile/Thermostat/resource/Temperature"

    def test_hit_skips_the_network(self, service, client: DeviceProfileClient) -> None:
        service.reply(RESOURCE_BODY)
        first = client.device_resource_by_profile_name_and_resource_name("Thermostat", "Temperature")
        second = client.device_resource_by_profile_name_and_resource_name("Thermostat", "Temperature")
        assert len(service.requests) == 1
        assert second == first

    def test_distinct_keys_fetch_separately(self, service, client: DeviceProfileClient) -> None:
        service.reply(RESOURCE_BODY)
        client.device_resource_by_profile_name_and_resource_name("Thermostat", "Temperature")
        client.device_resource_by_profile_name_and_resource_name("Thermostat", "Humidity")
        client.device_resource_by_profile_name_and_resource_name("Fan", "Temperature")
        assert len(service.requests) == 3

    def test_clean_forces_refetch(self, service, client: DeviceProfileClient) -> None:
        service.reply(RESOURCE_BODY)
        client.device_resource_by_profile_name_and_resource_name("Thermostat", "Temperature")
        client.clean_resources_cache()
        client.device_resource_by_profile_name_and_resource_name("Thermostat", "Temperature")
        assert len(service.requests) == 2

    def test_clean_on_empty_cache(self, client: DeviceProfileClient) -> None:
        client.clean_resources_cache()
        assert len(client._resources_cache) == 0

    def test_failure_caches_nothing(self, service, client: DeviceProfileClient) -> None:
        service.reply({"message": "profile Thermostat not found", "statusCode": 404}, 404)
        with pytest.raises(NotFoundError) as info:
            client.device_resource_by_profile_name_and_resource_name("Thermostat", "Temperature")
        assert info.value.kind == ErrorKind.ENTITY_DOES_NOT_EXIST
        assert info.value.status_code == 404
        assert "Temperature" in str(info.value)
        assert "profile Thermostat not found" in str(info.value)
        assert len(client._resources_cache) == 0

        service.reply(RESOURCE_BODY)
        client.device_resource_by_profile_name_and_resource_name("Thermostat", "Temperature")
        assert len(service.requests) == 2
        assert len(client._resources_cache) == 1

    def test_names_are_escaped(self, service, client: DeviceProfileClient) -> None:
        service.reply(RESOURCE_BODY)
        client.device_resource_by_profile_name_and_resource_name("Room A/B", "Temp?C")
        assert service.last_path == (
            "/api/v3/deviceresource/profile/Room%20A%2FB/resource/Temp%3FC"
        )

    def test_each_client_has_its_own_cache(self, service, transport: Transport) -> None:
        service.reply(RESOURCE_BODY)
        a = DeviceProfileClient(BASE_URL, transport=transport)
        b = DeviceProfileClient(BASE_URL, transport=transport)
        a.device_resource_by_profile_name_and_resource_name("Thermostat", "Temperature")
        b.device_resource_by_profile_name_and_resource_name("Thermostat", "Temperature")
        assert len(service.requests) == 2

    def test_concurrent_lookups_get_their_own_resource(
        self, service, client: DeviceProfileClient
    ) -> None:
        service.handler = lambda request: httpx.Response(
            200, json={"resource": {"name": request.url.path}}
        )
        results: dict[int, DeviceResourceResponse] = {}
        lock = threading.Lock()

        def worker(i: int) -> None:
            res = client.device_resource_by_profile_name_and_resource_name(
                f"Profile-{i % 4}", "Temperature"
            )
            with lock:
                results[i] = res

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(12)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert sorted(results) == list(range(12))
        for i, res in results.items():
            assert res.resource.name == (
                f"/api/v3/deviceresource/profile/Profile-{i % 4}/resource/Temperature"
            )
        assert len(client._resources_cache) == 4
        # Concurrent misses on one key may each fetch; never more than one per call.
        assert 4 <= len(service.requests) <= 12


# ---------------------------------------------------------------------------
# CRUD and queries
# ---------------------------------------------------------------------------


class TestProfileCrud:
    def test_add_posts_request_list(self, service, client: DeviceProfileClient) -> None:
        service.reply([{"apiVersion": "v3", "statusCode": 201, "id": "p-1"}], 207)
        req = DeviceProfileRequest(profile=DeviceProfile(name="Thermostat", manufacturer="Acme"))
        res = client.add([req])
        assert [r.id for r in res] == ["p-1"]
        assert service.last.method == "POST"
        assert service.last_path == "/api/v3/deviceprofile"
        body = json.loads(service.last.content)
        assert body[0]["apiVersion"] == "v3"
        assert body[0]["profile"]["name"] == "Thermostat"
        assert body[0]["profile"]["manufacturer"] == "Acme"
        assert "deviceResources" in body[0]["profile"]

    def test_update_puts(self, service, client: DeviceProfileClient) -> None:
        service.reply([{"statusCode": 200}])
        res = client.update([DeviceProfileRequest(profile=DeviceProfile(name="Thermostat"))])
        assert res[0].status_code == 200
        assert service.last.method == "PUT"

    def test_delete_by_name(self, service, client: DeviceProfileClient) -> None:
        client.delete_by_name("Thermostat")
        assert service.last.method == "DELETE"
        assert service.last_path == "/api/v3/deviceprofile/name/Thermostat"

    def test_by_name(self, service, client: DeviceProfileClient) -> None:
        service.reply({"statusCode": 200, "profile": {"name": "Thermostat", "model": "T-100"}})
        res = client.device_profile_by_name("Thermostat")
        assert res.profile.model == "T-100"
        assert service.last_path == "/api/v3/deviceprofile/name/Thermostat"

    def test_all_with_labels(self, service, client: DeviceProfileClient) -> None:
        service.reply({"totalCount": 2, "profiles": [{"name": "a"}, {"name": "b"}]})
        res = client.all_device_profiles(["hvac", "floor-2"], 0, 10)
        assert res.total_count == 2
        assert [p.name for p in res.profiles] == ["a", "b"]
        assert service.last_path == "/api/v3/deviceprofile/all"
        assert dict(service.last.url.params) == {
            "labels": "hvac,floor-2",
            "offset": "0",
            "limit": "10",
        }

    def test_all_with_single_string_label(self, service, client: DeviceProfileClient) -> None:
        client.all_device_profiles(labels="sensor")
        assert service.last.url.params["labels"] == "sensor"

    def test_all_without_labels(self, service, client: DeviceProfileClient) -> None:
        client.all_device_profiles()
        assert dict(service.last.url.params) == {"offset": "0", "limit": "20"}

    def test_by_model(self, service, client: DeviceProfileClient) -> None:
        client.device_profiles_by_model("T-100", 5, 1)
        assert service.last_path == "/api/v3/deviceprofile/model/T-100"
        assert dict(service.last.url.params) == {"offset": "5", "limit": "1"}

    def test_by_manufacturer(self, service, client: DeviceProfileClient) -> None:
        client.device_profiles_by_manufacturer("Acme Corp")
        assert service.last_path == "/api/v3/deviceprofile/manufacturer/Acme%20Corp"

    def test_by_manufacturer_and_model(self, service, client: DeviceProfileClient) -> None:
        client.device_profiles_by_manufacturer_and_model("Acme", "T-100", 0, -1)
        assert service.last_path == "/api/v3/deviceprofile/manufacturer/Acme/model/T-100"
        assert dict(service.last.url.params) == {"offset": "0", "limit": "-1"}

    def test_server_error_is_wrapped(self, service, client: DeviceProfileClient) -> None:
        service.reply({"message": "db down"}, 500)
        with pytest.raises(ServerError) as info:
            client.device_profile_by_name("Thermostat")
        assert str(info.value).startswith("query device profile 'Thermostat': HTTP 500")
        assert isinstance(info.value.__cause__, ServerError)


# ---------------------------------------------------------------------------
# YAML upload
# ---------------------------------------------------------------------------


class TestYamlUpload:
    def test_add_by_yaml(self, service, client: DeviceProfileClient, tmp_path) -> None:
        path = tmp_path / "thermostat.yaml"
        path.write_text("name: Thermostat\nmanufacturer: Acme\n")
        service.reply({"statusCode": 201, "id": "p-9"}, 201)
        res = client.add_by_yaml(path)
        assert res.id == "p-9"
        assert service.last.method == "POST"
        assert service.last_path == "/api/v3/deviceprofile/uploadfile"
        assert b"manufacturer: Acme" in service.last.content

    def test_update_by_yaml(self, service, client: DeviceProfileClient, tmp_path) -> None:
        path = tmp_path / "thermostat.yaml"
        path.write_text("name: Thermostat\n")
        client.update_by_yaml(str(path))
        assert service.last.method == "PUT"
        assert service.last_path == "/api/v3/deviceprofile/uploadfile"

    def test_non_mapping_rejected_before_sending(
        self, service, client: DeviceProfileClient, tmp_path
    ) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ContractInvalidError, match="YAML mapping"):
            client.add_by_yaml(path)
        assert service.requests == []

    def test_invalid_yaml_rejected(self, service, client: DeviceProfileClient, tmp_path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("name: [unterminated\n")
        with pytest.raises(ContractInvalidError, match="Invalid YAML"):
            client.add_by_yaml(path)
        assert service.requests == []

    def test_missing_file(self, service, client: DeviceProfileClient, tmp_path) -> None:
        with pytest.raises(ContractInvalidError, match="Cannot read"):
            client.update_by_yaml(tmp_path / "nope.yaml")
        assert service.requests == []

    def test_upload_rejected_by_service(
        self, service, client: DeviceProfileClient, tmp_path
    ) -> None:
        path = tmp_path / "thermostat.yaml"
        path.write_text("name: Thermostat\n")
        service.reply({"message": "duplicate name"}, 409)
        with pytest.raises(ConflictError) as info:
            client.add_by_yaml(path)
        assert info.value.kind == ErrorKind.STATUS_CONFLICT
        assert "thermostat.yaml" in str(info.value)


class TestLifecycle:
    def test_own_transport_closed(self) -> None:
        client = DeviceProfileClient(BASE_URL)
        client.close()
        assert client._transport._client.is_closed

    def test_shared_transport_left_open(self, transport: Transport) -> None:
        with DeviceProfileClient(BASE_URL, transport=transport):
            pass
        assert not transport._client.is_closed
