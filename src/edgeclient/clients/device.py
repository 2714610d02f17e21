"""Client for the core-metadata device resource."""

from __future__ import annotations

from typing import Iterable, Optional

from edgeclient.clients.base import ResourceClient
from edgeclient.models import (
    AddDeviceRequest,
    BaseResponse,
    BaseWithIdResponse,
    DeviceResponse,
    MultiDevicesResponse,
    UpdateDeviceRequest,
    to_wire,
)
from edgeclient.routes import (
    API_ALL_DEVICE_ROUTE,
    API_DEVICE_ROUTE,
    CHECK,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    NAME,
    PROFILE,
    SERVICE,
    join_path,
)


class DeviceClient(ResourceClient):
    def add(
        self, reqs: list[AddDeviceRequest], timeout: Optional[float] = None
    ) -> list[BaseWithIdResponse]:
        return self._call(
            "POST",
            API_DEVICE_ROUTE,
            list[BaseWithIdResponse],
            "add devices",
            json_body=[to_wire(req) for req in reqs],
            timeout=timeout,
        )

    def update(
        self, reqs: list[UpdateDeviceRequest], timeout: Optional[float] = None
    ) -> list[BaseResponse]:
        """Patch devices; only the fields set on each request's device are sent."""
        return self._call(
            "PATCH",
            API_DEVICE_ROUTE,
            list[BaseResponse],
            "update devices",
            json_body=[to_wire(req) for req in reqs],
            timeout=timeout,
        )

    def all_devices(
        self,
        labels: Optional[Iterable[str]] = None,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiDevicesResponse:
        return self._query(
            MultiDevicesResponse,
            "query all devices",
            API_ALL_DEVICE_ROUTE,
            offset=offset, limit=limit, labels=labels, timeout=timeout,
        )

    def device_name_exists(self, name: str, timeout: Optional[float] = None) -> BaseResponse:
        """Succeeds when the device exists; raises NotFoundError otherwise."""
        return self._call(
            "GET",
            join_path(API_DEVICE_ROUTE, CHECK, NAME, name),
            BaseResponse,
            f"check device {name!r}",
            timeout=timeout,
        )

    def device_by_name(self, name: str, timeout: Optional[float] = None) -> DeviceResponse:
        return self._call(
            "GET",
            join_path(API_DEVICE_ROUTE, NAME, name),
            DeviceResponse,
            f"query device {name!r}",
            timeout=timeout,
        )

    def delete_device_by_name(
        self, name: str, timeout: Optional[float] = None
    ) -> BaseResponse:
        return self._call(
            "DELETE",
            join_path(API_DEVICE_ROUTE, NAME, name),
            BaseResponse,
            f"delete device {name!r}",
            timeout=timeout,
        )

    def devices_by_profile_name(
        self,
        name: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiDevicesResponse:
        return self._query(
            MultiDevicesResponse,
            f"query devices by profile {name!r}",
            API_DEVICE_ROUTE, PROFILE, NAME, name,
            offset=offset, limit=limit, timeout=timeout,
        )

    def devices_by_service_name(
        self,
        name: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiDevicesResponse:
        return self._query(
            MultiDevicesResponse,
            f"query devices by service {name!r}",
            API_DEVICE_ROUTE, SERVICE, NAME, name,
            offset=offset, limit=limit, timeout=timeout,
        )
