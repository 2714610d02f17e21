"""Client for the core-metadata device profile resource.

Besides the usual CRUD and "by X" queries, :class:`DeviceProfileClient`
memoises :meth:`~DeviceProfileClient.device_resource_by_profile_name_and_resource_name`
in a per-client :class:`~edgeclient.cache.ResourceCache`. Device services
look up the same resource descriptor for every reading they produce; the
cache turns all but the first lookup into a dictionary read.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml

from edgeclient.cache import ResourceCache, resource_key
from edgeclient.clients.base import ResourceClient
from edgeclient.exceptions import ContractInvalidError
from edgeclient.models import (
    BaseResponse,
    BaseWithIdResponse,
    DeviceProfileRequest,
    DeviceProfileResponse,
    DeviceResourceResponse,
    MultiDeviceProfilesResponse,
    to_wire,
)
from edgeclient.routes import (
    API_ALL_DEVICE_PROFILE_ROUTE,
    API_DEVICE_PROFILE_ROUTE,
    API_DEVICE_PROFILE_UPLOAD_FILE_ROUTE,
    API_DEVICE_RESOURCE_ROUTE,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    MANUFACTURER,
    MODEL,
    NAME,
    PROFILE,
    RESOURCE,
    join_path,
)

logger = logging.getLogger(__name__)


class DeviceProfileClient(ResourceClient):
    """Manages device profiles and caches device-resource lookups.

    The resource cache is never invalidated automatically. Call
    :meth:`clean_resources_cache` after changing a profile's resources.
    """

    def __init__(self, base_url: str, *args: Any, **kwargs: Any) -> None:
        super().__init__(base_url, *args, **kwargs)
        self._resources_cache: ResourceCache[DeviceResourceResponse] = ResourceCache()

    def add(
        self, reqs: list[DeviceProfileRequest], timeout: Optional[float] = None
    ) -> list[BaseWithIdResponse]:
        return self._call(
            "POST",
            API_DEVICE_PROFILE_ROUTE,
            list[BaseWithIdResponse],
            "add device profiles",
            json_body=[to_wire(req) for req in reqs],
            timeout=timeout,
        )

    def update(
        self, reqs: list[DeviceProfileRequest], timeout: Optional[float] = None
    ) -> list[BaseResponse]:
        return self._call(
            "PUT",
            API_DEVICE_PROFILE_ROUTE,
            list[BaseResponse],
            "update device profiles",
            json_body=[to_wire(req) for req in reqs],
            timeout=timeout,
        )

    def add_by_yaml(
        self, yaml_file_path: str | Path, timeout: Optional[float] = None
    ) -> BaseWithIdResponse:
        """Upload a device profile YAML file to create the profile.

        Raises:
            ContractInvalidError: If the file is not a YAML mapping; nothing
                is sent in that case.
        """
        _check_profile_yaml(yaml_file_path)
        return self._upload(
            "POST",
            API_DEVICE_PROFILE_UPLOAD_FILE_ROUTE,
            yaml_file_path,
            BaseWithIdResponse,
            f"add device profile from {yaml_file_path}",
            timeout=timeout,
        )

    def update_by_yaml(
        self, yaml_file_path: str | Path, timeout: Optional[float] = None
    ) -> BaseResponse:
        """Upload a device profile YAML file to replace the existing profile."""
        _check_profile_yaml(yaml_file_path)
        return self._upload(
            "PUT",
            API_DEVICE_PROFILE_UPLOAD_FILE_ROUTE,
            yaml_file_path,
            BaseResponse,
            f"update device profile from {yaml_file_path}",
            timeout=timeout,
        )

    def delete_by_name(self, name: str, timeout: Optional[float] = None) -> BaseResponse:
        return self._call(
            "DELETE",
            join_path(API_DEVICE_PROFILE_ROUTE, NAME, name),
            BaseResponse,
            f"delete device profile {name!r}",
            timeout=timeout,
        )

    def device_profile_by_name(
        self, name: str, timeout: Optional[float] = None
    ) -> DeviceProfileResponse:
        return self._call(
            "GET",
            join_path(API_DEVICE_PROFILE_ROUTE, NAME, name),
            DeviceProfileResponse,
            f"query device profile {name!r}",
            timeout=timeout,
        )

    def all_device_profiles(
        self,
        labels: Optional[Iterable[str]] = None,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiDeviceProfilesResponse:
        """All profiles, optionally only those carrying every one of *labels*."""
        return self._query(
            MultiDeviceProfilesResponse,
            "query all device profiles",
            API_ALL_DEVICE_PROFILE_ROUTE,
            offset=offset, limit=limit, labels=labels, timeout=timeout,
        )

    def device_profiles_by_model(
        self,
        model: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiDeviceProfilesResponse:
        return self._query(
            MultiDeviceProfilesResponse,
            f"query device profiles by model {model!r}",
            API_DEVICE_PROFILE_ROUTE, MODEL, model,
            offset=offset, limit=limit, timeout=timeout,
        )

    def device_profiles_by_manufacturer(
        self,
        manufacturer: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiDeviceProfilesResponse:
        return self._query(
            MultiDeviceProfilesResponse,
            f"query device profiles by manufacturer {manufacturer!r}",
            API_DEVICE_PROFILE_ROUTE, MANUFACTURER, manufacturer,
            offset=offset, limit=limit, timeout=timeout,
        )

    def device_profiles_by_manufacturer_and_model(
        self,
        manufacturer: str,
        model: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiDeviceProfilesResponse:
        return self._query(
            MultiDeviceProfilesResponse,
            f"query device profiles by manufacturer {manufacturer!r} and model {model!r}",
            API_DEVICE_PROFILE_ROUTE, MANUFACTURER, manufacturer, MODEL, model,
            offset=offset, limit=limit, timeout=timeout,
        )

    def device_resource_by_profile_name_and_resource_name(
        self,
        profile_name: str,
        resource_name: str,
        timeout: Optional[float] = None,
    ) -> DeviceResourceResponse:
        """Return a profile's device resource, from the cache when possible.

        A miss fetches the resource and caches it under
        ``profile_name:resource_name``. A failed fetch raises and caches
        nothing.
        """
        key = resource_key(profile_name, resource_name)
        cached, found = self._resources_cache.lookup(key)
        if found:
            logger.debug("Device resource cache hit: %s", key)
            return cached

        logger.debug("Device resource cache miss: %s", key)
        res = self._call(
            "GET",
            join_path(API_DEVICE_RESOURCE_ROUTE, PROFILE, profile_name, RESOURCE, resource_name),
            DeviceResourceResponse,
            f"query device resource {resource_name!r} of profile {profile_name!r}",
            timeout=timeout,
        )
        self._resources_cache.store(key, res)
        return res

    def clean_resources_cache(self) -> None:
        """Forget every cached device resource."""
        self._resources_cache.clear()


def _check_profile_yaml(yaml_file_path: str | Path) -> None:
    path = Path(yaml_file_path)
    try:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except OSError as exc:
        raise ContractInvalidError(f"Cannot read device profile file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ContractInvalidError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(document, dict):
        raise ContractInvalidError(f"Device profile file {path} must contain a YAML mapping")
