"""Client for the core-data reading resource."""

from __future__ import annotations

from typing import Optional

from edgeclient.clients.base import ResourceClient
from edgeclient.models import CountResponse, MultiReadingsResponse
from edgeclient.routes import (
    API_ALL_READING_ROUTE,
    API_READING_COUNT_ROUTE,
    API_READING_ROUTE,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    DEVICE,
    END,
    NAME,
    RESOURCE_NAME,
    START,
    join_path,
)


class ReadingClient(ResourceClient):
    def all_readings(
        self,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiReadingsResponse:
        return self._query(
            MultiReadingsResponse,
            "query all readings",
            API_ALL_READING_ROUTE,
            offset=offset, limit=limit, timeout=timeout,
        )

    def reading_count(self, timeout: Optional[float] = None) -> CountResponse:
        return self._call(
            "GET", API_READING_COUNT_ROUTE, CountResponse, "count readings", timeout=timeout
        )

    def reading_count_by_device_name(
        self, name: str, timeout: Optional[float] = None
    ) -> CountResponse:
        return self._call(
            "GET",
            join_path(API_READING_COUNT_ROUTE, DEVICE, NAME, name),
            CountResponse,
            f"count readings of device {name!r}",
            timeout=timeout,
        )

    def readings_by_device_name(
        self,
        name: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiReadingsResponse:
        return self._query(
            MultiReadingsResponse,
            f"query readings of device {name!r}",
            API_READING_ROUTE, DEVICE, NAME, name,
            offset=offset, limit=limit, timeout=timeout,
        )

    def readings_by_resource_name(
        self,
        resource_name: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiReadingsResponse:
        return self._query(
            MultiReadingsResponse,
            f"query readings of resource {resource_name!r}",
            API_READING_ROUTE, RESOURCE_NAME, resource_name,
            offset=offset, limit=limit, timeout=timeout,
        )

    def readings_by_time_range(
        self,
        start: int,
        end: int,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiReadingsResponse:
        return self._query(
            MultiReadingsResponse,
            "query readings by time range",
            API_READING_ROUTE, START, start, END, end,
            offset=offset, limit=limit, timeout=timeout,
        )

    def readings_by_device_name_and_resource_name(
        self,
        name: str,
        resource_name: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiReadingsResponse:
        return self._query(
            MultiReadingsResponse,
            f"query readings of device {name!r} and resource {resource_name!r}",
            API_READING_ROUTE, DEVICE, NAME, name, RESOURCE_NAME, resource_name,
            offset=offset, limit=limit, timeout=timeout,
        )

    def readings_by_device_name_and_resource_name_and_time_range(
        self,
        name: str,
        resource_name: str,
        start: int,
        end: int,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiReadingsResponse:
        return self._query(
            MultiReadingsResponse,
            f"query readings of device {name!r} and resource {resource_name!r} by time range",
            API_READING_ROUTE, DEVICE, NAME, name, RESOURCE_NAME, resource_name,
            START, start, END, end,
            offset=offset, limit=limit, timeout=timeout,
        )
