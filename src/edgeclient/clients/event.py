"""Client for the core-data event resource."""

from __future__ import annotations

from typing import Optional

from edgeclient.clients.base import ResourceClient
from edgeclient.models import (
    AddEventRequest,
    BaseResponse,
    BaseWithIdResponse,
    CountResponse,
    MultiEventsResponse,
    to_wire,
)
from edgeclient.routes import (
    AGE,
    API_ALL_EVENT_ROUTE,
    API_EVENT_COUNT_ROUTE,
    API_EVENT_ROUTE,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    DEVICE,
    END,
    NAME,
    START,
    join_path,
)


class EventClient(ResourceClient):
    """Adds, counts, queries and purges events."""

    def add(
        self,
        service_name: str,
        req: AddEventRequest,
        timeout: Optional[float] = None,
    ) -> BaseWithIdResponse:
        """Publish ``req.event`` on behalf of the device service *service_name*.

        The path carries the service, profile, device and source names so the
        service can route the event without decoding the body.
        """
        event = req.event
        return self._call(
            "POST",
            join_path(
                API_EVENT_ROUTE,
                service_name,
                event.profile_name,
                event.device_name,
                event.source_name,
            ),
            BaseWithIdResponse,
            f"add event for device {event.device_name!r}",
            json_body=to_wire(req),
            timeout=timeout,
        )

    def all_events(
        self,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiEventsResponse:
        return self._query(
            MultiEventsResponse,
            "query all events",
            API_ALL_EVENT_ROUTE,
            offset=offset, limit=limit, timeout=timeout,
        )

    def event_count(self, timeout: Optional[float] = None) -> CountResponse:
        return self._call(
            "GET", API_EVENT_COUNT_ROUTE, CountResponse, "count events", timeout=timeout
        )

    def event_count_by_device_name(
        self, name: str, timeout: Optional[float] = None
    ) -> CountResponse:
        return self._call(
            "GET",
            join_path(API_EVENT_COUNT_ROUTE, DEVICE, NAME, name),
            CountResponse,
            f"count events of device {name!r}",
            timeout=timeout,
        )

    def events_by_device_name(
        self,
        name: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiEventsResponse:
        return self._query(
            MultiEventsResponse,
            f"query events of device {name!r}",
            API_EVENT_ROUTE, DEVICE, NAME, name,
            offset=offset, limit=limit, timeout=timeout,
        )

    def events_by_time_range(
        self,
        start: int,
        end: int,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiEventsResponse:
        """Events whose origin lies between *start* and *end* (epoch nanoseconds)."""
        return self._query(
            MultiEventsResponse,
            "query events by time range",
            API_EVENT_ROUTE, START, start, END, end,
            offset=offset, limit=limit, timeout=timeout,
        )

    def delete_by_device_name(
        self, name: str, timeout: Optional[float] = None
    ) -> BaseResponse:
        return self._call(
            "DELETE",
            join_path(API_EVENT_ROUTE, DEVICE, NAME, name),
            BaseResponse,
            f"delete events of device {name!r}",
            timeout=timeout,
        )

    def delete_by_age(self, age: int, timeout: Optional[float] = None) -> BaseResponse:
        """Delete events older than *age* nanoseconds."""
        return self._call(
            "DELETE",
            join_path(API_EVENT_ROUTE, AGE, age),
            BaseResponse,
            f"delete events by age {age}",
            timeout=timeout,
        )
