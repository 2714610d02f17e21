"""Client for the support-notifications transmission resource."""

from __future__ import annotations

from typing import Optional

from edgeclient.clients.base import ResourceClient
from edgeclient.models import (
    BaseResponse,
    MultiTransmissionsResponse,
    TransmissionResponse,
)
from edgeclient.routes import (
    AGE,
    API_ALL_TRANSMISSION_ROUTE,
    API_TRANSMISSION_ROUTE,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    END,
    ID,
    NAME,
    NOTIFICATION,
    START,
    STATUS,
    SUBSCRIPTION,
    join_path,
)


class TransmissionClient(ResourceClient):
    """Queries the delivery history of notifications."""

    def transmission_by_id(
        self, id: str, timeout: Optional[float] = None
    ) -> TransmissionResponse:
        return self._call(
            "GET",
            join_path(API_TRANSMISSION_ROUTE, ID, id),
            TransmissionResponse,
            f"query transmission by id {id!r}",
            timeout=timeout,
        )

    def transmissions_by_time_range(
        self,
        start: int,
        end: int,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiTransmissionsResponse:
        """Transmissions created between *start* and *end* (epoch milliseconds)."""
        return self._query(
            MultiTransmissionsResponse,
            "query transmissions by time range",
            API_TRANSMISSION_ROUTE, START, start, END, end,
            offset=offset, limit=limit, timeout=timeout,
        )

    def all_transmissions(
        self,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiTransmissionsResponse:
        return self._query(
            MultiTransmissionsResponse,
            "query all transmissions",
            API_ALL_TRANSMISSION_ROUTE,
            offset=offset, limit=limit, timeout=timeout,
        )

    def transmissions_by_status(
        self,
        status: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiTransmissionsResponse:
        """Transmissions in *status* (``SENT``, ``FAILED``, ``ACKNOWLEDGED``, ``RESENDING``...)."""
        return self._query(
            MultiTransmissionsResponse,
            f"query transmissions by status {status!r}",
            API_TRANSMISSION_ROUTE, STATUS, status,
            offset=offset, limit=limit, timeout=timeout,
        )

    def delete_processed_transmissions_by_age(
        self, age: int, timeout: Optional[float] = None
    ) -> BaseResponse:
        """Delete processed transmissions whose age exceeds *age* milliseconds.

        A transmission's age is the current timestamp minus its created
        timestamp. Only transmissions already processed by the service are
        removed.
        """
        return self._call(
            "DELETE",
            join_path(API_TRANSMISSION_ROUTE, AGE, age),
            BaseResponse,
            f"delete processed transmissions by age {age}",
            timeout=timeout,
        )

    def transmissions_by_subscription_name(
        self,
        subscription_name: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiTransmissionsResponse:
        return self._query(
            MultiTransmissionsResponse,
            f"query transmissions by subscription name {subscription_name!r}",
            API_TRANSMISSION_ROUTE, SUBSCRIPTION, NAME, subscription_name,
            offset=offset, limit=limit, timeout=timeout,
        )

    def transmissions_by_notification_id(
        self,
        id: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiTransmissionsResponse:
        return self._query(
            MultiTransmissionsResponse,
            f"query transmissions by notification id {id!r}",
            API_TRANSMISSION_ROUTE, NOTIFICATION, ID, id,
            offset=offset, limit=limit, timeout=timeout,
        )
