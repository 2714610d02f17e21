"""Client for the support-notifications notification resource."""

from __future__ import annotations

from typing import Optional

from edgeclient.clients.base import ResourceClient
from edgeclient.models import (
    AddNotificationRequest,
    BaseResponse,
    BaseWithIdResponse,
    MultiNotificationsResponse,
    NotificationResponse,
    to_wire,
)
from edgeclient.routes import (
    AGE,
    API_NOTIFICATION_CLEANUP_ROUTE,
    API_NOTIFICATION_ROUTE,
    CATEGORY,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    END,
    ID,
    LABEL,
    NAME,
    START,
    STATUS,
    SUBSCRIPTION,
    join_path,
)


class NotificationClient(ResourceClient):
    def send_notification(
        self, reqs: list[AddNotificationRequest], timeout: Optional[float] = None
    ) -> list[BaseWithIdResponse]:
        return self._call(
            "POST",
            API_NOTIFICATION_ROUTE,
            list[BaseWithIdResponse],
            "send notifications",
            json_body=[to_wire(req) for req in reqs],
            timeout=timeout,
        )

    def notification_by_id(
        self, id: str, timeout: Optional[float] = None
    ) -> NotificationResponse:
        return self._call(
            "GET",
            join_path(API_NOTIFICATION_ROUTE, ID, id),
            NotificationResponse,
            f"query notification {id!r}",
            timeout=timeout,
        )

    def delete_notification_by_id(
        self, id: str, timeout: Optional[float] = None
    ) -> BaseResponse:
        return self._call(
            "DELETE",
            join_path(API_NOTIFICATION_ROUTE, ID, id),
            BaseResponse,
            f"delete notification {id!r}",
            timeout=timeout,
        )

    def notifications_by_category(
        self,
        category: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiNotificationsResponse:
        return self._query(
            MultiNotificationsResponse,
            f"query notifications by category {category!r}",
            API_NOTIFICATION_ROUTE, CATEGORY, category,
            offset=offset, limit=limit, timeout=timeout,
        )

    def notifications_by_label(
        self,
        label: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiNotificationsResponse:
        return self._query(
            MultiNotificationsResponse,
            f"query notifications by label {label!r}",
            API_NOTIFICATION_ROUTE, LABEL, label,
            offset=offset, limit=limit, timeout=timeout,
        )

    def notifications_by_status(
        self,
        status: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiNotificationsResponse:
        return self._query(
            MultiNotificationsResponse,
            f"query notifications by status {status!r}",
            API_NOTIFICATION_ROUTE, STATUS, status,
            offset=offset, limit=limit, timeout=timeout,
        )

    def notifications_by_time_range(
        self,
        start: int,
        end: int,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiNotificationsResponse:
        return self._query(
            MultiNotificationsResponse,
            "query notifications by time range",
            API_NOTIFICATION_ROUTE, START, start, END, end,
            offset=offset, limit=limit, timeout=timeout,
        )

    def notifications_by_subscription_name(
        self,
        subscription_name: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiNotificationsResponse:
        return self._query(
            MultiNotificationsResponse,
            f"query notifications by subscription {subscription_name!r}",
            API_NOTIFICATION_ROUTE, SUBSCRIPTION, NAME, subscription_name,
            offset=offset, limit=limit, timeout=timeout,
        )

    def cleanup_notifications_by_age(
        self, age: int, timeout: Optional[float] = None
    ) -> BaseResponse:
        """Delete notifications older than *age* milliseconds and their transmissions."""
        return self._call(
            "DELETE",
            join_path(API_NOTIFICATION_CLEANUP_ROUTE, AGE, age),
            BaseResponse,
            f"clean up notifications by age {age}",
            timeout=timeout,
        )

    def delete_processed_notifications_by_age(
        self, age: int, timeout: Optional[float] = None
    ) -> BaseResponse:
        """Delete processed notifications older than *age* milliseconds."""
        return self._call(
            "DELETE",
            join_path(API_NOTIFICATION_ROUTE, AGE, age),
            BaseResponse,
            f"delete processed notifications by age {age}",
            timeout=timeout,
        )
