"""Client for the support-notifications subscription resource."""

from __future__ import annotations

from typing import Optional

from edgeclient.clients.base import ResourceClient
from edgeclient.models import (
    AddSubscriptionRequest,
    BaseResponse,
    BaseWithIdResponse,
    MultiSubscriptionsResponse,
    SubscriptionResponse,
    UpdateSubscriptionRequest,
    to_wire,
)
from edgeclient.routes import (
    API_ALL_SUBSCRIPTION_ROUTE,
    API_SUBSCRIPTION_ROUTE,
    CATEGORY,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    LABEL,
    NAME,
    RECEIVER,
    join_path,
)


class SubscriptionClient(ResourceClient):
    def add(
        self, reqs: list[AddSubscriptionRequest], timeout: Optional[float] = None
    ) -> list[BaseWithIdResponse]:
        return self._call(
            "POST",
            API_SUBSCRIPTION_ROUTE,
            list[BaseWithIdResponse],
            "add subscriptions",
            json_body=[to_wire(req) for req in reqs],
            timeout=timeout,
        )

    def update(
        self, reqs: list[UpdateSubscriptionRequest], timeout: Optional[float] = None
    ) -> list[BaseResponse]:
        return self._call(
            "PATCH",
            API_SUBSCRIPTION_ROUTE,
            list[BaseResponse],
            "update subscriptions",
            json_body=[to_wire(req) for req in reqs],
            timeout=timeout,
        )

    def all_subscriptions(
        self,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiSubscriptionsResponse:
        return self._query(
            MultiSubscriptionsResponse,
            "query all subscriptions",
            API_ALL_SUBSCRIPTION_ROUTE,
            offset=offset, limit=limit, timeout=timeout,
        )

    def subscriptions_by_category(
        self,
        category: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiSubscriptionsResponse:
        return self._query(
            MultiSubscriptionsResponse,
            f"query subscriptions by category {category!r}",
            API_SUBSCRIPTION_ROUTE, CATEGORY, category,
            offset=offset, limit=limit, timeout=timeout,
        )

    def subscriptions_by_label(
        self,
        label: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiSubscriptionsResponse:
        return self._query(
            MultiSubscriptionsResponse,
            f"query subscriptions by label {label!r}",
            API_SUBSCRIPTION_ROUTE, LABEL, label,
            offset=offset, limit=limit, timeout=timeout,
        )

    def subscriptions_by_receiver(
        self,
        receiver: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> MultiSubscriptionsResponse:
        return self._query(
            MultiSubscriptionsResponse,
            f"query subscriptions by receiver {receiver!r}",
            API_SUBSCRIPTION_ROUTE, RECEIVER, receiver,
            offset=offset, limit=limit, timeout=timeout,
        )

    def subscription_by_name(
        self, name: str, timeout: Optional[float] = None
    ) -> SubscriptionResponse:
        return self._call(
            "GET",
            join_path(API_SUBSCRIPTION_ROUTE, NAME, name),
            SubscriptionResponse,
            f"query subscription {name!r}",
            timeout=timeout,
        )

    def delete_subscription_by_name(
        self, name: str, timeout: Optional[float] = None
    ) -> BaseResponse:
        return self._call(
            "DELETE",
            join_path(API_SUBSCRIPTION_ROUTE, NAME, name),
            BaseResponse,
            f"delete subscription {name!r}",
            timeout=timeout,
        )
