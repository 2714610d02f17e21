"""Canonical Pydantic models shared across all edgeclient modules.

This is the single source of truth for data shapes in the project. The
models fall into four groups:

**Configuration models** -- loaded from ``edgeclient.json`` and the
environment: :class:`AuthConfig` and :class:`ClientConfig`.

**Domain objects** -- the entities the services store:
    :class:`Event`, :class:`BaseReading`, :class:`Device`,
    :class:`DeviceProfile`, :class:`DeviceResource`, :class:`Transmission`,
    :class:`Subscription`, :class:`Notification` and their parts.

**Request envelopes** -- bodies sent on POST/PATCH, e.g.
    :class:`AddEventRequest`, :class:`DeviceProfileRequest`.

**Response envelopes** -- bodies returned by the services, e.g.
    :class:`DeviceResourceResponse`, :class:`MultiTransmissionsResponse`.

Wire JSON uses camelCase keys; attributes are snake_case. Both spellings
are accepted on input, and :func:`to_wire` serialises with the camelCase
aliases. Domain objects and responses are frozen: once validated from a
response body they are not mutated.
"""

from __future__ import annotations

import time
import uuid
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from edgeclient.routes import API_VERSION


class _WireModel(BaseModel):
    """Base for everything that travels over HTTP."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


def to_wire(model: BaseModel) -> dict[str, Any]:
    """Serialise *model* to a JSON-ready dict with camelCase keys, dropping ``None``."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- Configuration ---


class AuthConfig(BaseModel):
    """Authentication settings embedded in a :class:`ClientConfig`.

    ``type`` selects the injector built by
    :func:`~edgeclient.auth.create_injector`: ``none`` sends no credentials,
    ``bearer`` sends ``Authorization: Bearer <token>`` where the token is
    resolved from ``source``.

    Example::

        AuthConfig(type="bearer", source="env:EDGEX_TOKEN")
    """

    type: str = Field(default="none", description="Auth type: none, bearer")
    source: Optional[str] = Field(
        default=None,
        description="Credential source: env:VAR, file:/path, value:TOKEN",
    )


class ClientConfig(BaseModel):
    """Connection settings for the resource clients and the CLI."""

    base_url: str = Field(
        default="http://localhost:59880", description="Service root URL"
    )
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    auth: AuthConfig = Field(default_factory=AuthConfig)


# --- Shared parts ---


class Address(_WireModel):
    """Where a notification channel delivers: REST, EMAIL or MQTT."""

    type: str = ""
    host: Optional[str] = None
    port: Optional[int] = None
    http_method: Optional[str] = None
    path: Optional[str] = None
    scheme: Optional[str] = None
    publisher: Optional[str] = None
    topic: Optional[str] = None
    recipients: Optional[list[str]] = None


# --- Core data ---


class BaseReading(_WireModel):
    """A single sensor value carried by an :class:`Event`."""

    id: Optional[str] = None
    origin: int = 0
    device_name: str = ""
    resource_name: str = ""
    profile_name: str = ""
    value_type: str = ""
    units: Optional[str] = None
    tags: Optional[dict[str, Any]] = None
    value: Optional[str] = None
    binary_value: Optional[str] = None
    media_type: Optional[str] = None
    object_value: Any = None


class Event(_WireModel):
    """A collection of readings taken from one device source at one instant."""

    id: str = ""
    device_name: str = ""
    profile_name: str = ""
    source_name: str = ""
    origin: int = 0
    readings: list[BaseReading] = Field(default_factory=list)
    tags: Optional[dict[str, Any]] = None

    @classmethod
    def new(
        cls,
        profile_name: str,
        device_name: str,
        source_name: str,
        readings: Optional[list[BaseReading]] = None,
    ) -> Event:
        """Create an event with a fresh id and an origin of now (nanoseconds)."""
        return cls(
            id=str(uuid.uuid4()),
            profile_name=profile_name,
            device_name=device_name,
            source_name=source_name,
            origin=time.time_ns(),
            readings=readings or [],
        )


# --- Core metadata ---


class ResourceProperties(_WireModel):
    value_type: str = ""
    read_write: str = ""
    units: Optional[str] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    default_value: Optional[str] = None
    mask: Optional[int] = None
    shift: Optional[int] = None
    scale: Optional[float] = None
    offset: Optional[float] = None
    base: Optional[float] = None
    assertion: Optional[str] = None
    media_type: Optional[str] = None


class DeviceResource(_WireModel):
    """One readable/writable value a device exposes, as declared in its profile."""

    name: str = ""
    description: Optional[str] = None
    is_hidden: bool = False
    properties: ResourceProperties = Field(default_factory=ResourceProperties)
    attributes: Optional[dict[str, Any]] = None
    tags: Optional[dict[str, Any]] = None


class ResourceOperation(_WireModel):
    device_resource: str = ""
    default_value: Optional[str] = None
    mappings: Optional[dict[str, str]] = None


class DeviceCommand(_WireModel):
    name: str = ""
    is_hidden: bool = False
    read_write: str = ""
    resource_operations: list[ResourceOperation] = Field(default_factory=list)
    tags: Optional[dict[str, Any]] = None


class DeviceProfile(_WireModel):
    """The resources and commands shared by every device of one make and model."""

    id: Optional[str] = None
    name: str = ""
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    description: Optional[str] = None
    labels: Optional[list[str]] = None
    device_resources: list[DeviceResource] = Field(default_factory=list)
    device_commands: list[DeviceCommand] = Field(default_factory=list)


class AutoEvent(_WireModel):
    interval: str = ""
    on_change: bool = False
    source_name: str = ""


class Device(_WireModel):
    """A physical or virtual device managed by a device service.

    Every field is optional so the same model serves as the partial body of
    an update request.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    admin_state: Optional[str] = None
    operating_state: Optional[str] = None
    labels: Optional[list[str]] = None
    location: Any = None
    service_name: Optional[str] = None
    profile_name: Optional[str] = None
    auto_events: Optional[list[AutoEvent]] = None
    protocols: Optional[dict[str, dict[str, Any]]] = None
    tags: Optional[dict[str, Any]] = None
    properties: Optional[dict[str, Any]] = None


# --- Support notifications ---


class Subscription(_WireModel):
    """Who gets notified, for which categories/labels, and over which channels."""

    id: Optional[str] = None
    name: Optional[str] = None
    channels: Optional[list[Address]] = None
    receiver: Optional[str] = None
    categories: Optional[list[str]] = None
    labels: Optional[list[str]] = None
    description: Optional[str] = None
    resend_limit: Optional[int] = None
    resend_interval: Optional[str] = None
    admin_state: Optional[str] = None


class Notification(_WireModel):
    id: Optional[str] = None
    category: Optional[str] = None
    labels: Optional[list[str]] = None
    content: str = ""
    content_type: Optional[str] = None
    description: Optional[str] = None
    sender: str = ""
    severity: str = "NORMAL"
    status: Optional[str] = None
    created: Optional[int] = None
    modified: Optional[int] = None


class TransmissionRecord(_WireModel):
    status: str = ""
    response: Optional[str] = None
    sent: int = 0


class Transmission(_WireModel):
    """One delivery attempt history of a notification over one channel."""

    id: str = ""
    created: int = 0
    subscription_name: str = ""
    channel: Optional[Address] = None
    notification_id: str = ""
    status: str = ""
    records: list[TransmissionRecord] = Field(default_factory=list)
    resend_count: int = 0


# --- Requests ---


class BaseRequest(_WireModel):
    api_version: str = API_VERSION
    request_id: Optional[str] = None


class AddEventRequest(BaseRequest):
    event: Event


class DeviceProfileRequest(BaseRequest):
    profile: DeviceProfile


class AddDeviceRequest(BaseRequest):
    device: Device


class UpdateDeviceRequest(BaseRequest):
    device: Device


class AddSubscriptionRequest(BaseRequest):
    subscription: Subscription


class UpdateSubscriptionRequest(BaseRequest):
    subscription: Subscription


class AddNotificationRequest(BaseRequest):
    notification: Notification


# --- Responses ---


class BaseResponse(_WireModel):
    """Envelope fields every service response carries."""

    api_version: str = ""
    request_id: str = ""
    message: str = ""
    status_code: int = 0


class BaseWithIdResponse(BaseResponse):
    id: str = ""


class BaseWithTotalCountResponse(BaseResponse):
    total_count: int = 0


class CountResponse(BaseResponse):
    count: int = 0


class PingResponse(BaseResponse):
    timestamp: str = ""
    service_name: str = ""


class VersionResponse(BaseResponse):
    version: str = ""
    service_name: str = ""


class ConfigResponse(BaseResponse):
    config: dict[str, Any] = Field(default_factory=dict)
    service_name: str = ""


class EventResponse(BaseResponse):
    event: Event = Field(default_factory=Event)


class MultiEventsResponse(BaseWithTotalCountResponse):
    events: list[Event] = Field(default_factory=list)


class ReadingResponse(BaseResponse):
    reading: BaseReading = Field(default_factory=BaseReading)


class MultiReadingsResponse(BaseWithTotalCountResponse):
    readings: list[BaseReading] = Field(default_factory=list)


class DeviceResponse(BaseResponse):
    device: Device = Field(default_factory=Device)


class MultiDevicesResponse(BaseWithTotalCountResponse):
    devices: list[Device] = Field(default_factory=list)


class DeviceProfileResponse(BaseResponse):
    profile: DeviceProfile = Field(default_factory=DeviceProfile)


class MultiDeviceProfilesResponse(BaseWithTotalCountResponse):
    profiles: list[DeviceProfile] = Field(default_factory=list)


class DeviceResourceResponse(BaseResponse):
    resource: DeviceResource = Field(default_factory=DeviceResource)


class SubscriptionResponse(BaseResponse):
    subscription: Subscription = Field(default_factory=Subscription)


class MultiSubscriptionsResponse(BaseWithTotalCountResponse):
    subscriptions: list[Subscription] = Field(default_factory=list)


class NotificationResponse(BaseResponse):
    notification: Notification = Field(default_factory=Notification)


class MultiNotificationsResponse(BaseWithTotalCountResponse):
    notifications: list[Notification] = Field(default_factory=list)


class TransmissionResponse(BaseResponse):
    transmission: Transmission = Field(default_factory=Transmission)


class MultiTransmissionsResponse(BaseWithTotalCountResponse):
    transmissions: list[Transmission] = Field(default_factory=list)
