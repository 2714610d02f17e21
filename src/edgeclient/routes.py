"""Route constants and request path/query builders.

All service endpoints live under :data:`API_BASE`. Resource clients build
their paths with :func:`join_path`, which joins fixed route segments and
percent-escapes every caller-supplied value so that names containing
spaces or slashes stay a single path segment::

    >>> join_path(API_DEVICE_PROFILE_ROUTE, NAME, "Temp Sensor/A")
    '/api/v3/deviceprofile/name/Temp%20Sensor%2FA'

Paginated queries use :func:`pagination_params`, which always yields
exactly the ``offset`` and ``limit`` keys plus any non-empty filters.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union
from urllib.parse import quote

API_VERSION = "v3"
API_BASE = f"/api/{API_VERSION}"

# --- Common routes ---

API_PING_ROUTE = f"{API_BASE}/ping"
API_VERSION_ROUTE = f"{API_BASE}/version"
API_CONFIG_ROUTE = f"{API_BASE}/config"

# --- Core data ---

API_EVENT_ROUTE = f"{API_BASE}/event"
API_ALL_EVENT_ROUTE = f"{API_EVENT_ROUTE}/all"
API_EVENT_COUNT_ROUTE = f"{API_EVENT_ROUTE}/count"
API_READING_ROUTE = f"{API_BASE}/reading"
API_ALL_READING_ROUTE = f"{API_READING_ROUTE}/all"
API_READING_COUNT_ROUTE = f"{API_READING_ROUTE}/count"

# --- Core metadata ---

API_DEVICE_ROUTE = f"{API_BASE}/device"
API_ALL_DEVICE_ROUTE = f"{API_DEVICE_ROUTE}/all"
API_DEVICE_PROFILE_ROUTE = f"{API_BASE}/deviceprofile"
API_ALL_DEVICE_PROFILE_ROUTE = f"{API_DEVICE_PROFILE_ROUTE}/all"
API_DEVICE_PROFILE_UPLOAD_FILE_ROUTE = f"{API_DEVICE_PROFILE_ROUTE}/uploadfile"
API_DEVICE_RESOURCE_ROUTE = f"{API_BASE}/deviceresource"

# --- Support notifications ---

API_SUBSCRIPTION_ROUTE = f"{API_BASE}/subscription"
API_ALL_SUBSCRIPTION_ROUTE = f"{API_SUBSCRIPTION_ROUTE}/all"
API_NOTIFICATION_ROUTE = f"{API_BASE}/notification"
API_NOTIFICATION_CLEANUP_ROUTE = f"{API_BASE}/cleanup"
API_TRANSMISSION_ROUTE = f"{API_BASE}/transmission"
API_ALL_TRANSMISSION_ROUTE = f"{API_TRANSMISSION_ROUTE}/all"

# --- Path segments ---

ID = "id"
NAME = "name"
START = "start"
END = "end"
AGE = "age"
STATUS = "status"
COUNT = "count"
CHECK = "check"
DEVICE = "device"
PROFILE = "profile"
SERVICE = "service"
RESOURCE = "resource"
RESOURCE_NAME = "resourceName"
MODEL = "model"
MANUFACTURER = "manufacturer"
CATEGORY = "category"
LABEL = "label"
RECEIVER = "receiver"
SUBSCRIPTION = "subscription"
NOTIFICATION = "notification"

# --- Query parameter keys ---

OFFSET = "offset"
LIMIT = "limit"
LABELS = "labels"

COMMA_SEPARATOR = ","

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 20


def escape(value: Any) -> str:
    """Percent-escape *value* so it is safe as a single path segment."""
    return quote(str(value), safe="")


def join_path(route: str, *segments: Any) -> str:
    """Join *route* with path *segments*, escaping each segment.

    ``route`` is trusted and kept verbatim. Segments may be route keywords
    (``NAME``, ``START``) or caller values; both are escaped, which leaves
    the plain-ASCII keywords unchanged.
    """
    parts = [route.rstrip("/")]
    parts.extend(escape(segment) for segment in segments)
    return "/".join(parts)


def pagination_params(
    offset: int,
    limit: int,
    labels: Union[str, Iterable[str], None] = None,
    **filters: Any,
) -> dict[str, str]:
    """Build the query parameters of a paginated request.

    Args:
        offset: Number of items to skip.
        limit: Maximum number of items to return. ``-1`` asks for all.
        labels: Optional label filter, sent comma-joined under ``labels``.
            A single string counts as one label.
        **filters: Further filters; ``None`` values are left out.

    Returns:
        A ``dict`` with ``offset`` and ``limit`` and only the filters that
        were actually supplied.
    """
    params: dict[str, str] = {}
    label_list = [labels] if isinstance(labels, str) else list(labels or [])
    if label_list:
        params[LABELS] = COMMA_SEPARATOR.join(label_list)
    for key, value in filters.items():
        if value is not None:
            params[key] = str(value)
    params[OFFSET] = str(offset)
    params[LIMIT] = str(limit)
    return params
