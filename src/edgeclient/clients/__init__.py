"""Resource clients, one per API resource family.

Each client takes a ``base_url`` and an optional
:class:`~edgeclient.auth.AuthenticationInjector`, and may share a
:class:`~edgeclient.transport.Transport` with other clients::

    from edgeclient.clients import DeviceProfileClient, TransmissionClient
    from edgeclient.transport import Transport

    with Transport(timeout=10) as transport:
        profiles = DeviceProfileClient("http://localhost:59881", transport=transport)
        transmissions = TransmissionClient("http://localhost:59860", transport=transport)
        failed = transmissions.transmissions_by_status("FAILED", offset=0, limit=50)
"""

from edgeclient.clients.base import ResourceClient
from edgeclient.clients.common import CommonClient
from edgeclient.clients.device import DeviceClient
from edgeclient.clients.deviceprofile import DeviceProfileClient
from edgeclient.clients.event import EventClient
from edgeclient.clients.notification import NotificationClient
from edgeclient.clients.reading import ReadingClient
from edgeclient.clients.subscription import SubscriptionClient
from edgeclient.clients.transmission import TransmissionClient

__all__ = [
    "ResourceClient",
    "CommonClient",
    "DeviceClient",
    "DeviceProfileClient",
    "EventClient",
    "NotificationClient",
    "ReadingClient",
    "SubscriptionClient",
    "TransmissionClient",
]
