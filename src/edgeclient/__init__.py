"""edgeclient -- typed Python clients for an IoT edge platform's REST API.

One client class per API resource (events, readings, devices, device
profiles, subscriptions, notifications, transmissions) turns method
arguments into an escaped request path and pagination query, performs a
single HTTP call through a shared :class:`~edgeclient.transport.Transport`,
and validates the JSON body into frozen Pydantic response models.

Typical usage::

    from edgeclient.clients import DeviceProfileClient

    with DeviceProfileClient("http://localhost:59881") as client:
        res = client.device_resource_by_profile_name_and_resource_name(
            "Thermostat", "Temperature"
        )
        print(res.resource.properties.value_type)

Modules:
    clients: Resource clients.
    transport: Shared HTTP helper with auth injection and error mapping.
    cache: Reader/writer-locked device-resource cache.
    models: Pydantic DTOs and configuration models.
    routes: Route constants and path/query builders.
    auth: Authentication injectors.
    config: Config file / environment resolution.
    exceptions: Classified error hierarchy.
    app: Typer command line.
"""

__version__ = "0.1.0"
