"""Client for the endpoints every service exposes: ping, version, config."""

from __future__ import annotations

from typing import Optional

from edgeclient.clients.base import ResourceClient
from edgeclient.models import ConfigResponse, PingResponse, VersionResponse
from edgeclient.routes import API_CONFIG_ROUTE, API_PING_ROUTE, API_VERSION_ROUTE


class CommonClient(ResourceClient):
    def ping(self, timeout: Optional[float] = None) -> PingResponse:
        return self._call("GET", API_PING_ROUTE, PingResponse, "ping", timeout=timeout)

    def version(self, timeout: Optional[float] = None) -> VersionResponse:
        return self._call(
            "GET", API_VERSION_ROUTE, VersionResponse, "query version", timeout=timeout
        )

    def configuration(self, timeout: Optional[float] = None) -> ConfigResponse:
        return self._call(
            "GET", API_CONFIG_ROUTE, ConfigResponse, "query configuration", timeout=timeout
        )
