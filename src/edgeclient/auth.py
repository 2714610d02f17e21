"""Authentication injectors for outgoing requests.

A resource client may hold an :class:`AuthenticationInjector`. Before each
request the transport asks it for an :class:`AuthResult` and merges the
returned headers and query parameters into the request. Injectors are
consulted per request so that a rotating token (for example a secret file
refreshed by a sidecar) is picked up without rebuilding the client.

Built-in injectors:

- :class:`NoopInjector` -- sends nothing.
- :class:`BearerTokenInjector` -- ``Authorization: Bearer <token>`` with a
  fixed token.
- :class:`SourceTokenInjector` -- bearer token resolved from a credential
  source (``env:``, ``file:``, ``value:``) on every request.

Use :func:`create_injector` to build one from an
:class:`~edgeclient.models.AuthConfig`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from edgeclient.config import resolve_credential
from edgeclient.exceptions import ConfigError
from edgeclient.models import AuthConfig


class AuthResult:
    """Container for authentication artifacts to inject into HTTP requests.

    Args:
        headers: HTTP headers to add (e.g. ``{"Authorization": "Bearer ..."}``).
        params: Query-string parameters to add.

    Example::

        result = AuthResult(headers={"Authorization": "Bearer tok123"})
        assert result.headers["Authorization"] == "Bearer tok123"
    """

    def __init__(
        self,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ):
        self.headers = headers or {}
        self.params = params or {}


class AuthenticationInjector(ABC):
    """Supplies the credentials attached to every request of a client."""

    @abstractmethod
    def authenticate(self) -> AuthResult:
        """Return the headers/params to add to the next request.

        Raises:
            ConfigError: If the credential cannot be resolved.
        """
        ...


class NoopInjector(AuthenticationInjector):
    def authenticate(self) -> AuthResult:
        return AuthResult()


class BearerTokenInjector(AuthenticationInjector):
    """Sends a fixed bearer token."""

    def __init__(self, token: str) -> None:
        self._token = token

    def authenticate(self) -> AuthResult:
        return AuthResult(headers={"Authorization": f"Bearer {self._token}"})


class SourceTokenInjector(AuthenticationInjector):
    """Sends a bearer token read from *source* at request time."""

    def __init__(self, source: str) -> None:
        self._source = source

    def authenticate(self) -> AuthResult:
        token = resolve_credential(self._source)
        return AuthResult(headers={"Authorization": f"Bearer {token}"})


def create_injector(auth_config: Optional[AuthConfig]) -> Optional[AuthenticationInjector]:
    """Build the injector described by *auth_config*.

    Returns:
        ``None`` for ``type="none"`` (or no config), otherwise the injector.

    Raises:
        ConfigError: For an unknown type or a bearer config without a source.
    """
    if auth_config is None or auth_config.type == "none":
        return None
    if auth_config.type == "bearer":
        if not auth_config.source:
            raise ConfigError("Bearer auth requires a credential 'source'")
        return SourceTokenInjector(auth_config.source)
    raise ConfigError(f"Unknown auth type '{auth_config.type}'. Use none or bearer")
