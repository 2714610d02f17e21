"""Common plumbing for the resource clients.

Every public client method is one call into :class:`ResourceClient`:

- :meth:`ResourceClient._call` issues the request and re-raises any
  :class:`~edgeclient.exceptions.EdgeClientError` wrapped with the
  operation context, keeping its class, kind and status.
- :meth:`ResourceClient._query` is the shared builder behind the many
  "by X with offset/limit" queries: route + escaped segments for the path,
  :func:`~edgeclient.routes.pagination_params` for the query string.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, TypeVar

from edgeclient.auth import AuthenticationInjector, create_injector
from edgeclient.exceptions import EdgeClientError
from edgeclient.models import ClientConfig
from edgeclient.routes import join_path, pagination_params
from edgeclient.transport import Transport

T = TypeVar("T")
C = TypeVar("C", bound="ResourceClient")


class ResourceClient:
    """Base class holding the base URL, auth injector and transport.

    Args:
        base_url: Root URL of the service owning the resource.
        auth_injector: Optional source of auth headers for every request.
        transport: Shared :class:`~edgeclient.transport.Transport`. When
            omitted the client creates its own and closes it in
            :meth:`close`.
        timeout: Default timeout for a transport the client creates.
        verify_ssl: TLS verification for a transport the client creates.
    """

    def __init__(
        self,
        base_url: str,
        auth_injector: Optional[AuthenticationInjector] = None,
        transport: Optional[Transport] = None,
        timeout: float = 30.0,
        verify_ssl: bool = True,
    ) -> None:
        self.base_url = base_url
        self._auth_injector = auth_injector
        self._owns_transport = transport is None
        self._transport = transport or Transport(timeout=timeout, verify_ssl=verify_ssl)

    @classmethod
    def from_config(
        cls: type[C],
        config: ClientConfig,
        transport: Optional[Transport] = None,
    ) -> C:
        """Build a client from a resolved :class:`~edgeclient.models.ClientConfig`."""
        return cls(
            config.base_url,
            auth_injector=create_injector(config.auth),
            transport=transport,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
        )

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    def __enter__(self: C) -> C:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Request helpers
    # ------------------------------------------------------------------ #

    def _call(
        self,
        method: str,
        path: str,
        result_type: type[T] | Any,
        context: str,
        **kwargs: Any,
    ) -> T:
        try:
            return self._transport.request(
                method,
                self.base_url,
                path,
                result_type,
                injector=self._auth_injector,
                **kwargs,
            )
        except EdgeClientError as exc:
            raise exc.wrap(context) from exc

    def _upload(
        self,
        method: str,
        path: str,
        file_path: Any,
        result_type: type[T] | Any,
        context: str,
        timeout: Optional[float] = None,
    ) -> T:
        upload = self._transport.post_file if method == "POST" else self._transport.put_file
        try:
            return upload(
                self.base_url,
                path,
                file_path,
                result_type,
                injector=self._auth_injector,
                timeout=timeout,
            )
        except EdgeClientError as exc:
            raise exc.wrap(context) from exc

    def _query(
        self,
        result_type: type[T] | Any,
        context: str,
        route: str,
        *segments: Any,
        offset: int,
        limit: int,
        labels: Optional[Iterable[str]] = None,
        timeout: Optional[float] = None,
        **filters: Any,
    ) -> T:
        """GET ``route/segments...`` with pagination and optional filters."""
        return self._call(
            "GET",
            join_path(route, *segments),
            result_type,
            context,
            params=pagination_params(offset, limit, labels, **filters),
            timeout=timeout,
        )
