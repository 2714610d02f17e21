"""Shared HTTP transport used by every resource client.

:class:`Transport` wraps a single :class:`httpx.Client` and layers on:

- **Auth injection** -- headers/params from the client's
  :class:`~edgeclient.auth.AuthenticationInjector` are merged into every
  request.
- **Error mapping** -- any non-2xx response (including a 3xx that was not
  followed) becomes the classified
  :class:`~edgeclient.exceptions.EdgeClientError` subclass for its status;
  network failures and redirect loops become
  :class:`~edgeclient.exceptions.CommunicationError`, an undecodable
  body becomes :class:`~edgeclient.exceptions.ContractInvalidError`.
- **Result validation** -- the JSON body is validated into the requested
  ``result_type`` (a Pydantic model or e.g. ``list[BaseWithIdResponse]``).

Each call is a single HTTP exchange with no retry.
One transport may be shared by many clients and threads; the underlying
:class:`httpx.Client` is thread-safe.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from edgeclient.auth import AuthenticationInjector
from edgeclient.exceptions import (
    CommunicationError,
    ContractInvalidError,
    EdgeClientError,
    ErrorKind,
    error_from_status,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class Transport:
    """Synchronous HTTP transport for the resource clients.

    Args:
        timeout: Default request timeout in seconds.
        verify_ssl: Verify TLS certificates.
        client: Pre-built :class:`httpx.Client` to use instead of creating
            one (tests pass a client with an :class:`httpx.MockTransport`).
            A supplied client is not closed by :meth:`close`.

    Example::

        with Transport(timeout=10) as transport:
            res = transport.get(
                "http://localhost:59860", "/api/v3/transmission/all",
                MultiTransmissionsResponse, params={"offset": "0", "limit": "20"},
            )
    """

    def __init__(
        self,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            verify=verify_ssl,
            follow_redirects=True,
        )

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def request(
        self,
        method: str,
        base_url: str,
        path: str,
        result_type: type[T] | Any,
        params: Optional[dict[str, Any]] = None,
        json_body: Optional[Any] = None,
        files: Optional[dict[str, Any]] = None,
        injector: Optional[AuthenticationInjector] = None,
        timeout: Optional[float] = None,
    ) -> T:
        """Send one request and return the validated response body.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE).
            base_url: Service root, e.g. ``http://localhost:59881``.
            path: Already-escaped request path starting with ``/``.
            result_type: Type the JSON body is validated into.
            params: Query parameters.
            json_body: JSON-serialisable body.
            files: Multipart files, as accepted by :mod:`httpx`.
            injector: Source of auth headers/params for this request.
            timeout: Per-call timeout in seconds overriding the default.

        Returns:
            The body validated as *result_type*.

        Raises:
            EdgeClientError: The classified subclass for a non-2xx status.
            CommunicationError: On network, timeout or redirect-loop errors.
            ContractInvalidError: When the body cannot be decoded, is not
                valid JSON, or does not match *result_type*.
        """
        headers: dict[str, str] = {"Accept": "application/json"}
        merged_params: dict[str, Any] = dict(params or {})
        if injector is not None:
            auth = injector.authenticate()
            headers = {**auth.headers, **headers}
            merged_params = {**auth.params, **merged_params}

        url = f"{base_url.rstrip('/')}{path}"
        kwargs: dict[str, Any] = {
            "method": method,
            "url": url,
            "headers": headers,
            "params": merged_params or None,
        }
        if files is not None:
            kwargs["files"] = files
        elif json_body is not None:
            kwargs["json"] = json_body
        if timeout is not None:
            kwargs["timeout"] = timeout

        logger.debug("%s %s params=%s", method, url, merged_params)
        try:
            response = self._client.request(**kwargs)
        except httpx.DecodingError as exc:
            raise ContractInvalidError(f"{method} {url}: undecodable response body: {exc}") from exc
        except httpx.RequestError as exc:
            raise CommunicationError(f"{method} {url} failed: {exc}") from exc
        logger.debug("%s %s -> %d", method, url, response.status_code)

        self._map_response_error(response)
        return self._decode(response, result_type)

    def get(self, base_url: str, path: str, result_type: type[T] | Any, **kwargs: Any) -> T:
        return self.request("GET", base_url, path, result_type, **kwargs)

    def post(self, base_url: str, path: str, result_type: type[T] | Any, **kwargs: Any) -> T:
        return self.request("POST", base_url, path, result_type, **kwargs)

    def put(self, base_url: str, path: str, result_type: type[T] | Any, **kwargs: Any) -> T:
        return self.request("PUT", base_url, path, result_type, **kwargs)

    def patch(self, base_url: str, path: str, result_type: type[T] | Any, **kwargs: Any) -> T:
        return self.request("PATCH", base_url, path, result_type, **kwargs)

    def delete(self, base_url: str, path: str, result_type: type[T] | Any, **kwargs: Any) -> T:
        return self.request("DELETE", base_url, path, result_type, **kwargs)

    def post_file(
        self,
        base_url: str,
        path: str,
        file_path: str | Path,
        result_type: type[T] | Any,
        **kwargs: Any,
    ) -> T:
        """Upload *file_path* as the multipart ``file`` field with POST."""
        return self.request(
            "POST", base_url, path, result_type, files=_file_part(file_path), **kwargs
        )

    def put_file(
        self,
        base_url: str,
        path: str,
        file_path: str | Path,
        result_type: type[T] | Any,
        **kwargs: Any,
    ) -> T:
        """Upload *file_path* as the multipart ``file`` field with PUT."""
        return self.request(
            "PUT", base_url, path, result_type, files=_file_part(file_path), **kwargs
        )

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _map_response_error(self, response: httpx.Response) -> None:
        """Raise a classified exception for any non-2xx status code."""
        status = response.status_code
        if 200 <= status < 300:
            return

        # Service errors carry {"message": ..., "statusCode": ...}.
        try:
            detail = response.json()
            if isinstance(detail, dict):
                msg = detail.get("message") or detail.get("error") or detail.get("detail") or ""
            else:
                msg = str(detail)
        except ValueError:
            msg = response.text[:200] if response.text else ""

        prefix = f"HTTP {status}"
        raise error_from_status(status, f"{prefix}: {msg}" if msg else prefix)

    def _decode(self, response: httpx.Response, result_type: Any) -> Any:
        if response.content:
            try:
                data = response.json()
            except ValueError as exc:
                raise ContractInvalidError(
                    f"Response body is not valid JSON: {exc}",
                    status_code=response.status_code,
                ) from exc
        else:
            data = {}
        try:
            return _adapter(result_type).validate_python(data)
        except ValidationError as exc:
            raise ContractInvalidError(
                f"Unexpected response body: {exc}",
                status_code=response.status_code,
            ) from exc


def _file_part(file_path: str | Path) -> dict[str, Any]:
    path = Path(file_path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise EdgeClientError(f"Cannot read {path}: {exc}", kind=ErrorKind.IO_ERROR) from exc
    return {"file": (path.name, content, "application/x-yaml")}
