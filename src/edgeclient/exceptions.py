"""Exception hierarchy for edgeclient.

Every failure surfaced by a resource client is an :class:`EdgeClientError`.
The error carries an :class:`ErrorKind` classification (attached by the
transport from the HTTP status, or ``CommunicationError`` for network
failures) and the HTTP ``status_code`` when one was received. Callers that
need differentiated handling can either ``except`` a subclass or branch on
``exc.kind``.

Subclass hierarchy::

    EdgeClientError        (exit 1)
    +-- ContractInvalidError   (exit 2)
    +-- AuthError              (exit 3)
    +-- NotFoundError          (exit 4)
    +-- ServerError            (exit 5)
    +-- CommunicationError     (exit 6)
    +-- ConflictError          (exit 7)
    +-- ConfigError            (exit 1)

Resource clients re-raise transport errors through :meth:`EdgeClientError.wrap`,
which keeps the class, kind and status and prefixes the operation context.
"""

from __future__ import annotations

import enum
from typing import Optional

from edgeclient.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONFLICT,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_SERVER_ERROR,
)


class ErrorKind(str, enum.Enum):
    """Error classification shared with the platform's services."""

    UNKNOWN = "Unknown"
    DATABASE_ERROR = "Database"
    COMMUNICATION_ERROR = "CommunicationError"
    ENTITY_DOES_NOT_EXIST = "NotFound"
    CONTRACT_INVALID = "ContractInvalid"
    SERVER_ERROR = "UnexpectedServerError"
    LIMIT_EXCEEDED = "LimitExceeded"
    STATUS_CONFLICT = "StatusConflict"
    DUPLICATE_NAME = "DuplicateName"
    INVALID_ID = "InvalidId"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    NOT_ALLOWED = "NotAllowed"
    SERVICE_LOCKED = "ServiceLocked"
    NOT_IMPLEMENTED = "NotImplemented"
    RANGE_NOT_SATISFIABLE = "RangeNotSatisfiable"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    IO_ERROR = "IOError"


class EdgeClientError(Exception):
    """Base exception for all edgeclient errors.

    Args:
        message: Human-readable error description.
        kind: Classification of the failure. Defaults to the class-level
            :attr:`default_kind`.
        status_code: HTTP status returned by the service, if any.
        exit_code: Optional override for the class-level exit code.
    """

    default_kind: ErrorKind = ErrorKind.UNKNOWN
    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(
        self,
        message: str,
        kind: Optional[ErrorKind] = None,
        status_code: Optional[int] = None,
        exit_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind if kind is not None else self.default_kind
        self.status_code = status_code
        if exit_code is not None:
            self.exit_code = exit_code

    def wrap(self, context: str) -> EdgeClientError:
        """Return a copy of this error with *context* prepended to the message.

        The class, :attr:`kind`, :attr:`status_code` and exit code are kept so
        that callers branching on the classification see the same thing the
        transport raised. Chain the original with ``raise ... from exc``.
        """
        return type(self)(
            f"{context}: {self.message}",
            kind=self.kind,
            status_code=self.status_code,
            exit_code=self.exit_code,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, kind={self.kind.value!r}, "
            f"status_code={self.status_code!r})"
        )


class ContractInvalidError(EdgeClientError):
    """Raised when the service rejects a request as malformed (HTTP 400, 413, 416)."""

    default_kind = ErrorKind.CONTRACT_INVALID
    exit_code = EXIT_INVALID_USAGE


class AuthError(EdgeClientError):
    """Raised when authentication or authorisation fails (HTTP 401, 403)."""

    default_kind = ErrorKind.UNAUTHORIZED
    exit_code = EXIT_AUTH_FAILURE


class NotFoundError(EdgeClientError):
    """Raised when the requested entity does not exist (HTTP 404)."""

    default_kind = ErrorKind.ENTITY_DOES_NOT_EXIST
    exit_code = EXIT_NOT_FOUND


class ConflictError(EdgeClientError):
    """Raised when the request conflicts with the entity's state (HTTP 409, 423)."""

    default_kind = ErrorKind.STATUS_CONFLICT
    exit_code = EXIT_CONFLICT


class ServerError(EdgeClientError):
    """Raised when the service returns an HTTP 5xx error."""

    default_kind = ErrorKind.SERVER_ERROR
    exit_code = EXIT_SERVER_ERROR


class CommunicationError(EdgeClientError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused)."""

    default_kind = ErrorKind.COMMUNICATION_ERROR
    exit_code = EXIT_CONNECTION_ERROR


class ConfigError(EdgeClientError):
    """Raised for configuration problems (bad config file, unresolvable credential source)."""

    default_kind = ErrorKind.UNKNOWN
    exit_code = EXIT_GENERIC_FAILURE


_STATUS_MAP: dict[int, tuple[type[EdgeClientError], ErrorKind]] = {
    400: (ContractInvalidError, ErrorKind.CONTRACT_INVALID),
    401: (AuthError, ErrorKind.UNAUTHORIZED),
    403: (AuthError, ErrorKind.FORBIDDEN),
    404: (NotFoundError, ErrorKind.ENTITY_DOES_NOT_EXIST),
    405: (EdgeClientError, ErrorKind.NOT_ALLOWED),
    409: (ConflictError, ErrorKind.STATUS_CONFLICT),
    413: (ContractInvalidError, ErrorKind.LIMIT_EXCEEDED),
    416: (ContractInvalidError, ErrorKind.RANGE_NOT_SATISFIABLE),
    423: (ConflictError, ErrorKind.SERVICE_LOCKED),
    500: (ServerError, ErrorKind.SERVER_ERROR),
    501: (ServerError, ErrorKind.NOT_IMPLEMENTED),
    503: (ServerError, ErrorKind.SERVICE_UNAVAILABLE),
}


def error_from_status(status_code: int, message: str) -> EdgeClientError:
    """Build the classified error for an HTTP error *status_code*.

    Unlisted 5xx codes map to :class:`ServerError`; any other unlisted code
    maps to a plain :class:`EdgeClientError` of kind ``Unknown``.
    """
    if status_code in _STATUS_MAP:
        cls, kind = _STATUS_MAP[status_code]
    elif status_code >= 500:
        cls, kind = ServerError, ErrorKind.SERVER_ERROR
    else:
        cls, kind = EdgeClientError, ErrorKind.UNKNOWN
    return cls(message, kind=kind, status_code=status_code)
