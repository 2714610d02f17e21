"""Numeric process exit codes for the ``edgeclient`` command line.

Each constant maps to one error category and is referenced by the
corresponding :class:`~edgeclient.exceptions.EdgeClientError` subclass.
Shell scripts can inspect the exit code to tell a missing device apart
from an unreachable service without parsing stderr.

Example::

    $ edgeclient device-profile get Missing-Profile
    $ echo $?
    4   # EXIT_NOT_FOUND -- the service answered 404
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The request was rejected as invalid (HTTP 400) or the arguments were wrong."""

EXIT_AUTH_FAILURE = 3
"""Authentication or authorisation failed."""

EXIT_NOT_FOUND = 4
"""The requested entity does not exist (HTTP 404)."""

EXIT_SERVER_ERROR = 5
"""The service returned an HTTP 5xx error."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""

EXIT_CONFLICT = 7
"""The request conflicts with the current state (HTTP 409, 423)."""
