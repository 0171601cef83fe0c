"""Exceptions raised by omdbquery.

Every terminal ``get()`` call either returns a value or raises exactly one
subclass of :class:`OMDbError`:

- :class:`TransportError` when the request never produced a usable HTTP
  exchange (connection refused, timeout, TLS or DNS failure).
- :class:`StatusError` when OMDb answered with a non-2xx status and no
  OMDb error body.
- :class:`DecodeError` when the response body is not the JSON shape we expect.
- :class:`RemoteError` when OMDb answered but reported ``Response: "False"``
  (e.g. "Movie not found!" or "Invalid API key!").

The original exception, where there is one, is chained as ``__cause__``.
"""


class OMDbError(Exception):
    """Base class for all errors raised while querying OMDb."""

    pass


class TransportError(OMDbError):
    """Raised when the HTTP exchange with OMDb fails below the application layer."""

    pass


class StatusError(TransportError):
    """Raised when OMDb responds with an unexpected HTTP status code."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        """Initialize the error with the HTTP status and its reason phrase."""
        super().__init__(f"Unexpected HTTP status {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.reason = reason


class DecodeError(OMDbError):
    """Raised when the OMDb response body cannot be decoded into a result."""

    pass


class RemoteError(OMDbError):
    """Raised when OMDb reports a domain-level failure.

    ``message`` is the service's own ``Error`` text, unmodified, so callers can
    match on known strings such as ``"Movie not found!"``.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize the error with OMDb's message and the HTTP status."""
        super().__init__(message)
        self.message = message
        self.status_code = status_code
