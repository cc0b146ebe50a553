"""Exception hierarchy for ros7api.

All exceptions inherit from :class:`Ros7apiError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`ros7api.exit_codes`.
The top-level error handler in :func:`ros7api.app.main` catches
``Ros7apiError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    Ros7apiError (exit 1)
    +-- ServerError      (exit 5)
    +-- TransportError   (exit 6)
    +-- SchemaError      (exit 7)
    +-- DecodeError      (exit 8)
    +-- EncodeError      (exit 9)
    +-- ConfigError      (exit 1)

None of these derive from :class:`ValueError`. Pydantic only converts
``ValueError`` and ``AssertionError`` raised inside validators into a
``ValidationError``; a :class:`DecodeError` raised by a wire codec therefore
reaches the caller as-is.
"""

from __future__ import annotations

from ros7api.exit_codes import (
    EXIT_DECODE_ERROR,
    EXIT_ENCODE_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_SCHEMA_ERROR,
    EXIT_SERVER_ERROR,
    EXIT_TRANSPORT_ERROR,
)


class Ros7apiError(Exception):
    """Base exception for all ros7api errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class DecodeError(Ros7apiError):
    """Raised when a wire value or a response body is malformed.

    Covers bad integer or boolean literals, unparseable IP addresses and
    CIDRs, invalid number-range syntax, inverted range bounds, and response
    bodies that do not have the expected JSON shape.
    """

    exit_code = EXIT_DECODE_ERROR


class EncodeError(Ros7apiError):
    """Raised when a value cannot be written in the wire format.

    The wire format has no escaping, so e.g. a string-list element containing
    ``,`` or ``"`` is rejected instead of being mangled.
    """

    exit_code = EXIT_ENCODE_ERROR


class TransportError(Ros7apiError):
    """Raised on HTTP-level failures (timeout, DNS, TLS, connection refused).

    Also raised for HTTP error statuses whose body is not a JSON object.
    Never retried.
    """

    exit_code = EXIT_TRANSPORT_ERROR


class ServerError(Ros7apiError):
    """Raised when a response object carries a nonzero ``error`` field.

    Any resource data returned alongside the error is discarded.

    Args:
        code: The numeric ``error`` field of the response.
        message: The ``message`` field of the response.
        detail: The ``detail`` field of the response.
    """

    exit_code = EXIT_SERVER_ERROR

    def __init__(self, code: int, message: str, detail: str = ""):
        text = f"server error {code}: {message}"
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text)
        self.code = code
        self.message = message
        self.detail = detail


class SchemaError(Ros7apiError):
    """Raised when the schema description is malformed or unsupported.

    Fatal to generation: an unknown property type tag means the schema uses
    an extension this generator does not understand.
    """

    exit_code = EXIT_SCHEMA_ERROR


class ConfigError(Ros7apiError):
    """Raised for configuration problems (missing profiles, invalid JSON, bad credential sources)."""

    exit_code = EXIT_GENERIC_FAILURE
