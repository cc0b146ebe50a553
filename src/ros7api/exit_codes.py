"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~ros7api.exceptions.Ros7apiError` subclass.
Scripts wrapping ``ros7api generate`` can inspect the exit code to tell a
broken schema apart from a broken environment without parsing stderr.

Example::

    $ ros7api generate --schema broken.yaml
    $ echo $?
    7   # EXIT_SCHEMA_ERROR -- the schema could not be loaded
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_SERVER_ERROR = 5
"""The device answered with a nonzero ``error`` field."""

EXIT_TRANSPORT_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, TLS, connection refused)."""

EXIT_SCHEMA_ERROR = 7
"""The schema description could not be loaded or uses an unsupported construct."""

EXIT_DECODE_ERROR = 8
"""A wire value or response body could not be decoded."""

EXIT_ENCODE_ERROR = 9
"""A value could not be represented in the wire format."""
