"""HTTP transport for the RouterOS REST API.

This module provides :class:`Client`, a thin blocking wrapper around
:class:`httpx.Client` that talks to a device's ``www-ssl`` service under
``https://<address>/rest/``. It only knows how to GET a path and PATCH a path
with a body; everything about records lives in
:mod:`ros7api.client.operations` and the generated modules.

The :class:`Transport` protocol is the shape those callers depend on.

Every call takes a ``timeout`` deadline which is handed to httpx untouched.
There are no retries: a failed, cancelled or timed-out call raises
:class:`~ros7api.exceptions.TransportError` immediately.
"""

from __future__ import annotations

import ssl
from typing import Any, Optional, Protocol, Union

import httpx

from ros7api.config import resolve_credential, resolve_profile
from ros7api.exceptions import TransportError
from ros7api.models import DeviceProfile
from ros7api.output import debug


DEFAULT_TIMEOUT: Any = httpx.USE_CLIENT_DEFAULT
"""Sentinel deadline meaning "use the client's configured timeout"."""

Deadline = Any
"""Per-call deadline: seconds, an :class:`httpx.Timeout`, ``None`` for no limit, or :data:`DEFAULT_TIMEOUT`."""


class Transport(Protocol):
    """The two blocking operations the record layer needs from a transport."""

    def get(self, path: str, *, timeout: Deadline = DEFAULT_TIMEOUT) -> bytes:
        ...

    def patch(
        self, path: str, body: bytes, *, timeout: Deadline = DEFAULT_TIMEOUT
    ) -> bytes:
        ...


class Client:
    """Blocking RouterOS REST API client.

    Wraps :class:`httpx.Client` with HTTP basic auth on every request and the
    configured TLS trust. Must be used as a context manager so that the
    underlying connection pool is opened and closed. A single client may be
    shared by several threads; requests are independent and unordered.

    Args:
        address: Host, ``host:port`` or ``[IPv6]:port`` of the www-ssl service.
        username: Username used to authenticate.
        password: Password used to authenticate.
        verify: ``True``/``False`` to toggle certificate verification, or a
            path to a PEM bundle to trust.
        timeout: Default per-request timeout in seconds.
        transport: Optional httpx transport, e.g. :class:`httpx.MockTransport`
            in tests.

    Example::

        with Client("10.0.0.1", "admin", password) as client:
            vlans = interface_bridge_vlan_list(client)
    """

    def __init__(
        self,
        address: str,
        username: str = "admin",
        password: str = "",
        *,
        verify: Union[bool, str] = True,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._address = address
        self._username = username
        self._password = password
        self._verify = verify
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @classmethod
    def from_profile(
        cls,
        profile: Union[DeviceProfile, str, None] = None,
        password: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> Client:
        """Build a client from a :class:`~ros7api.models.DeviceProfile`.

        *profile* may be a profile, the name of a saved profile, or ``None``
        for the active one (see :func:`~ros7api.config.resolve_profile`).
        When *password* is not given it is resolved from the profile's
        ``password_source``.

        Raises:
            ConfigError: If no profile can be resolved or its credential is
                unavailable.
        """
        if not isinstance(profile, DeviceProfile):
            profile = resolve_profile(profile)
        if password is None:
            password = resolve_credential(profile.password_source)
        request = profile.request
        verify: Union[bool, str] = request.ca_bundle or request.verify_ssl
        return cls(
            profile.address,
            profile.username,
            password,
            verify=verify,
            timeout=request.timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        """Root URL of the REST API on the device."""
        return f"https://{self._address}/rest/"

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> Client:
        verify: Union[bool, ssl.SSLContext]
        if isinstance(self._verify, str):
            verify = ssl.create_default_context(cafile=self._verify)
        else:
            verify = self._verify
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=httpx.BasicAuth(self._username, self._password),
            timeout=self._timeout,
            verify=verify,
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def get(self, path: str, *, timeout: Deadline = DEFAULT_TIMEOUT) -> bytes:
        """GET *path* (relative to :attr:`base_url`) and return the body.

        Raises:
            TransportError: On network failure, timeout, or an HTTP error
                status whose body is not a JSON object.
        """
        return self._request("GET", path, None, timeout)

    def patch(
        self, path: str, body: bytes, *, timeout: Deadline = DEFAULT_TIMEOUT
    ) -> bytes:
        """PATCH *path* with a JSON *body* and return the response body.

        Raises:
            TransportError: On network failure, timeout, or an HTTP error
                status whose body is not a JSON object.
        """
        return self._request("PATCH", path, body, timeout)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _request(
        self, method: str, path: str, body: Optional[bytes], timeout: Deadline
    ) -> bytes:
        assert self._client is not None, "Client not initialised -- use as context manager"

        headers = {"Accept": "application/json"}
        if body is not None:
            headers["Content-Type"] = "application/json"

        debug(f"{method} {self.base_url}{path}")
        try:
            response = self._client.request(
                method, path, content=body, headers=headers, timeout=timeout
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        # RouterOS reports request errors as a JSON object with error/message/
        # detail fields; those are handed back so the caller can raise them.
        if response.status_code >= 400 and not _is_json_object(response):
            text = response.text[:200] if response.text else ""
            msg = f"HTTP {response.status_code} on {method} {path}"
            raise TransportError(f"{msg}: {text}" if text else msg)
        return response.content


def _is_json_object(response: httpx.Response) -> bool:
    try:
        return isinstance(response.json(), dict)
    except ValueError:
        return False
