"""Codecs for RouterOS scalar and string-list wire values.

The RouterOS REST API encodes every property value as a JSON string, even
when the value is semantically a number, a boolean or an address. Each
:class:`WireCodec` translates between that string (already unquoted by the
JSON layer) and an in-memory Python value:

=============  ============================  ==================================
Codec          Wire form                     Python value
=============  ============================  ==================================
``NUMBER``     ``123`` or ``0x7b``           :class:`int` (signed 64-bit)
``BOOLEAN``    ``true`` / ``false``          :class:`bool`
``STRING``     anything                      :class:`str`
``IP_ADDRESS`` ``1.2.3.4`` / ``2001:db8::1`` :class:`ipaddress.IPv4Address` /
                                             :class:`ipaddress.IPv6Address`
``IP_NETWORK`` ``1.2.3.4/24``                :class:`ipaddress.IPv4Interface` /
                                             :class:`ipaddress.IPv6Interface`
``STRING_LIST`` ``ether1,ether2``            ``list[str]``
=============  ============================  ==================================

Codec instances double as pydantic annotations: placing one in
``typing.Annotated`` metadata makes a model field decode wire strings on
validation and encode back to wire strings on serialisation. The
``Annotated`` aliases at the bottom of this module (:data:`Number`,
:data:`Boolean`, ...) are what generated record models use.

Codecs are stateless; a single instance may be shared between threads.
"""

from __future__ import annotations

import ipaddress
import re
from typing import Annotated, Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ros7api.exceptions import DecodeError, EncodeError


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_HEX_RE = re.compile(r"[+-]?[0-9a-fA-F]+")
_PREFIX_RE = re.compile(r"[0-9]+")

IPAddressValue = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
IPNetworkValue = Union[ipaddress.IPv4Interface, ipaddress.IPv6Interface]


def parse_int64(text: str, base: int = 10) -> int:
    """Parse *text* as a signed 64-bit integer in the given base.

    Only an optional sign followed by digits is accepted: no whitespace, no
    underscores, no base prefix.

    Raises:
        DecodeError: If *text* is not a valid literal or overflows 64 bits.
    """
    pattern = _HEX_RE if base == 16 else _DECIMAL_RE
    if not pattern.fullmatch(text):
        raise DecodeError(f"invalid number {text!r}")
    value = int(text, base)
    if not INT64_MIN <= value <= INT64_MAX:
        raise DecodeError(f"invalid number {text!r}: out of 64-bit range")
    return value


class WireCodec:
    """Base class for a wire codec.

    Subclasses implement :meth:`decode` and :meth:`encode`, and override
    :meth:`coerce` to accept values that are already in their in-memory
    form (so that application code can build an update from native Python
    values instead of wire strings).
    """

    name = "value"

    def decode(self, text: str) -> Any:
        """Translate a wire string into an in-memory value.

        Raises:
            DecodeError: If *text* is malformed.
        """
        raise NotImplementedError

    def encode(self, value: Any) -> str:
        """Translate an in-memory value into its wire string.

        Raises:
            EncodeError: If *value* cannot be represented on the wire.
        """
        raise NotImplementedError

    def coerce(self, value: Any) -> Any:
        """Accept an already-decoded value, or raise :class:`DecodeError`."""
        raise DecodeError(
            f"invalid {self.name}: expected a string, got {type(value).__name__}"
        )

    def validate(self, value: Any) -> Any:
        """Decode wire strings and pass native values through :meth:`coerce`."""
        if isinstance(value, str):
            return self.decode(value)
        return self.coerce(value)

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                self.encode, return_schema=core_schema.str_schema()
            ),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NumberCodec(WireCodec):
    """Signed 64-bit integer; ``0x`` selects base 16 on decode, encode is decimal."""

    name = "number"

    def decode(self, text: str) -> int:
        if text.startswith("0x"):
            return parse_int64(text[2:], 16)
        return parse_int64(text)

    def encode(self, value: int) -> str:
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodeError(f"invalid number {value!r}: not an integer")
        if not INT64_MIN <= value <= INT64_MAX:
            raise EncodeError(f"invalid number {value!r}: out of 64-bit range")
        return str(value)

    def coerce(self, value: Any) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            if not INT64_MIN <= value <= INT64_MAX:
                raise DecodeError(f"invalid number {value!r}: out of 64-bit range")
            return value
        return super().coerce(value)


class BooleanCodec(WireCodec):
    """Exactly ``true`` or ``false``; nothing else decodes."""

    name = "boolean"

    def decode(self, text: str) -> bool:
        if text == "true":
            return True
        if text == "false":
            return False
        raise DecodeError(f"invalid boolean {text!r}")

    def encode(self, value: bool) -> str:
        return "true" if value else "false"

    def coerce(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        return super().coerce(value)


class StringCodec(WireCodec):
    """Plain string; the wire form is the value itself."""

    name = "string"

    def decode(self, text: str) -> str:
        return text

    def encode(self, value: str) -> str:
        return value


class IPAddressCodec(WireCodec):
    """A single IPv4 or IPv6 address in dotted-decimal or colon-hex notation."""

    name = "IP address"

    def decode(self, text: str) -> IPAddressValue:
        try:
            return ipaddress.ip_address(text)
        except ValueError as exc:
            raise DecodeError(f"invalid IP {text!r}") from exc

    def encode(self, value: IPAddressValue) -> str:
        return str(value)

    def coerce(self, value: Any) -> IPAddressValue:
        if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            return value
        return super().coerce(value)


class IPNetworkCodec(WireCodec):
    """An ``address/prefixlen`` pair that keeps the host address.

    ``1.2.3.4/24`` decodes to ``IPv4Interface('1.2.3.4/24')`` and encodes
    back to ``1.2.3.4/24``, not to the network base ``1.2.3.0/24``.
    """

    name = "CIDR"

    def decode(self, text: str) -> IPNetworkValue:
        _, sep, prefix = text.partition("/")
        if not sep or not _PREFIX_RE.fullmatch(prefix):
            raise DecodeError(f"invalid CIDR {text!r}")
        try:
            return ipaddress.ip_interface(text)
        except ValueError as exc:
            raise DecodeError(f"invalid CIDR {text!r}: {exc}") from exc

    def encode(self, value: IPNetworkValue) -> str:
        return f"{value.ip}/{value.network.prefixlen}"

    def coerce(self, value: Any) -> IPNetworkValue:
        if isinstance(value, (ipaddress.IPv4Interface, ipaddress.IPv6Interface)):
            return value
        return super().coerce(value)


class StringListCodec(WireCodec):
    """Comma-joined strings with no escaping.

    Decoding never fails: an empty wire string is a single empty element.
    Encoding refuses elements containing ``,`` or ``"``.
    """

    name = "string list"

    def decode(self, text: str) -> list[str]:
        return text.split(",")

    def encode(self, value: list[str]) -> str:
        for i, element in enumerate(value):
            if "," in element or '"' in element:
                raise EncodeError(
                    f"element {i} of string list ({element!r}) contains invalid character"
                )
        return ",".join(value)

    def coerce(self, value: Any) -> list[str]:
        if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            return list(value)
        return super().coerce(value)


NUMBER = NumberCodec()
BOOLEAN = BooleanCodec()
STRING = StringCodec()
IP_ADDRESS = IPAddressCodec()
IP_NETWORK = IPNetworkCodec()
STRING_LIST = StringListCodec()

Number = Annotated[int, NUMBER]
Boolean = Annotated[bool, BOOLEAN]
IPAddress = Annotated[IPAddressValue, IP_ADDRESS]
IPNetwork = Annotated[IPNetworkValue, IP_NETWORK]
StringList = Annotated[list[str], STRING_LIST]
