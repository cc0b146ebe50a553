"""Wire codecs for RouterOS REST values.

Every property value travels as a JSON string. This sub-package turns those
strings into Python values and back:

* :mod:`~ros7api.codec.scalars` -- numbers, booleans, strings, IP addresses,
  CIDR host addresses and string lists, plus the :class:`WireCodec` base.
* :mod:`~ros7api.codec.number_list` -- :class:`NumberList`, a mutable set of
  inclusive integer ranges (e.g. VLAN IDs ``10,20-29``).
* :mod:`~ros7api.codec.enums` -- :class:`WireEnum`, the base of generated
  enumerations, which keeps values it does not list.

The ``Annotated`` aliases exported here are the field types of generated
record models::

    from ros7api.codec import Boolean, NumberList, StringList

    class Vlan(Record):
        disabled: Optional[Boolean] = Field(default=None, alias="disabled")
"""

from ros7api.codec.enums import WireEnum
from ros7api.codec.number_list import NUMBER_LIST, NumberList, NumberListCodec
from ros7api.codec.scalars import (
    BOOLEAN,
    IP_ADDRESS,
    IP_NETWORK,
    NUMBER,
    STRING,
    STRING_LIST,
    Boolean,
    BooleanCodec,
    IPAddress,
    IPAddressCodec,
    IPNetwork,
    IPNetworkCodec,
    Number,
    NumberCodec,
    StringCodec,
    StringList,
    StringListCodec,
    WireCodec,
)

__all__ = [
    "BOOLEAN",
    "IP_ADDRESS",
    "IP_NETWORK",
    "NUMBER",
    "NUMBER_LIST",
    "STRING",
    "STRING_LIST",
    "Boolean",
    "BooleanCodec",
    "IPAddress",
    "IPAddressCodec",
    "IPNetwork",
    "IPNetworkCodec",
    "Number",
    "NumberCodec",
    "NumberList",
    "NumberListCodec",
    "StringCodec",
    "StringList",
    "StringListCodec",
    "WireCodec",
    "WireEnum",
]
