"""Enumerated string properties.

RouterOS enumerations travel as plain strings. Generated modules declare one
:class:`WireEnum` subclass per enumeration property, with a member for every
value the schema lists. Devices running a newer release may report values the
schema does not know about; those decode to a pseudo-member carrying the raw
string instead of failing the whole record::

    >>> class FrameTypes(WireEnum):
    ...     ADMIT_ALL = "admit-all"
    >>> FrameTypes("admit-all") is FrameTypes.ADMIT_ALL
    True
    >>> FrameTypes("admit-something-new").value
    'admit-something-new'
"""

from __future__ import annotations

import enum
from typing import Any, Optional


class WireEnum(str, enum.Enum):
    """Base class of generated enumerations that keeps unknown values."""

    @classmethod
    def _missing_(cls, value: Any) -> Optional[WireEnum]:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = value
        member._value_ = value
        return member

    @property
    def is_known(self) -> bool:
        """Whether this value is one of the declared members."""
        return type(self).__members__.get(self._name_) is self
