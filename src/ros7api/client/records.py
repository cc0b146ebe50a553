"""Base models for generated RouterOS resource and update types.

Every generated resource model derives from :class:`Record`, which adds the
``.id`` record identifier. Every generated update model derives from
:class:`RecordUpdate`, whose fields are all optional: a field left at
``None`` is omitted from the request body, which the device reads as "leave
unchanged" (not "clear").
"""

from __future__ import annotations

import json
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError

from ros7api.exceptions import EncodeError


RecordID = NewType("RecordID", str)
"""Identifier of a RouterOS record, e.g. ``*13``."""


class Record(BaseModel):
    """Base class of generated resource models.

    Fields are populated from their wire names (``vlan-ids``) when decoding a
    response, or from their attribute names (``vlan_ids``) when constructed
    in code. Unknown wire keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: RecordID = Field(alias=".id")


class RecordUpdate(BaseModel):
    """Base class of generated partial-update models.

    Assignments are validated, so a field set after construction goes
    through the same codec as one passed to the constructor.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        validate_assignment=True,
    )

    def to_wire(self) -> dict[str, str]:
        """Return the present fields keyed by wire name, each wire-encoded.

        Raises:
            EncodeError: If a present value cannot be represented on the wire.
        """
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as exc:
            raise EncodeError(str(exc)) from exc

    def to_json(self) -> bytes:
        """Serialise the update as a compact JSON request body."""
        return json.dumps(self.to_wire(), separators=(",", ":")).encode("utf-8")
