"""List and Patch operations shared by every generated record module.

Generated modules bind these two functions to a menu path and a pair of
models; the functions themselves only move bytes through a
:class:`~ros7api.client.transport.Transport` and use the models (and through
them the wire codecs) to decode and encode values.

Response shapes:

* **List** -- a JSON array of record objects. A JSON object instead of an
  array is an error report from the device.
* **Patch** -- a JSON object holding the full record plus ``error``,
  ``message`` and ``detail``. A nonzero ``error`` means the update failed,
  and whatever record data came with it is discarded.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ros7api.client.records import Record, RecordID, RecordUpdate
from ros7api.client.transport import DEFAULT_TIMEOUT, Deadline, Transport
from ros7api.exceptions import DecodeError, ServerError


R = TypeVar("R", bound=Record)


class ResponseStatus(BaseModel):
    """The status fields RouterOS attaches to error and patch responses."""

    error: int = 0
    message: str = ""
    detail: str = ""


def list_records(
    client: Transport,
    path: str,
    model: type[R],
    *,
    timeout: Deadline = DEFAULT_TIMEOUT,
) -> list[R]:
    """Fetch every record under *path*, in the order the device returned them.

    Args:
        client: Transport used to issue the GET request.
        path: Menu path, e.g. ``interface/bridge/vlan``.
        model: Generated resource model to decode each element into.
        timeout: Deadline passed to the transport unmodified.

    Raises:
        TransportError: If the request fails.
        ServerError: If the device answered with an error object.
        DecodeError: If the body or any record value is malformed.
    """
    payload = _decode_json(client.get(path, timeout=timeout), path)
    if isinstance(payload, dict):
        raise_for_status(payload)
    if not isinstance(payload, list):
        raise DecodeError(
            f"{path}: expected a JSON array, got {type(payload).__name__}"
        )
    return [decode_record(model, item, path) for item in payload]


def patch_record(
    client: Transport,
    path: str,
    record_id: RecordID,
    update: RecordUpdate,
    model: type[R],
    *,
    timeout: Deadline = DEFAULT_TIMEOUT,
) -> R:
    """Apply *update* to the record *record_id* under *path*.

    Only the fields present in *update* are sent.

    Returns:
        The record as it stands after the update.

    Raises:
        EncodeError: If a field of *update* cannot be wire-encoded.
        TransportError: If the request fails.
        ServerError: If the response carries a nonzero ``error`` field.
        DecodeError: If the response is malformed.
    """
    target = f"{path}/{record_id}"
    payload = _decode_json(client.patch(target, update.to_json(), timeout=timeout), target)
    if not isinstance(payload, dict):
        raise DecodeError(
            f"{target}: expected a JSON object, got {type(payload).__name__}"
        )
    raise_for_status(payload)
    return decode_record(model, payload, path)


def raise_for_status(payload: dict[str, Any]) -> None:
    """Raise :class:`ServerError` if *payload* reports a nonzero ``error``.

    Raises:
        DecodeError: If the status fields themselves are malformed.
    """
    try:
        status = ResponseStatus.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"invalid status fields in response: {exc}") from exc
    if status.error != 0:
        raise ServerError(status.error, status.message, status.detail)


def decode_record(model: type[R], item: Any, path: str = "") -> R:
    """Validate one decoded JSON object into *model*.

    Codec failures and pydantic validation failures both surface as
    :class:`DecodeError`, prefixed with *path*.
    """
    prefix = f"{path}: " if path else ""
    try:
        return model.model_validate(item)
    except DecodeError as exc:
        raise DecodeError(f"{prefix}{exc}") from exc
    except ValidationError as exc:
        raise DecodeError(f"{prefix}invalid {model.__name__}: {exc}") from exc


def _decode_json(body: bytes, path: str) -> Any:
    try:
        return json.loads(body)
    except ValueError as exc:
        raise DecodeError(f"{path}: response is not valid JSON: {exc}") from exc
