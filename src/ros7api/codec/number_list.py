"""RouterOS lists of numbers that may contain inclusive ranges.

A number list appears on the wire as comma-joined items, each either a bare
integer or a ``lower-upper`` range, e.g. ``100,105-110,200``.

A freshly parsed :class:`NumberList` keeps its ranges exactly as they were
received, so encoding an unmodified value reproduces the original text byte
for byte. Every mutation (:meth:`~NumberList.add`,
:meth:`~NumberList.add_range`, :meth:`~NumberList.remove`) renormalises the
list: ranges are sorted by lower bound and overlapping or adjacent ranges are
merged.

Example::

    >>> vlans = NumberList.parse("123,280-290,200-300,1004,1005")
    >>> str(vlans)
    '123,280-290,200-300,1004,1005'
    >>> vlans.add(124)
    >>> str(vlans)
    '123-124,200-300,1004-1005'
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ros7api.codec.scalars import INT64_MAX, INT64_MIN, WireCodec, parse_int64
from ros7api.exceptions import DecodeError


class NumberList:
    """A set of inclusive integer ranges with a RouterOS wire form.

    Instances are mutable and not thread-safe. Whoever holds a reference owns
    it; callers that share one between threads must serialise mutations
    themselves.

    Args:
        ranges: Optional ``(lower, upper)`` pairs, stored in the given order.

    Raises:
        ValueError: If any pair has ``upper < lower`` or a bound outside the
            signed 64-bit range.
    """

    __slots__ = ("_ranges",)

    def __init__(self, ranges: Iterable[tuple[int, int]] = ()) -> None:
        self._ranges: list[tuple[int, int]] = []
        for lower, upper in ranges:
            self._ranges.append(_checked_range(lower, upper))

    @classmethod
    def parse(cls, text: str) -> NumberList:
        """Parse a RouterOS number list such as ``100,105-110,200``.

        Raises:
            DecodeError: If an item is not a number, a range has more than one
                ``-``, or a range's upper bound does not exceed its lower bound.
        """
        result = cls()
        for item in text.split(","):
            if "-" in item:
                bounds = item.split("-")
                if len(bounds) != 2:
                    raise DecodeError(f"invalid range {item!r}")
                lower = _parse_bound(bounds[0], item)
                upper = _parse_bound(bounds[1], item)
                if upper <= lower:
                    raise DecodeError(f"invalid range {item!r}")
            else:
                lower = upper = parse_int64(item)
            result._ranges.append((lower, upper))
        return result

    @property
    def ranges(self) -> tuple[tuple[int, int], ...]:
        """The stored ``(lower, upper)`` pairs, in stored order."""
        return tuple(self._ranges)

    def optimize(self) -> None:
        """Sort ranges by lower bound and merge overlapping or adjacent ones."""
        if not self._ranges:
            return

        ordered = sorted(self._ranges, key=lambda r: r[0])
        merged: list[tuple[int, int]] = []
        lower, upper = ordered[0]
        for next_lower, next_upper in ordered[1:]:
            if next_lower <= upper + 1:
                upper = max(upper, next_upper)
            else:
                merged.append((lower, upper))
                lower, upper = next_lower, next_upper
        merged.append((lower, upper))
        self._ranges = merged

    def add(self, value: int) -> None:
        """Add a single number.

        Raises:
            ValueError: If *value* is outside the signed 64-bit range.
        """
        self._ranges.append(_checked_range(value, value))
        self.optimize()

    def add_range(self, lower: int, upper: int) -> None:
        """Add the inclusive range ``lower..upper``.

        Raises:
            ValueError: If ``upper < lower`` or a bound is outside the signed
                64-bit range. The list is left unchanged.
        """
        self._ranges.append(_checked_range(lower, upper))
        self.optimize()

    def remove(self, value: int) -> None:
        """Remove a single number if present, splitting any range around it."""
        result: list[tuple[int, int]] = []
        for lower, upper in self._ranges:
            if lower <= value <= upper:
                if lower <= value - 1:
                    result.append((lower, value - 1))
                if value + 1 <= upper:
                    result.append((value + 1, upper))
            else:
                result.append((lower, upper))
        self._ranges = result
        self.optimize()

    def contains(self, value: int) -> bool:
        """Return whether any stored range includes *value*."""
        return any(lower <= value <= upper for lower, upper in self._ranges)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(list(self._ranges))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberList):
            return NotImplemented
        return self._ranges == other._ranges

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return ",".join(
            str(lower) if lower == upper else f"{lower}-{upper}"
            for lower, upper in self._ranges
        )

    def __repr__(self) -> str:
        return f"NumberList({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return NUMBER_LIST.__get_pydantic_core_schema__(source_type, handler)


def _checked_range(lower: int, upper: int) -> tuple[int, int]:
    if upper < lower:
        raise ValueError(f"invalid range {lower}-{upper}")
    if lower < INT64_MIN or upper > INT64_MAX:
        raise ValueError(f"range {lower}-{upper} is outside the 64-bit range")
    return lower, upper


def _parse_bound(text: str, item: str) -> int:
    try:
        return parse_int64(text)
    except DecodeError as exc:
        raise DecodeError(f"invalid range {item!r}: {exc}") from exc


class NumberListCodec(WireCodec):
    """Codec for :class:`NumberList` values."""

    name = "number list"

    def decode(self, text: str) -> NumberList:
        return NumberList.parse(text)

    def encode(self, value: NumberList) -> str:
        return str(value)

    def coerce(self, value: Any) -> NumberList:
        if isinstance(value, NumberList):
            return value
        return super().coerce(value)


NUMBER_LIST = NumberListCodec()
