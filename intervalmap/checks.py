"""Invariant checks for interval maps.

Used by test drivers after every mutation to assert that a map is still in
its canonical representation.
"""

from collections.abc import Sequence
from typing import Any

from intervalmap.core import IntervalMap
from intervalmap.domain import key_equal


class InvariantViolation(AssertionError):
    """Raised when an interval map's stored entries are malformed."""

    def __init__(self, problems: Sequence[str]):
        self.problems: tuple[str, ...] = tuple(problems)
        super().__init__(
            "Interval map invariants violated:\n"
            + "\n".join(f"  - {problem}" for problem in self.problems)
        )


def is_canonical(entries: Sequence[tuple[Any, Any]]) -> bool:
    """True if no two adjacent entries hold equal values."""
    return not any(
        left[1] == right[1] for left, right in zip(entries, entries[1:])
    )


def check_invariants(imap: IntervalMap[Any, Any]) -> None:
    """Verify the sentinel, key ordering and canonical form of `imap`.

    Raises:
        InvariantViolation: Listing every problem found
    """
    entries = imap.entries()
    problems: list[str] = []

    if not entries:
        raise InvariantViolation(["map has no entries"])

    first_key = entries[0][0]
    if not key_equal(first_key, imap.domain.lowest):
        problems.append(
            f"first key {first_key!r} is not the domain's lowest key "
            f"{imap.domain.lowest!r}"
        )

    for idx, ((k1, v1), (k2, v2)) in enumerate(zip(entries, entries[1:])):
        if not k1 < k2:
            problems.append(
                f"keys at {idx} and {idx + 1} are not increasing: {k1!r}, {k2!r}"
            )
        if v1 == v2:
            problems.append(
                f"entries at {k1!r} and {k2!r} both hold {v1!r}"
            )

    for key, _ in entries:
        if not imap.domain.contains(key):
            problems.append(f"key {key!r} is outside {imap.domain}")

    if problems:
        raise InvariantViolation(problems)
