"""Key domains: the ordered key space an interval map is total over.

Python key types carry no intrinsic minimum or maximum, so a map is handed a
`KeyDomain` holding its `lowest` and `highest` keys. Keys are only ever
compared with `<`; equality is derived from the ordering.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Generic, Protocol, TypeVar

from intervalmap.util import DEFAULT_INT_BITS, INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


K = TypeVar("K", bound=SupportsLessThan)


def key_equal(a: SupportsLessThan, b: SupportsLessThan) -> bool:
    """Equivalence under a strict weak ordering: neither key precedes the other."""
    return not a < b and not b < a


@dataclass(frozen=True, kw_only=True)
class KeyDomain(Generic[K]):
    lowest: K
    highest: K

    def __post_init__(self) -> None:
        if self.highest < self.lowest:
            raise ValueError(
                f"KeyDomain highest ({self.highest!r}) must not precede "
                f"lowest ({self.lowest!r})"
            )

    def contains(self, key: K) -> bool:
        return not key < self.lowest and not self.highest < key

    def validate(self, key: K, role: str = "key") -> K:
        """Return `key` unchanged, or raise if it falls outside the domain.

        Raises:
            ValueError: If `key` precedes `lowest` or follows `highest`
        """
        if not self.contains(key):
            raise ValueError(
                f"Interval map {role} is outside the key domain.\n"
                f"Got: {key!r}\n"
                f"Domain: [{self.lowest!r}, {self.highest!r}]\n"
                f"Hint: construct the map with a wider domain, e.g.\n"
                f"  IntervalMap(initial, domain=int_domain(64))"
            )
        return key

    def __str__(self) -> str:
        return f"KeyDomain[{self.lowest!r}, {self.highest!r}]"


def int_domain(bits: int = DEFAULT_INT_BITS) -> KeyDomain[int]:
    """Signed two's-complement integer domain of the given width."""
    if bits < 1:
        raise ValueError(f"Integer domain width must be positive, got {bits}")
    return KeyDomain(lowest=-(2 ** (bits - 1)), highest=2 ** (bits - 1) - 1)


INT32: KeyDomain[int] = KeyDomain(lowest=INT32_MIN, highest=INT32_MAX)
INT64: KeyDomain[int] = KeyDomain(lowest=INT64_MIN, highest=INT64_MAX)
FLOAT: KeyDomain[float] = KeyDomain(lowest=-math.inf, highest=math.inf)

# Aware datetimes only; naive ones cannot be ordered against these bounds.
DATETIME: KeyDomain[datetime] = KeyDomain(
    lowest=datetime.min.replace(tzinfo=timezone.utc),
    highest=datetime.max.replace(tzinfo=timezone.utc),
)
