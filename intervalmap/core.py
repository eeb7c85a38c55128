import bisect
import copy
import logging
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from typing_extensions import override

from intervalmap.domain import INT32, KeyDomain, SupportsLessThan, key_equal
from intervalmap.run import Run

K = TypeVar("K", bound=SupportsLessThan)
V = TypeVar("V")

logger = logging.getLogger(__name__)


class IntervalMap(Generic[K, V]):
    """Total mapping from a key domain to values, stored as change points.

    Entries are kept in two parallel lists sorted by key. Every key `k` maps to
    the value of the greatest stored key `<= k`. The first stored key is always
    the domain's `lowest` key and no two adjacent entries hold equal values, so
    each mapping has exactly one representation.

    Keys are compared with `<` only and values with `==` only.

    Example:
        >>> m = IntervalMap("A")
        >>> m.assign(3, 5, "B")
        >>> m[2], m[3], m[4], m[5]
        ('A', 'B', 'B', 'A')
        >>> len(m)
        3
    """

    def __init__(self, initial: V, domain: KeyDomain[K] = INT32) -> None:
        """Create a map holding `initial` for every key of `domain`.

        Args:
            initial: Value associated with the whole domain
            domain: Key space the map is total over (32-bit integers by default)
        """
        self._domain: KeyDomain[K] = domain
        self._keys: list[K] = [domain.lowest]
        self._values: list[V] = [initial]

    @property
    def domain(self) -> KeyDomain[K]:
        return self._domain

    def lookup(self, key: K) -> V:
        """Value associated with `key`.

        Raises:
            ValueError: If `key` is outside the map's domain
        """
        self._domain.validate(key)
        return self._values[bisect.bisect_right(self._keys, key) - 1]

    def assign(self, begin: K, end: K, value: V) -> None:
        """Associate `value` with every key in the half-open range [begin, end).

        Keys outside the range keep their values. If `not begin < end` the
        range is empty and the map is left untouched.

        Raises:
            ValueError: If `begin` or `end` is outside the map's domain
        """
        if not begin < end:
            logger.debug("Ignoring empty range [%r, %r)", begin, end)
            return
        self._domain.validate(begin, "begin")
        self._domain.validate(end, "end")

        keys, values = self._keys, self._values
        follow = values[bisect.bisect_right(keys, end) - 1]

        # Entries keyed in [begin, end] are replaced wholesale; the boundary
        # entries among them are decided again below.
        lo = bisect.bisect_left(keys, begin)
        hi = bisect.bisect_right(keys, end)

        new_keys: list[K] = []
        new_values: list[V] = []

        # lo == 0 only when begin is the sentinel, which is overwritten in place
        if lo == 0 or not values[lo - 1] == value:
            new_keys.append(begin)
            new_values.append(value)

        # The run ending at `end` holds `value` whether or not it merged left,
        # so `follow` only needs comparing against `value`. The entry after
        # `end` already differs from `follow` in a canonical map.
        if not follow == value:
            new_keys.append(end)
            new_values.append(follow)

        keys[lo:hi] = new_keys
        values[lo:hi] = new_values
        logger.debug(
            "Assigned [%r, %r) -> %r: replaced %d entries with %d",
            begin,
            end,
            value,
            hi - lo,
            len(new_keys),
        )

    def entries(self) -> list[tuple[K, V]]:
        """Copy of the stored (key, value) change points, in key order."""
        return list(zip(self._keys, self._values))

    def runs(self, start: K | None = None, stop: K | None = None) -> Iterator[Run[K, V]]:
        """Yield the constant-valued stretches overlapping [start, stop).

        Stretches are clipped to the requested range. `None` bounds leave that
        side open; the last stretch of the map has `end=None`.

        Raises:
            ValueError: If a bound is outside the map's domain
        """
        if start is not None:
            self._domain.validate(start, "start")
        if stop is not None:
            self._domain.validate(stop, "stop")
            if start is not None and not start < stop:
                return iter(())
        first = 0 if start is None else bisect.bisect_right(self._keys, start) - 1
        return self._generate_runs(first, start, stop)

    def _generate_runs(
        self, first: int, start: K | None, stop: K | None
    ) -> Iterator[Run[K, V]]:
        keys, values = self._keys, self._values
        for idx in range(first, len(keys)):
            key = keys[idx]
            if stop is not None and not key < stop:
                break
            following = keys[idx + 1] if idx + 1 < len(keys) else None
            run_start = key if start is None or start < key else start
            if stop is None or (following is not None and following < stop):
                run_end = following
            else:
                run_end = stop
            yield Run(start=run_start, end=run_end, value=values[idx])

    def copy(self) -> "IntervalMap[K, V]":
        """Independent map with the same entries (values are shared)."""
        clone = self.__class__.__new__(self.__class__)
        clone._domain = self._domain
        clone._keys = list(self._keys)
        clone._values = list(self._values)
        return clone

    def __copy__(self) -> "IntervalMap[K, V]":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "IntervalMap[K, V]":
        clone = self.copy()
        clone._values = copy.deepcopy(self._values, memo)
        return clone

    def __getitem__(self, item: Any) -> Any:
        if isinstance(item, slice):
            self._check_step(item)
            return self.runs(item.start, item.stop)
        return self.lookup(item)

    def __setitem__(self, item: slice, value: V) -> None:
        if not isinstance(item, slice):
            raise TypeError(
                f"Interval map assignment needs a key range.\n"
                f"Got {type(item).__name__!r}: {item!r}\n"
                f"Examples:\n"
                f"  m[10:20] = value   # keys 10 through 19\n"
                f"  m[:20] = value     # from the domain's lowest key\n"
                f"  m.assign(10, 20, value)"
            )
        self._check_step(item)
        begin = self._domain.lowest if item.start is None else item.start
        end = self._domain.highest if item.stop is None else item.stop
        self.assign(begin, end, value)

    def _check_step(self, item: slice) -> None:
        if item.step is not None:
            raise TypeError(
                f"Interval map slices do not take a step.\n"
                f"Got: {item!r}\n"
                f"Hint: use m[start:stop] for a half-open key range"
            )

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return zip(self._keys, self._values)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalMap):
            return NotImplemented
        if len(self) != len(other):
            return False
        if not (
            key_equal(self._domain.lowest, other._domain.lowest)
            and key_equal(self._domain.highest, other._domain.highest)
        ):
            return False
        return all(
            key_equal(k1, k2) and v1 == v2
            for (k1, v1), (k2, v2) in zip(self, other)
        )

    @override
    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self)
        return f"{type(self).__name__}({{{body}}})"

    @override
    def __str__(self) -> str:
        return "\n".join(str(run) for run in self.runs())
