from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True, kw_only=True)
class Run(Generic[K, V]):
    """A constant-valued stretch of an interval map.

    `start` is inclusive and `end` exclusive. The final stretch of a map has
    `end=None` and reaches through the domain's highest key inclusive.
    """

    start: K
    end: K | None
    value: V

    def __post_init__(self) -> None:
        if self.end is not None and not self.start < self.end:
            raise ValueError(
                f"Run start ({self.start!r}) must be < end ({self.end!r})"
            )

    def __str__(self) -> str:
        """Human-friendly string showing range and value."""
        end = "…" if self.end is None else repr(self.end)
        return f"Run([{self.start!r}→{end}), {self.value!r})"

    def covers(self, key: K) -> bool:
        if key < self.start:
            return False
        return self.end is None or key < self.end
