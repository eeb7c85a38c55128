from .checks import InvariantViolation, check_invariants, is_canonical
from .core import IntervalMap
from .domain import DATETIME, FLOAT, INT32, INT64, KeyDomain, int_domain, key_equal
from .run import Run

__all__ = [
    "IntervalMap",
    "KeyDomain",
    "Run",
    "int_domain",
    "key_equal",
    "INT32",
    "INT64",
    "FLOAT",
    "DATETIME",
    "check_invariants",
    "is_canonical",
    "InvariantViolation",
]
