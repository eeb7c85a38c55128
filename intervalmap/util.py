"""Utility constants for intervalmap.

Integer limits for the ready-made key domains. Widths follow two's-complement
signed integers, so a 32-bit domain spans [-2**31, 2**31 - 1].
"""

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

DEFAULT_INT_BITS = 32
