"""Unit symbols accepted by the readable size parser and their byte multipliers."""

from types import MappingProxyType

UINT64_MAX = 2 ** 64 - 1

SIZE_UNIT_TO_BYTES = MappingProxyType({
    "b": 1,
    # ISO/IEC 80000-13 binary units
    "kib": 1024,
    "mib": 1024 ** 2,
    "gib": 1024 ** 3,
    "tib": 1024 ** 4,
    "pib": 1024 ** 5,
    "eib": 1024 ** 6,
    # SI units
    "kb": 1000,
    "mb": 1000 ** 2,
    "gb": 1000 ** 3,
    "tb": 1000 ** 4,
    "pb": 1000 ** 5,
    "eb": 1000 ** 6,
})


def lookup_multiplier(unit: str) -> int | None:
    """Return the byte multiplier for a lower-cased unit symbol, or None."""
    return SIZE_UNIT_TO_BYTES.get(unit)
