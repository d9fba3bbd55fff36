"""Configuration dataclasses for readable size conversion."""

from dataclasses import dataclass

# Name used for the conversion in error messages
FUNCTION_NAME = "fromReadableSize"


@dataclass
class SizeColumnConfig:
    """Column names used when converting a DataFrame of readable sizes."""
    source_col: str = "readable_size"
    target_col: str = "size_bytes"
