"""Convert columns of readable size strings into UInt64 byte counts with Polars."""

import polars as pl
import structlog

from readable_size.config import FUNCTION_NAME, SizeColumnConfig
from readable_size.errors import ReadableSizeError
from readable_size.ingest.size_parser import parse_readable_size

log = structlog.get_logger(__name__)


def _check_string_dtype(series: pl.Series) -> None:
    if series.dtype not in (pl.String, pl.Null):
        raise TypeError(
            f"Illegal type {series.dtype} of argument readable_size of function "
            f"{FUNCTION_NAME}, expected String"
        )


def parse_size_series(series: pl.Series) -> pl.Series:
    """Parse a String series into a UInt64 series of byte counts.

    Rows are converted in order and the first invalid row aborts the whole
    batch with its ReadableSizeError. Null rows stay null.
    """
    _check_string_dtype(series)

    counts: list[int | None] = []
    for row, value in enumerate(series.to_list()):
        if value is None:
            counts.append(None)
            continue
        try:
            counts.append(parse_readable_size(value))
        except ReadableSizeError as exc:
            log.debug("readable_size_rejected", row=row, error=str(exc))
            raise

    log.debug("readable_sizes_converted", column=series.name, rows=len(counts))
    return pl.Series(series.name, counts, dtype=pl.UInt64)


def from_readable_size(expr: pl.Expr | str) -> pl.Expr:
    """Polars expression converting readable size strings to byte counts."""
    if isinstance(expr, str):
        expr = pl.col(expr)
    return expr.map_batches(parse_size_series, return_dtype=pl.UInt64)


def with_byte_counts(df: pl.DataFrame, config: SizeColumnConfig | None = None) -> pl.DataFrame:
    """Append the byte count column named by config to df."""
    if config is None:
        config = SizeColumnConfig()
    counts = parse_size_series(df.get_column(config.source_col))
    return df.with_columns(counts.alias(config.target_col))
