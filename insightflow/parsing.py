"""Delimited text to records, via pandas.

pandas infers a dtype per column, so bare numeric literals arrive as numbers
and everything else as strings. Only empty fields become missing; tokens
such as "NA" or "null" are kept as text.
"""

import io
import logging
from pathlib import Path
from typing import Any, BinaryIO

import pandas as pd

from insightflow.errors import EmptyDatasetError, ParseError
from insightflow.models import Dataset

log = logging.getLogger(__name__)

Source = bytes | str | Path | BinaryIO


def _to_buffer(source: Source) -> Any:
    if isinstance(source, bytes):
        return io.BytesIO(source)
    if isinstance(source, str):
        return io.StringIO(source)
    return source


def parse_csv(source: Source) -> Dataset:
    """Parse CSV text into a Dataset. `str` is CSV text; pass a Path for files."""
    try:
        df = pd.read_csv(
            _to_buffer(source),
            skip_blank_lines=True,
            keep_default_na=False,
            na_values=[""],
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError as exc:
        raise EmptyDatasetError() from exc
    except (pd.errors.ParserError, UnicodeDecodeError, ValueError) as exc:
        raise ParseError.wrap(exc) from exc

    columns = [str(c) for c in df.columns]
    df.columns = columns
    # object dtype so NaN can become None without re-casting numeric columns
    df = df.astype(object).where(df.notna(), None)
    records: list[dict[str, Any]] = df.to_dict(orient="records")
    log.info("Parsed %d rows x %d columns", len(records), len(columns))
    return Dataset(columns=columns, records=records)
