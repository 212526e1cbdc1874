"""Numeric coercion for columns classified as numeric."""

import logging
import math
import re
from collections.abc import Iterable
from numbers import Real
from typing import Any

from insightflow.config import AnalyzerConfig, settings
from insightflow.models import Dataset

log = logging.getLogger(__name__)

_FLOAT_LITERAL = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def is_real(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def to_number(value: Any, strip_chars: Iterable[str] = ("$", ",")) -> float | int | None:
    """Return the finite number `value` stands for, or None.

    Native numbers pass through unchanged. Strings have `strip_chars`
    removed and must then be a complete float literal.
    """
    if is_real(value):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    clean = value
    for ch in strip_chars:
        clean = clean.replace(ch, "")
    clean = clean.strip()
    if not _FLOAT_LITERAL.match(clean):
        return None
    number = float(clean)
    return number if math.isfinite(number) else None


def is_numeric(value: Any, strip_chars: Iterable[str] = ("$", ",")) -> bool:
    return to_number(value, strip_chars) is not None


def finite_or_zero(value: Any) -> float | int:
    """Aggregation helper: anything that is not a finite number counts as 0."""
    if is_real(value) and math.isfinite(value):
        return value
    return 0


def normalize_dataset(
    dataset: Dataset,
    numeric_columns: list[str],
    config: AnalyzerConfig | None = None,
) -> Dataset:
    """Return a copy of `dataset` with every numeric-column value coerced to a number.

    Values that cannot be coerced are kept as they are.
    """
    cfg = config or settings.analyzer
    records: list[dict[str, Any]] = []
    kept = 0
    for row in dataset.records:
        new_row = dict(row)
        for col in numeric_columns:
            raw = row.get(col)
            number = to_number(raw, cfg.strip_chars)
            if number is None:
                kept += 1
                continue
            new_row[col] = float(number) if isinstance(raw, str) else number
        records.append(new_row)
    if kept:
        log.debug("Normalization left %d non-numeric values untouched", kept)
    return Dataset(columns=list(dataset.columns), records=records)
