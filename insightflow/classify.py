"""Column role inference from a bounded sample of rows.

Numeric is tested before date: a date parser applied to small integers can
succeed spuriously, so a column of bare numbers must never reach it.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timezone
from typing import Any

from insightflow.config import AnalyzerConfig, settings
from insightflow.models import ColumnRole, Dataset
from insightflow.normalize import is_numeric

log = logging.getLogger(__name__)


def _naive_utc(value: datetime) -> datetime:
    # aware and naive datetimes do not compare, so everything sorts as naive UTC
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_date(value: Any, formats: Iterable[str] = ()) -> datetime | None:
    """Return `value` as a datetime, or None if it is not a calendar date."""
    if isinstance(value, datetime):
        return _naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None
    text = value.strip()
    # digit-only tokens are numbers or compact ISO dates; never dates here
    if not text or text.isdigit():
        return None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        parsed = None
    if parsed is not None:
        return _naive_utc(parsed)
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def is_date(value: Any, formats: Iterable[str] = ()) -> bool:
    return parse_date(value, formats) is not None


def classify_values(values: Sequence[Any], config: AnalyzerConfig | None = None) -> ColumnRole:
    """Assign a role to one column given its sampled values."""
    cfg = config or settings.analyzer
    if not values:
        return ColumnRole.CATEGORICAL
    if all(is_numeric(v, cfg.strip_chars) for v in values):
        return ColumnRole.NUMERIC
    if all(is_date(v, cfg.date_formats) for v in values):
        return ColumnRole.DATE
    return ColumnRole.CATEGORICAL


def classify_columns(dataset: Dataset, config: AnalyzerConfig | None = None) -> dict[str, ColumnRole]:
    """Role per column, in header order, from the first `sample_size` records."""
    cfg = config or settings.analyzer
    sample = dataset.records[: cfg.sample_size]
    roles: dict[str, ColumnRole] = {}
    for col in dataset.columns:
        roles[col] = classify_values([row.get(col) for row in sample], cfg)
    log.debug("Classified %d columns from %d sampled rows: %s", len(roles), len(sample), roles)
    return roles
