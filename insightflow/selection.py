"""Which column each strategy looks at.

Strategies never index the role lists themselves; they ask a selector. The
default picks columns in classification order, the variance selector ranks
numeric columns by spread so the most "interesting" one leads.
"""

import logging

import numpy as np

from insightflow.models import Dataset, DatasetSummary
from insightflow.normalize import to_number

log = logging.getLogger(__name__)


class ColumnSelector:
    """Pick the primary columns of each role. Subclass and override `rank_numeric`."""

    name = "first"

    def rank_numeric(self, summary: DatasetSummary, dataset: Dataset) -> list[str]:
        return list(summary.numeric_columns)

    def primary_numeric(self, summary: DatasetSummary, dataset: Dataset) -> str | None:
        ranked = self.rank_numeric(summary, dataset)
        return ranked[0] if ranked else None

    def secondary_numeric(self, summary: DatasetSummary, dataset: Dataset) -> str | None:
        """Second-ranked numeric column, falling back to the primary one."""
        ranked = self.rank_numeric(summary, dataset)
        if len(ranked) > 1:
            return ranked[1]
        return ranked[0] if ranked else None

    def primary_categorical(self, summary: DatasetSummary, dataset: Dataset) -> str | None:
        return summary.categorical_columns[0] if summary.categorical_columns else None

    def primary_date(self, summary: DatasetSummary, dataset: Dataset) -> str | None:
        return summary.date_columns[0] if summary.date_columns else None


class FirstColumnSelector(ColumnSelector):
    name = "first"


class HighestVarianceSelector(ColumnSelector):
    name = "variance"

    def rank_numeric(self, summary: DatasetSummary, dataset: Dataset) -> list[str]:
        variances: dict[str, float] = {}
        for col in summary.numeric_columns:
            values = [n for n in (to_number(v) for v in dataset.column_values(col)) if n is not None]
            variances[col] = float(np.var(values)) if values else 0.0
        log.debug("Numeric column variances: %s", variances)
        # sorted() is stable, so equal variances keep classification order
        return sorted(summary.numeric_columns, key=lambda c: variances[c], reverse=True)


_SELECTORS: dict[str, type[ColumnSelector]] = {
    FirstColumnSelector.name: FirstColumnSelector,
    HighestVarianceSelector.name: HighestVarianceSelector,
}


def get_selector(name: str) -> ColumnSelector:
    cls = _SELECTORS.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown selection policy: {name}. Available: {', '.join(sorted(_SELECTORS))}"
        )
    return cls()
