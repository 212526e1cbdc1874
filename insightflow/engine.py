"""Analysis pipeline: classify, summarize, normalize, plan.

Everything after parsing is synchronous and pure. `analyze_source` is the
one coroutine; it awaits the parser and then runs `analyze`.
"""

import asyncio
import logging

from insightflow.classify import classify_columns
from insightflow.config import AnalyzerConfig, settings
from insightflow.errors import EmptyDatasetError
from insightflow.models import AnalysisResult, ColumnRole, Dataset, DatasetSummary
from insightflow.normalize import normalize_dataset
from insightflow.parsing import Source, parse_csv
from insightflow.selection import ColumnSelector, get_selector
from insightflow.strategies import run_strategies
from insightflow.strategies.models import StrategyContext

log = logging.getLogger(__name__)


def build_summary(dataset: Dataset, roles: dict[str, ColumnRole]) -> DatasetSummary:
    """Summary whose role lists partition the header, each in header order."""
    by_role: dict[ColumnRole, list[str]] = {role: [] for role in ColumnRole}
    for col in dataset.columns:
        by_role[roles[col]].append(col)
    return DatasetSummary(
        total_rows=len(dataset.records),
        total_columns=len(dataset.columns),
        column_names=list(dataset.columns),
        numeric_columns=by_role[ColumnRole.NUMERIC],
        categorical_columns=by_role[ColumnRole.CATEGORICAL],
        date_columns=by_role[ColumnRole.DATE],
    )


def analyze(
    dataset: Dataset,
    config: AnalyzerConfig | None = None,
    selector: ColumnSelector | None = None,
) -> AnalysisResult:
    cfg = config or settings.analyzer
    if not dataset.records:
        raise EmptyDatasetError()

    roles = classify_columns(dataset, cfg)
    summary = build_summary(dataset, roles)
    log.info(
        "Columns: %d numeric, %d categorical, %d date",
        len(summary.numeric_columns),
        len(summary.categorical_columns),
        len(summary.date_columns),
    )

    normalized = normalize_dataset(dataset, summary.numeric_columns, cfg)
    ctx = StrategyContext(
        dataset=normalized,
        summary=summary,
        selector=selector or get_selector(cfg.selection_policy),
        config=cfg,
    )
    charts, insights = run_strategies(ctx)
    log.info("Analysis produced %d charts, %d insights", len(charts), len(insights))
    return AnalysisResult(summary=summary, charts=charts, insights=insights)


async def analyze_source(
    source: Source,
    config: AnalyzerConfig | None = None,
    selector: ColumnSelector | None = None,
) -> AnalysisResult:
    """Parse `source` off the event loop, then analyze it."""
    dataset = await asyncio.to_thread(parse_csv, source)
    return analyze(dataset, config, selector)
