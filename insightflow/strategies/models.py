from dataclasses import dataclass

from insightflow.config import AnalyzerConfig
from insightflow.models import ChartSpec, Dataset, DatasetSummary, Insight
from insightflow.selection import ColumnSelector


@dataclass(frozen=True)
class StrategyContext:
    dataset: Dataset  # normalized rows
    summary: DatasetSummary
    selector: ColumnSelector
    config: AnalyzerConfig


@dataclass(frozen=True)
class StrategyOutput:
    chart: ChartSpec | None = None
    insight: Insight | None = None
