from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ColumnRole(str, Enum):
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    DATE = "date"


class ChartType(str, Enum):
    AREA = "area"
    BAR = "bar"
    PIE = "pie"
    LINE = "line"  # reserved, no strategy emits it yet


class Dataset(BaseModel):
    """Parsed rows plus the header, in file order."""

    columns: list[str]
    records: list[dict[str, Any]]

    def __len__(self) -> int:
        return len(self.records)

    def column_values(self, column: str) -> list[Any]:
        return [r.get(column) for r in self.records]


class DatasetSummary(BaseModel):
    total_rows: int
    total_columns: int
    column_names: list[str]
    numeric_columns: list[str] = []
    categorical_columns: list[str] = []
    date_columns: list[str] = []


class ChartSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: ChartType
    title: str
    description: str
    data_key_x: str
    data_key_y: str
    data: list[dict[str, Any]]


class EmphasisSpan(BaseModel):
    """Half-open character range [start, end) of an insight's text."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)


class Insight(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    text: str
    spans: list[EmphasisSpan] = []

    def emphasized(self) -> list[str]:
        return [self.text[s.start:s.end] for s in self.spans]

    def to_markdown(self) -> str:
        from insightflow.insights import render

        return render(self, "**", "**")

    def to_html(self) -> str:
        from insightflow.insights import render_html

        return render_html(self)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: DatasetSummary
    charts: list[ChartSpec] = []
    insights: list[Insight] = []


# ── API models ──


class RenderedInsight(BaseModel):
    kind: str
    text: str
    spans: list[EmphasisSpan]
    markdown: str


class AnalyzeResponse(BaseModel):
    filename: str = ""
    summary: DatasetSummary
    charts: list[ChartSpec]
    insights: list[RenderedInsight]
    elapsed_s: float = 0.0
