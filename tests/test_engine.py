"""End-to-end tests for the analysis pipeline."""

import asyncio

import pytest

from conftest import make_dataset
from insightflow.config import AnalyzerConfig
from insightflow.engine import analyze, analyze_source
from insightflow.errors import EmptyDatasetError, ParseError
from insightflow.models import Dataset
from insightflow.parsing import parse_csv
from insightflow.selection import HighestVarianceSelector


class TestScenarios:
    """Reference inputs and their expected reports."""

    def test_monthly_revenue_bar_chart(self, monthly_revenue_csv):
        result = analyze(parse_csv(monthly_revenue_csv))
        assert result.summary.numeric_columns == ["revenue"]
        assert result.summary.categorical_columns == ["name"]
        bar = next(c for c in result.charts if c.id == "bar-comparison")
        assert bar.data == [
            {"name": "Feb", "value": 52000},
            {"name": "Mar", "value": 48000},
            {"name": "Jan", "value": 45000},
        ]
        assert [i.to_markdown() for i in result.insights] == [
            "**Market Leader**: The top performing name is **Feb**, contributing **52,000** to the total revenue.",
            "**Concentration Risk**: The top segment (Feb) accounts for **35.9%** of the total revenue, "
            "indicating high dependency.",
            "**Average Performance**: The mean revenue across all data points is **48,333.3**.",
        ]

    def test_time_series_growth(self, dated_csv):
        result = analyze(parse_csv(dated_csv))
        assert result.summary.date_columns == ["date"]
        assert result.charts[0].id == "trend-1"
        assert result.insights[0].emphasized()[1] == "50.0% increase"

    def test_currency_values_normalized_before_aggregation(self):
        result = analyze(parse_csv(b'item,price\nA,"$1,200"\nB,"$950"\nA,"$50"\n'))
        assert result.summary.numeric_columns == ["price"]
        bar = result.charts[0]
        assert bar.data == [{"name": "A", "value": 1250.0}, {"name": "B", "value": 950.0}]

    def test_empty_dataset_fails(self):
        with pytest.raises(EmptyDatasetError, match="No data found"):
            analyze(parse_csv(b"name,revenue\n"))
        with pytest.raises(EmptyDatasetError):
            analyze(Dataset(columns=["a"], records=[]))

    def test_categorical_only(self):
        result = analyze(parse_csv(b"city,country\nParis,France\nRome,Italy\n"))
        assert result.summary.numeric_columns == []
        assert result.summary.date_columns == []
        assert result.charts == []
        assert result.insights == []


class TestProperties:
    """Invariants that hold for any input."""

    @pytest.mark.parametrize(
        "csv",
        [
            b"a,b,c\n1,x,2024-01-01\n2,y,2024-01-02\n",
            b"a,b\n,\n1,2\n",
            b"only\nvalue\n",
            b"d,n,m,c\n2024-05-01,1,2,p\n2024-04-01,3,4,q\n",
        ],
    )
    def test_role_lists_partition_columns(self, csv):
        s = analyze(parse_csv(csv)).summary
        roles = s.numeric_columns + s.categorical_columns + s.date_columns
        assert sorted(roles) == sorted(s.column_names)
        assert len(set(roles)) == len(roles)
        assert s.total_columns == len(s.column_names)

    def test_idempotent(self, dated_csv):
        first = analyze(parse_csv(dated_csv)).model_dump()
        second = analyze(parse_csv(dated_csv)).model_dump()
        assert first == second

    def test_insight_count_bounded(self):
        csv = b"d,c,n,m\n2024-01-01,a,1,2\n2024-02-01,b,3,4\n"
        assert len(analyze(parse_csv(csv)).insights) <= 7

    def test_variance_selector(self):
        ds = make_dataset(["cat", "flat", "spread"], [["a", 5, 1], ["b", 5, 900]])
        result = analyze(ds, selector=HighestVarianceSelector())
        assert result.charts[0].title == "Top 5 cat by spread"
        assert result.charts[1].title == "flat Distribution"

    def test_selection_policy_from_config(self):
        ds = make_dataset(["cat", "flat", "spread"], [["a", 5, 1], ["b", 5, 900]])
        result = analyze(ds, AnalyzerConfig(selection_policy="variance"))
        assert result.charts[0].title == "Top 5 cat by spread"
        assert result.charts[1].title == "flat Distribution"

    def test_unknown_selection_policy(self):
        ds = make_dataset(["v"], [[1]])
        with pytest.raises(ValueError, match="Unknown selection policy"):
            analyze(ds, AnalyzerConfig(selection_policy="random"))


class TestAnalyzeSource:
    """Async entry point: parse, then analyze."""

    def test_parses_and_analyzes(self, monthly_revenue_csv):
        result = asyncio.run(analyze_source(monthly_revenue_csv))
        assert result.summary.total_rows == 3

    def test_parse_error_propagates(self):
        with pytest.raises(ParseError) as excinfo:
            asyncio.run(analyze_source(b"a,b\n1,2\n3,4,5,6\n"))
        assert excinfo.value.message
