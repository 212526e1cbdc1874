import pytest

from insightflow.config import AnalyzerConfig
from insightflow.models import Dataset


def make_dataset(columns: list[str], rows: list[list]) -> Dataset:
    return Dataset(columns=columns, records=[dict(zip(columns, r)) for r in rows])


@pytest.fixture
def config() -> AnalyzerConfig:
    return AnalyzerConfig()


@pytest.fixture
def monthly_revenue_csv() -> bytes:
    return b"name,revenue\nJan,45000\nFeb,52000\nMar,48000\n"


@pytest.fixture
def dated_csv() -> bytes:
    return b"date,value\n2024-01-01,100\n2024-02-01,200\n2024-03-01,150\n"
