"""Global mean of the primary numeric column. Insight only, no chart."""

import numpy as np

from insightflow.insights import InsightBuilder, format_grouped
from insightflow.normalize import finite_or_zero
from insightflow.strategies import register
from insightflow.strategies.models import StrategyContext, StrategyOutput


@register("average")
def average_strategy(ctx: StrategyContext) -> StrategyOutput | None:
    num_col = ctx.selector.primary_numeric(ctx.summary, ctx.dataset)
    if num_col is None or not ctx.dataset.records:
        return None

    # missing values count as 0 and stay in the denominator
    values = np.array([finite_or_zero(v) for v in ctx.dataset.column_values(num_col)], dtype=float)
    mean = float(np.mean(values))

    insight = (
        InsightBuilder("average")
        .strong("Average Performance")
        .text(f": The mean {num_col} across all data points is ")
        .strong(format_grouped(mean, max_decimals=1))
        .text(".")
        .build()
    )
    return StrategyOutput(insight=insight)
