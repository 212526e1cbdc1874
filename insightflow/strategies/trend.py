"""Time-series trend: first date column against the primary numeric column."""

import logging
import math
from datetime import datetime

from insightflow.classify import parse_date
from insightflow.insights import InsightBuilder, format_plain
from insightflow.models import ChartSpec, ChartType
from insightflow.normalize import is_real
from insightflow.strategies import register
from insightflow.strategies.models import StrategyContext, StrategyOutput

log = logging.getLogger(__name__)


def growth_percent(first, last) -> float | None:
    """(last - first) / first * 100, or None when it is undefined.

    The sign follows the formula literally: with a negative base, a move from
    -50 to -100 is +100%. Callers report the magnitude plus a direction word.
    """
    if not (is_real(first) and is_real(last)):
        return None
    if not (math.isfinite(first) and math.isfinite(last)) or first == 0:
        return None
    return (last - first) / first * 100


@register("trend")
def trend_strategy(ctx: StrategyContext) -> StrategyOutput | None:
    date_col = ctx.selector.primary_date(ctx.summary, ctx.dataset)
    num_col = ctx.selector.primary_numeric(ctx.summary, ctx.dataset)
    if date_col is None or num_col is None:
        return None

    formats = ctx.config.date_formats
    keyed = [(parse_date(row.get(date_col), formats), row) for row in ctx.dataset.records]
    # unparseable dates go last, keeping their relative order
    keyed.sort(key=lambda kr: (0, kr[0]) if kr[0] is not None else (1, datetime.min))
    data = [{date_col: row.get(date_col), num_col: row.get(num_col)} for _, row in keyed]
    dated = [point for (parsed, _), point in zip(keyed, data) if parsed is not None]

    chart = ChartSpec(
        id="trend-1",
        type=ChartType.AREA,
        title=f"{num_col} Trend Over Time",
        description=(
            f"Tracking the movement of {num_col} across the measured time period. "
            "This visualization highlights growth patterns and seasonal volatility."
        ),
        data_key_x=date_col,
        data_key_y=num_col,
        data=data,
    )

    # growth is measured between the earliest and latest parseable dates
    first = dated[0][num_col] if dated else None
    last = dated[-1][num_col] if dated else None
    growth = growth_percent(first, last)
    if growth is None:
        log.debug("No growth insight for %s: first=%r last=%r", num_col, first, last)
        return StrategyOutput(chart=chart)

    direction = "increase" if growth > 0 else "decrease"
    insight = (
        InsightBuilder("trend")
        .strong("Overall Growth")
        .text(f": {num_col} shifted from {format_plain(first)} to {format_plain(last)}, representing a ")
        .strong(f"{abs(growth):.1f}% {direction}")
        .text(" over the period.")
        .build()
    )
    return StrategyOutput(chart=chart, insight=insight)
