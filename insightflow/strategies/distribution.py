"""Distribution share as a pie chart, with a concentration observation.

Uses the secondary numeric column so that, with several numeric columns, the
pie does not repeat the comparison bar chart.
"""

import logging

from insightflow.insights import InsightBuilder
from insightflow.models import ChartSpec, ChartType
from insightflow.strategies import register
from insightflow.strategies.aggregate import sum_by_category, top_groups
from insightflow.strategies.models import StrategyContext, StrategyOutput

log = logging.getLogger(__name__)


@register("distribution")
def distribution_strategy(ctx: StrategyContext) -> StrategyOutput | None:
    cat_col = ctx.selector.primary_categorical(ctx.summary, ctx.dataset)
    num_col = ctx.selector.secondary_numeric(ctx.summary, ctx.dataset)
    if cat_col is None or num_col is None:
        return None

    groups = sum_by_category(ctx.dataset, cat_col, num_col, ctx.config.unknown_label)
    # share is against every category, not only the ones shown
    total = sum(g["value"] for g in groups)
    top = top_groups(groups, ctx.config.pie_top_n)

    chart = ChartSpec(
        id="dist-pie",
        type=ChartType.PIE,
        title=f"{num_col} Distribution",
        description=f"Breakdown of {num_col} usage across major {cat_col} segments.",
        data_key_x="name",
        data_key_y="value",
        data=top,
    )
    if not top or total == 0:
        log.debug("No concentration insight for %s: total=%r", num_col, total)
        return StrategyOutput(chart=chart)

    leader = top[0]
    share = leader["value"] / total * 100
    insight = (
        InsightBuilder("concentration")
        .strong("Concentration Risk")
        .text(f": The top segment ({leader['name']}) accounts for ")
        .strong(f"{share:.1f}%")
        .text(f" of the total {num_col}, indicating high dependency.")
        .build()
    )
    return StrategyOutput(chart=chart, insight=insight)
