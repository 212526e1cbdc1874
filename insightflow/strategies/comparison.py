"""Categorical comparison: top categories by summed value, as a bar chart."""

from insightflow.insights import InsightBuilder, format_grouped
from insightflow.models import ChartSpec, ChartType
from insightflow.strategies import register
from insightflow.strategies.aggregate import sum_by_category, top_groups
from insightflow.strategies.models import StrategyContext, StrategyOutput


@register("comparison")
def comparison_strategy(ctx: StrategyContext) -> StrategyOutput | None:
    cat_col = ctx.selector.primary_categorical(ctx.summary, ctx.dataset)
    num_col = ctx.selector.primary_numeric(ctx.summary, ctx.dataset)
    if cat_col is None or num_col is None:
        return None

    n = ctx.config.bar_top_n
    top = top_groups(sum_by_category(ctx.dataset, cat_col, num_col, ctx.config.unknown_label), n)

    chart = ChartSpec(
        id="bar-comparison",
        type=ChartType.BAR,
        title=f"Top {n} {cat_col} by {num_col}",
        description=f"A comparative view of the top performing {cat_col} groups.",
        data_key_x="name",
        data_key_y="value",
        data=top,
    )
    if not top:
        return StrategyOutput(chart=chart)

    leader = top[0]
    insight = (
        InsightBuilder("leader")
        .strong("Market Leader")
        .text(f": The top performing {cat_col} is ")
        .strong(leader["name"])
        .text(", contributing ")
        .strong(format_grouped(leader["value"]))
        .text(f" to the total {num_col}.")
        .build()
    )
    return StrategyOutput(chart=chart, insight=insight)
