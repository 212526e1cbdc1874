import importlib
import logging
from collections.abc import Callable

from insightflow.models import ChartSpec, Insight
from insightflow.strategies.models import StrategyContext, StrategyOutput

log = logging.getLogger(__name__)

Strategy = Callable[[StrategyContext], StrategyOutput | None]

_REGISTRY: dict[str, Strategy] = {}

# All strategy module names — imported at bottom to auto-register
_MODULES = [
    "insightflow.strategies.trend",
    "insightflow.strategies.comparison",
    "insightflow.strategies.distribution",
    "insightflow.strategies.average",
]


def register(name: str):
    """Decorator to register a planning strategy."""

    def decorator(fn):
        _REGISTRY[name] = fn
        return fn

    return decorator


def get_strategy(name: str) -> Strategy:
    fn = _REGISTRY.get(name)
    if not fn:
        raise ValueError(
            f"Unknown strategy: {name}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return fn


def run_strategies(ctx: StrategyContext) -> tuple[list[ChartSpec], list[Insight]]:
    """Run the configured strategies in order and cap the insight list.

    Insights keep execution order; the cap drops the tail, it never re-ranks.
    """
    charts: list[ChartSpec] = []
    insights: list[Insight] = []
    for name in ctx.config.strategies:
        out = get_strategy(name)(ctx)
        if out is None:
            log.debug("Strategy %s skipped: preconditions not met", name)
            continue
        if out.chart is not None:
            charts.append(out.chart)
        if out.insight is not None:
            insights.append(out.insight)
        log.debug(
            "Strategy %s produced chart=%s insight=%s",
            name,
            out.chart.id if out.chart else None,
            out.insight.kind if out.insight else None,
        )
    if len(insights) > ctx.config.max_insights:
        log.info("Truncating %d insights to %d", len(insights), ctx.config.max_insights)
    return charts, insights[: ctx.config.max_insights]


# Auto-import modules to trigger @register decorators
for _mod in _MODULES:
    importlib.import_module(_mod)
