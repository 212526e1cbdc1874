"""Structured insight text.

An insight is plain text plus a list of emphasized character ranges. The
presentation layer decides how emphasis looks; `render` and `render_html`
cover the two formats the HTTP layer and tests need.
"""

import html
import math
from collections.abc import Callable

from insightflow.models import EmphasisSpan, Insight


class InsightBuilder:
    """Accumulate text fragments, recording the offsets of emphasized ones."""

    def __init__(self, kind: str):
        self.kind = kind
        self._parts: list[str] = []
        self._spans: list[EmphasisSpan] = []
        self._length = 0

    def text(self, fragment: str) -> "InsightBuilder":
        self._parts.append(fragment)
        self._length += len(fragment)
        return self

    def strong(self, fragment: str) -> "InsightBuilder":
        if fragment:
            start = self._length
            self.text(fragment)
            self._spans.append(EmphasisSpan(start=start, end=self._length))
        return self

    def build(self) -> Insight:
        return Insight(kind=self.kind, text="".join(self._parts), spans=list(self._spans))


def render(
    insight: Insight,
    open_mark: str,
    close_mark: str,
    escape: Callable[[str], str] = lambda s: s,
) -> str:
    out: list[str] = []
    pos = 0
    for span in insight.spans:
        out.append(escape(insight.text[pos:span.start]))
        out.append(open_mark + escape(insight.text[span.start:span.end]) + close_mark)
        pos = span.end
    out.append(escape(insight.text[pos:]))
    return "".join(out)


def render_html(insight: Insight) -> str:
    return render(insight, "<strong>", "</strong>", escape=html.escape)


# ── Number formatting ──


def format_plain(value) -> str:
    """Shortest readable form: 100.0 -> '100', 2.5 -> '2.5'."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def format_grouped(value: float, max_decimals: int = 3) -> str:
    """Thousands separators and at most `max_decimals` decimals, trailing zeros dropped."""
    text = f"{value:,.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text
