from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ..models import AnalysisResult, CurrencySentiment


def _driver_line(code: str, sentiment: CurrencySentiment) -> str:
    if not sentiment.hit_counts_by_theme:
        return f"- {code}: no high-impact themes"
    groups = ", ".join(f"{name} ({count})" for name, count in sentiment.hit_counts_by_theme.items())
    return f"- {code}: {groups}"


def _influencer_lines(code: str, sentiment: CurrencySentiment) -> List[str]:
    lines = [f"#### {code}"]
    if not sentiment.top_influencers:
        return lines + ["- (none)"]
    for inf in sentiment.top_influencers:
        themes = ", ".join(inf.theme_names) or "-"
        lines.append(f"- [{inf.title}]({inf.url}) weight={inf.weight:.1f} score={inf.score:+.2f} themes={themes}")
    return lines


def _headline_lines(code: str, items: Sequence[Dict[str, Any]]) -> List[str]:
    lines = [f"#### {code}"]
    if not items:
        return lines + ["No headlines returned."]
    for it in items:
        meta = " • ".join(str(v) for v in (it.get("domain"), it.get("sourceCountry"), it.get("language"), it.get("seendate")) if v)
        lines.append(f"- [{it['title']}]({it.get('url') or '#'}){f' ({meta})' if meta else ''}")
    return lines


def format_report(result: AnalysisResult) -> str:
    """Render an analysis as markdown for terminal output.

    Sections: Summary, Why, Drivers, Top influencers, Headlines.
    """
    b, q = result.base_sentiment, result.quote_sentiment
    lines: List[str] = [
        f"# {result.pair}: {result.decision_label}",
        "",
        f"Base {result.base} avg: {b.weighted_average:.2f} • Quote {result.quote} avg: {q.weighted_average:.2f} "
        f"• Spread: {result.spread:.2f} • Timespan: {result.timespan}",
        "",
        "### Summary",
        "",
        result.summary,
        "",
        "### Why",
        "",
        result.why,
        "",
        "### High-impact drivers",
        "",
        _driver_line(result.base, b),
        _driver_line(result.quote, q),
        "",
        "### Top influencers",
        "",
        *_influencer_lines(result.base, b),
        "",
        *_influencer_lines(result.quote, q),
        "",
        "### Headlines",
        "",
        *_headline_lines(result.base, result.headlines.get("base", [])),
        "",
        *_headline_lines(result.quote, result.headlines.get("quote", [])),
    ]
    if result.notes:
        lines += ["", "---", *(f"_{n}_" for n in result.notes)]
    return "\n".join(lines) + "\n"
