"""
Styled HTML rendering for scan reports.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from html import escape

from app.domain.competitor_scanning import CompetitorResult, UpdateItem

MAX_ITEMS_PER_COMPETITOR = 10

_STYLES = """
        body { font-family: Arial, sans-serif; margin: 20px; background-color: #f5f5f5; }
        .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 20px; border-radius: 8px; margin-bottom: 20px; }
        .competitor-section { background: white; margin: 20px 0; padding: 20px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
        .competitor-title { color: #333; border-bottom: 2px solid #667eea; padding-bottom: 10px; }
        .update-item { border-left: 4px solid #667eea; padding: 15px; margin: 10px 0; background: #f8f9fa; }
        .update-title { font-weight: bold; color: #333; margin-bottom: 8px; }
        .update-meta { font-size: 0.9em; color: #666; margin-bottom: 10px; }
        .update-content { line-height: 1.6; white-space: pre-line; }
        .stats { display: flex; gap: 20px; margin: 20px 0; }
        .stat-box { background: white; padding: 20px; border-radius: 8px; text-align: center; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
        .stat-count { font-size: 2em; color: #667eea; }
        .error { color: #d32f2f; background: #ffebee; padding: 10px; border-radius: 4px; margin: 10px 0; }
        .likely-update { border-left-color: #4caf50; }
        footer { text-align: center; margin-top: 40px; color: #666; }
"""


def render_html_report(results: Sequence[CompetitorResult], *, generated_at: datetime) -> str:
    generated = escape(generated_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip())
    report_date = escape(generated_at.strftime("%Y-%m-%d"))
    names = escape(", ".join(result.competitor for result in results))
    stats = "".join(_render_stat_box(result) for result in results)
    sections = "".join(_render_section(result) for result in results)
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Competitor Analysis Report - {report_date}</title>
    <style>{_STYLES}    </style>
</head>
<body>
    <div class="header">
        <h1>Competitor Analysis Report</h1>
        <p>Generated on {generated}</p>
        <p>Analyzing: {names}</p>
    </div>

    <div class="stats">{stats}
    </div>
{sections}
    <footer>
        <p>Competitor Analysis Tool &bull; Generated automatically</p>
    </footer>
</body>
</html>
"""


def _render_stat_box(result: CompetitorResult) -> str:
    return f"""
        <div class="stat-box">
            <h3>{escape(result.competitor)}</h3>
            <div class="stat-count">{result.item_count}</div>
            <div>Updates Found</div>
        </div>"""


def _render_section(result: CompetitorResult) -> str:
    parts = [
        '\n    <div class="competitor-section">',
        f'        <h2 class="competitor-title">{escape(result.competitor)}</h2>',
        f'        <p><strong>Source:</strong> <a href="{escape(result.url)}" target="_blank">'
        f"{escape(result.url)}</a></p>",
        f"        <p><strong>Scraped:</strong> {escape(result.scraped_at.isoformat())}</p>",
    ]
    if result.error:
        parts.append(f'        <div class="error">Error: {escape(result.error)}</div>')

    if result.items:
        parts.extend(_render_item(item) for item in result.items[:MAX_ITEMS_PER_COMPETITOR])
    else:
        parts.append("        <p>No content found</p>")

    remaining = result.item_count - MAX_ITEMS_PER_COMPETITOR
    if remaining > 0:
        parts.append(f"        <p><em>... and {remaining} more items</em></p>")

    parts.append("    </div>")
    return "\n".join(parts)


def _render_item(item: UpdateItem) -> str:
    css_class = "update-item likely-update" if item.is_likely_update else "update-item"
    meta: list[str] = []
    if item.extracted_date:
        meta.append(escape(item.extracted_date))
    if item.is_likely_update:
        meta.append("Likely Update")
    meta.append(f"{item.content_length} characters")
    meta_line = " &bull; ".join(meta)
    return f"""        <div class="{css_class}">
            <div class="update-title">{escape(item.title)}</div>
            <div class="update-meta">{meta_line}</div>
            <div class="update-content">{escape(item.content)}</div>
        </div>"""
