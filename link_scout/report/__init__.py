"""link_scout.report: text and JSON reports used by the crawler and the CLI."""

from link_scout.report.json_report import render_json
from link_scout.report.text_report import Reporter, format_result

__all__ = ["Reporter", "format_result", "render_json"]
