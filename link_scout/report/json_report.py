"""
JSON report generation for LinkScout.

Serializes a CrawlSummary to a file.
"""
import json
from dataclasses import asdict
from pathlib import Path

from link_scout.crawler.models import CrawlSummary


def render_json(summary: CrawlSummary, output_path: Path | str) -> Path:
    """
    Save *summary* as JSON at *output_path*.

    :param summary: result of a finished crawl
    :param output_path: path of the JSON file
    :return: Path of the written file

    Example:
    ```python
    from link_scout.report.json_report import render_json
    report_path = render_json(summary, 'reports/links.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = {
        'base_url': summary.base_url,
        'pages_visited': summary.visited,
        'results': [asdict(r) for r in summary.results],
        'broken': [asdict(r) for r in summary.broken],
    }

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
