# site_indexer/report/json_report.py

"""
JSON failure report for SiteIndexer.

Serializes the pages that could not be crawled into ``failed-urls.json``.
"""
import json
from pathlib import Path
from typing import Iterable

from site_indexer.crawler.models import FailureRecord
from site_indexer.utils import utc_timestamp


def render_failures(failures: Iterable[FailureRecord], output_path: Path | str) -> Path:
    """
    Write the failure report to *output_path*.

    :param failures: failed pages, in the order they were recorded
    :param output_path: path of the JSON file
    :return: Path of the written file

    Shape::

        {"totalFailed": 1,
         "timestamp": "2024-01-01T00:00:00.000Z",
         "failedPages": [{"url": ..., "reason": ..., "referrer": ...}]}
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    records = [failure.as_dict() for failure in failures]
    data = {
        "totalFailed": len(records),
        "timestamp": utc_timestamp(),
        "failedPages": records,
    }

    with output.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
