"""
CSV rendering for downloadable reports.
"""
import csv
from datetime import date, datetime
from typing import Any, Dict, List

import pandas as pd


def _iso(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def records_to_csv(records: List[Dict[str, Any]]) -> str:
    """
    Render records as CSV text.

    The header is the comma-joined keys of the first record; every data
    value is double-quoted so embedded commas survive. Missing values are
    written as empty strings. Dates and timestamps are written in ISO-8601.
    """
    if not records:
        return ""

    columns = list(records[0].keys())
    rows = [{key: _iso(value) for key, value in record.items()} for record in records]
    # object dtype keeps ints with gaps from turning into floats
    df = pd.DataFrame(rows, columns=columns, dtype=object)
    body = df.to_csv(
        header=False,
        index=False,
        quoting=csv.QUOTE_ALL,
        na_rep="",
        lineterminator="\n",
    )
    return ",".join(columns) + "\n" + body


def report_filename(report_type: str, day: date) -> str:
    """File name offered to the browser, e.g. ``attendance-2024-06-15.csv``."""
    return f"{report_type}-{day.isoformat()}.csv"
