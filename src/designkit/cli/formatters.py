"""
CLI formatting functions.

Supports json, yaml and table output; tables are rendered with Rich.
"""

import io
import json
from typing import Any, Dict, List

import yaml


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    if format_type == "table":
        return format_table_output(data)
    return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def format_table_output(data: Any) -> str:
    """Format a flat dictionary, or a list of them, as a table."""
    if isinstance(data, dict):
        rows: List[Dict[str, Any]] = [{"field": key, "value": value} for key, value in data.items()]
    elif isinstance(data, list) and all(isinstance(item, dict) for item in data):
        rows = data
    else:
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)

    if not rows:
        return "No data."

    from rich.console import Console
    from rich.table import Table

    table = Table(show_header=True, header_style="bold magenta")
    columns = list(rows[0].keys())
    for column in columns:
        table.add_column(str(column))
    for row in rows:
        table.add_row(*(_cell(row.get(column)) for column in columns))

    buffer = io.StringIO()
    Console(file=buffer, force_terminal=False, width=120).print(table)
    return buffer.getvalue().rstrip("\n")


def _cell(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str, ensure_ascii=False)
    return str(value)
