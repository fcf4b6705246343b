"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for variants, reports and substitutability outcomes
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "variants" in data:
        return _render_table(
            ["Discriminator", "Description"],
            [[v["discriminator"], v.get("description", "")] for v in data["variants"]],
        )
    elif isinstance(data, dict) and "outcomes" in data:
        return _render_table(
            ["Variant", "Result", "Error"],
            [
                [name, "ok" if o["succeeded"] else o.get("error_type") or "failed", o.get("error") or ""]
                for name, o in data["outcomes"].items()
            ],
        )
    elif isinstance(data, dict) and "rate" in data:
        return _render_table(["Variant", "Rate"], [[data.get("label") or "", data["rate"]]])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "variants" in data:
        return "\n".join(
            f"{v['discriminator']}: {v.get('description', '')}" for v in data["variants"]
        ) or "No variants registered."
    elif isinstance(data, dict):
        return _format_mapping(data)
    else:
        return json.dumps(data, indent=2, default=str)


def _format_mapping(data: Dict[str, Any], indent: int = 0) -> str:
    lines = []
    prefix = "  " * indent
    for key, value in data.items():
        if isinstance(value, dict):
            lines.append(f"{prefix}{key}:")
            lines.append(_format_mapping(value, indent + 1))
        else:
            lines.append(f"{prefix}{key}: {value}")
    return "\n".join(line for line in lines if line)


def _render_table(headers: List[str], rows: List[List[str]]) -> str:
    """Render rows as a Rich table and return it as plain text."""
    if not rows:
        return "No data to display."

    table = Table(show_header=True, header_style="bold magenta")
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*(str(cell) for cell in row))

    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
