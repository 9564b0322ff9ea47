"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables
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
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def format_demos_table(demos: List[Dict[str, Any]]) -> str:
    """Format demos as a Rich table."""
    if not demos:
        return "No demos found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Title", style="green", no_wrap=True)
    table.add_column("Category", style="blue", no_wrap=True)
    table.add_column("Summary")

    for demo in demos:
        table.add_row(
            str(demo.get("name", "N/A")),
            str(demo.get("title", "N/A")),
            str(demo.get("category", "N/A")),
            str(demo.get("summary", "")),
        )

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get()


def format_demos_list(demos: List[Dict[str, Any]]) -> str:
    """Format demos as a detailed list."""
    if not demos:
        return "No demos found."

    blocks = []
    for demo in demos:
        lines = [
            f"Name:     {demo.get('name', 'N/A')}",
            f"Title:    {demo.get('title', 'N/A')}",
            f"Category: {demo.get('category', 'N/A')}",
            f"Summary:  {demo.get('summary', '')}",
        ]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
