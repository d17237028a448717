"""Render incoming request metadata as a plain-text block for the debug routes."""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from starlette.requests import Request


def _multi_map(items) -> Dict[str, List[str]]:
    grouped: Dict[str, List[str]] = {}
    for key, value in items:
        grouped.setdefault(key, []).append(value)
    return grouped


def request_details(request: Request) -> Dict[str, Dict[str, List[str]]]:
    """Group query parameters and headers by key, keeping the order they arrived in."""
    return {
        "parameter": _multi_map(request.query_params.multi_items()),
        "header": _multi_map(request.headers.items()),
    }


def format_request_details(categories: Mapping[str, Mapping[str, Sequence[str]]]) -> str:
    """
    Format each category as a `category:` line followed by one `key: value`
    line per value. Categories are separated by a blank line; an empty
    category keeps its heading.
    """
    blocks = []
    for category, values in categories.items():
        lines = [f"{category}:"]
        for key, entries in values.items():
            lines.extend(f"{key}: {entry}" for entry in entries)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
