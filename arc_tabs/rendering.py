"""Render tab records as a grouped listing, JSON or bare URLs."""

import json
from typing import Iterable, List, Sequence

from .models import TabRecord

NO_TABS_MESSAGE = "No Arc tabs are currently open."
SEGMENT_SEPARATOR = " . "
DETAIL_INDENT = "    "


def quoted_suffix(value: str) -> str:
    return f' ("{value}")' if value else ""


def _pad(num: int) -> str:
    return str(num).zfill(2)


def describe_position(tab: TabRecord) -> str:
    parts = [
        f"Window {tab.window_index}{quoted_suffix(tab.window_name)}",
        f"Space {tab.space_index}{quoted_suffix(tab.space_title)}",
        f"Tab {tab.tab_index}{quoted_suffix(tab.tab_title)}",
    ]
    if tab.location:
        parts.append(f"Location: {tab.location}")
    return SEGMENT_SEPARATOR.join(parts)


def render_grouped(tabs: Sequence[TabRecord]) -> List[str]:
    if not tabs:
        return [NO_TABS_MESSAGE]

    lines: List[str] = []
    for idx, tab in enumerate(tabs, start=1):
        lines.append(f"{_pad(idx)}. {tab.url}")
        lines.append(f"{DETAIL_INDENT}{describe_position(tab)}")
    return lines


def render_json(tabs: Iterable[TabRecord]) -> List[str]:
    payload = [tab.to_dict() for tab in tabs]
    return [json.dumps(payload, indent=2, ensure_ascii=False)]


def render_urls(tabs: Iterable[TabRecord]) -> List[str]:
    return [tab.url for tab in tabs]


def printable(text: str) -> str:
    """Swap lone UTF-16 surrogates (titles cut mid-emoji) for U+FFFD."""
    return text.encode("utf-8", "surrogatepass").decode("utf-8", "replace")


RENDERERS = {
    "grouped": render_grouped,
    "json": render_json,
    "urls": render_urls,
}


def render(tabs: Sequence[TabRecord], mode: str) -> List[str]:
    return [printable(line) for line in RENDERERS[mode](tabs)]
