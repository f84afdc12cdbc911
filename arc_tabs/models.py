"""Data models for Arc tab listings."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping


def _as_index(obj: Mapping[str, Any], key: str) -> int:
    value = obj.get(key)
    # bool is an int subclass; JSON true/false is not an index
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"{key} must be positive, got {value}")
    return value


def _as_text(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class TabRecord:
    window_index: int
    window_name: str
    space_index: int
    space_title: str
    tab_index: int
    tab_title: str
    location: str
    url: str

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> "TabRecord":
        url = _as_text(obj, "url")
        if not url:
            raise ValueError("url is required")
        return cls(
            window_index=_as_index(obj, "windowIndex"),
            window_name=_as_text(obj, "windowName"),
            space_index=_as_index(obj, "spaceIndex"),
            space_title=_as_text(obj, "spaceTitle"),
            tab_index=_as_index(obj, "tabIndex"),
            tab_title=_as_text(obj, "tabTitle"),
            location=_as_text(obj, "location"),
            url=url,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "windowIndex": self.window_index,
            "windowName": self.window_name,
            "spaceIndex": self.space_index,
            "spaceTitle": self.space_title,
            "tabIndex": self.tab_index,
            "tabTitle": self.tab_title,
            "location": self.location,
            "url": self.url,
        }


@dataclass
class RunOptions:
    json: bool = False
    urls_only: bool = False
    help: bool = False

    @property
    def mode(self) -> str:
        if self.json:
            return "json"
        if self.urls_only:
            return "urls"
        return "grouped"
