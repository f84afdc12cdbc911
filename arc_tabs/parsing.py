"""Decode osascript stdout into tab records."""

import json
from typing import List

from .errors import OutputDecodeFailure
from .models import TabRecord

DECODE_ERROR_MESSAGE = "Could not parse osascript output as JSON."


def parse_tabs(raw: str) -> List[TabRecord]:
    text = (raw or "").strip()
    if not text:
        return []

    try:
        data = json.loads(text)
    except ValueError as exc:
        raise OutputDecodeFailure(DECODE_ERROR_MESSAGE, raw) from exc

    if not isinstance(data, list):
        raise OutputDecodeFailure(DECODE_ERROR_MESSAGE, raw)

    tabs: List[TabRecord] = []
    for entry in data:
        if not isinstance(entry, dict):
            raise OutputDecodeFailure(DECODE_ERROR_MESSAGE, raw)
        try:
            tabs.append(TabRecord.from_dict(entry))
        except ValueError as exc:
            raise OutputDecodeFailure(DECODE_ERROR_MESSAGE, raw) from exc
    return tabs
