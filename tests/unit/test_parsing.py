import json

import pytest

from arc_tabs.errors import EXIT_DECODE_FAILURE, OutputDecodeFailure
from arc_tabs.parsing import DECODE_ERROR_MESSAGE, parse_tabs


@pytest.mark.parametrize("raw", ["", "   ", "\n\n", None])
def test_blank_output_is_empty_list(raw):
    assert parse_tabs(raw) == []


def test_parses_records_in_order(sample_tabs):
    tabs = parse_tabs("  " + json.dumps(sample_tabs) + "\n")
    assert [t.url for t in tabs] == [t["url"] for t in sample_tabs]
    assert [t.to_dict() for t in tabs] == sample_tabs


def test_empty_array_is_empty_list():
    assert parse_tabs("[]\n") == []


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "{\"url\": \"https://a.test\"}",
        "[1, 2]",
        "[{\"windowIndex\": 1, \"spaceIndex\": 1, \"tabIndex\": 1}]",
    ],
)
def test_malformed_output_raises_with_raw_payload(raw):
    with pytest.raises(OutputDecodeFailure) as excinfo:
        parse_tabs(raw)
    assert str(excinfo.value) == DECODE_ERROR_MESSAGE
    assert excinfo.value.raw == raw
    assert excinfo.value.exit_code == EXIT_DECODE_FAILURE


def test_one_bad_record_fails_the_whole_payload(sample_tabs):
    bad = dict(sample_tabs[1])
    bad["tabIndex"] = 0
    with pytest.raises(OutputDecodeFailure):
        parse_tabs(json.dumps([sample_tabs[0], bad]))
