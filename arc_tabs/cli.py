"""List every open Arc tab (across all windows and spaces) with its URL.

Talks to Arc through Apple's JavaScript for Automation bridge
(`osascript -l JavaScript`). Requires:
- macOS
- Arc installed and running
- the invoking terminal allowed under
  System Settings > Privacy & Security > Automation > Arc
"""

import os
import sys
from typing import List, Optional

from .config import log
from .errors import (
    EXIT_FAILURE,
    EXIT_OK,
    ArcTabsError,
    BridgeExecutionFailure,
    InvalidArguments,
    OutputDecodeFailure,
    UnsupportedPlatform,
)
from .models import RunOptions
from .parsing import parse_tabs
from .query import run_query
from .rendering import render

SUPPORTED_PLATFORM = "darwin"
HELP_FLAGS = ("-h", "--help")

USAGE = """Usage: arc-tabs [--json | --urls-only]

Options:
  --json        Output structured JSON (full metadata for each tab)
  --urls-only   Print only the tab URLs, one per line
  -h, --help    Show this message
"""


def _current_platform() -> str:
    return sys.platform


def ensure_supported_platform() -> None:
    if _current_platform() != SUPPORTED_PLATFORM:
        raise UnsupportedPlatform(
            "This tool only works on macOS because it talks to Arc via AppleScript."
        )


def parse_args(args: List[str]) -> RunOptions:
    """Parse flags (program name already stripped).

    Help anywhere in the vector wins over every other flag, including
    unknown ones.
    """
    options = RunOptions()
    if any(arg in HELP_FLAGS for arg in args):
        options.help = True
        return options

    for arg in args:
        if arg == "--json":
            options.json = True
        elif arg == "--urls-only":
            options.urls_only = True
        else:
            raise InvalidArguments(f"Unknown option: {arg}", show_usage=True)

    if options.json and options.urls_only:
        raise InvalidArguments("Choose either --json or --urls-only, not both.")
    return options


def _print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def _report(exc: ArcTabsError) -> None:
    if isinstance(exc, BridgeExecutionFailure):
        print(f"Failed to query Arc via osascript: {exc}", file=sys.stderr)
    elif isinstance(exc, OutputDecodeFailure):
        print(str(exc), file=sys.stderr)
        print(exc.raw, file=sys.stderr)
    else:
        print(str(exc), file=sys.stderr)
        if isinstance(exc, InvalidArguments) and exc.show_usage:
            print(USAGE, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv
    log("start")
    try:
        # platform first: --help is unavailable off macOS
        ensure_supported_platform()
        options = parse_args(list(argv[1:]))
        if options.help:
            print(USAGE)
            return EXIT_OK

        log(f"mode={options.mode}")
        raw = run_query()
        tabs = parse_tabs(raw)
        log(f"decoded {len(tabs)} tab(s)")
    except ArcTabsError as exc:
        log(f"error: {type(exc).__name__} (exit {exc.exit_code})")
        _report(exc)
        return exc.exit_code

    _print_lines(render(tabs, options.mode))
    return EXIT_OK


def _silence_stdout() -> None:
    # reader closed the pipe; stdout -> devnull so the final flush
    # at interpreter exit cannot raise again
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def run() -> None:
    try:
        status = main(sys.argv)
        sys.stdout.flush()
    except BrokenPipeError:
        _silence_stdout()
        status = EXIT_FAILURE
    raise SystemExit(status)


if __name__ == "__main__":
    run()
