"""Error kinds raised by the query pipeline, each mapped to an exit status."""

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_UNSUPPORTED_PLATFORM = 3
EXIT_DECODE_FAILURE = 4


class ArcTabsError(Exception):
    exit_code = EXIT_FAILURE


class UnsupportedPlatform(ArcTabsError):
    exit_code = EXIT_UNSUPPORTED_PLATFORM


class InvalidArguments(ArcTabsError):
    """Unknown or conflicting command-line flags."""

    exit_code = EXIT_USAGE

    def __init__(self, message: str, show_usage: bool = False):
        super().__init__(message)
        self.show_usage = show_usage


class BridgeExecutionFailure(ArcTabsError):
    """osascript exited non-zero or could not be started.

    ``exit_code`` is the subprocess's own status when it reported one.
    """

    def __init__(self, message: str, status: int = EXIT_FAILURE):
        super().__init__(message)
        # signal-killed children report negative statuses
        self.exit_code = status if status and status > 0 else EXIT_FAILURE


class OutputDecodeFailure(ArcTabsError):
    exit_code = EXIT_DECODE_FAILURE

    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw
