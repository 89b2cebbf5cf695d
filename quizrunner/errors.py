"""Runner error types."""


class RunnerError(Exception):
    """Base class for all runner failures."""


class DiscoveryError(RunnerError):
    """Question-set directory is missing or unreadable."""


class ParseError(RunnerError):
    """Question-set file does not have the expected JSON shape."""

    def __init__(self, filename: str, detail: str):
        super().__init__(f"Failed to parse {filename}: {detail}")
        self.filename = filename
        self.detail = detail


class EmptyResultError(RunnerError):
    """No question sets left after discovery and filtering."""


class LaunchError(RunnerError):
    """Browser process could not be started."""


class NavigationError(RunnerError):
    """Page under test could not be resolved or loaded."""


class WaitTimeoutError(RunnerError, TimeoutError):
    """Observable condition did not become true in time."""

    def __init__(self, selector: str, elapsed: float):
        super().__init__(
            f"Timeout waiting for element: {selector} (after {elapsed:.1f}s)"
        )
        self.selector = selector
        self.elapsed = elapsed


class StartScreenHiddenError(RunnerError):
    """Start screen exists but its display style is 'none'."""


class ClickError(RunnerError):
    """Element was expected to be present but clicking it failed."""

    def __init__(self, selector: str, detail: str | None = None):
        message = f"Failed to click element: {selector}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.selector = selector
