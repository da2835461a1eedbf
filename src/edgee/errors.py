"""Exception hierarchy for the Edgee client."""


class EdgeeError(Exception):
    """Base class for all errors raised by this library."""


class ConfigurationError(EdgeeError):
    """Client configuration is missing or invalid."""


class APIError(EdgeeError):
    """The API answered with a non-2xx status code."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error {status_code}: {body}")


class MaxIterationsError(EdgeeError):
    """The tool loop ran out of rounds before the model produced a final answer."""

    def __init__(self, max_iterations: int):
        self.max_iterations = max_iterations
        super().__init__(f"Max tool iterations ({max_iterations}) reached")


class ToolError(EdgeeError):
    """Base class for failures while executing a single tool call."""


class ArgumentParseError(ToolError):
    """Raw tool arguments are not valid JSON."""


class ArgumentValidationError(ToolError):
    """Tool arguments do not match the tool's schema."""


class ToolExecutionError(ToolError):
    """The tool handler raised an exception."""
