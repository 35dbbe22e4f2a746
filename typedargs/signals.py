# typedargs — typed command-line argument engine — MIT Licensed
"""
Defines flow control signals used internally by typedargs.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they bypass
`except Exception` / `except ParserError` blocks inside the engine and are only
caught where the flow is meant to end.

Signals:
- HelpSignal: `-h` / `--help` was seen; stop scanning and report help.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in typedargs.

    These are not errors. They end a parse early with a non-failure outcome.
    """


class HelpSignal(FlowSignal):
    """Raised to stop scanning because help was requested."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
