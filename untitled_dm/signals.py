# untitled-dm — session launcher menu — MIT Licensed
"""
Flow control signals used to leave the menu loop.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they
bypass `except Exception` blocks on their way out of the event loop.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals.

    These are not errors. They end the session from deep inside the loop.
    """


class QuitSignal(FlowSignal):
    """Raised to signal an immediate exit from the menu."""

    def __init__(self, message: str = "Quit signal received."):
        super().__init__(message)
