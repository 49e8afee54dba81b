# untitled-dm — session launcher menu — MIT Licensed
"""
Defines all custom exception classes used by untitled-dm.

Exception Hierarchy:
- UntitledDMError
    ├── ConfigDecodeError
    ├── MalformedArgumentError
    └── RunError

`ConfigDecodeError` and `MalformedArgumentError` are startup-fatal: they are
raised before the menu is shown and turned into a non-zero exit code by the
entry point. `RunError` describes a command that could not be started or
exited non-zero; the menu shows it and keeps going unless quit-on-error is set.
"""
from pathlib import Path


class UntitledDMError(Exception):
    """Base exception for untitled-dm."""


class ConfigDecodeError(UntitledDMError):
    """Exception raised when the configuration file exists but cannot be decoded."""

    def __init__(self, path: Path | str, cause: Exception | str):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not decode config file {self.path}: {cause}")


class MalformedArgumentError(UntitledDMError):
    """Exception raised when an argument string has an unterminated quote."""


class RunError(UntitledDMError):
    """Exception raised when the selected command failed to start or run."""

    def __init__(self, error: str, output: str = ""):
        self.error = error
        self.output = output
        super().__init__(error)
