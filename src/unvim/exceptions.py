"""unvim exception hierarchy.

All public exceptions inherit from UnvimError, giving callers a single
base class to catch when they want to handle any unvim-specific failure
without swallowing unrelated errors.

Installation discovery never raises: missing paths and unknown editors
degrade to empty results or synthesized records.
"""


class UnvimError(Exception):
    """Base exception for all unvim errors."""


class EditorCommandError(UnvimError):
    """Raised when an external editor command cannot be started.

    Covers a missing remote-control executable (``nvr``), permission
    failures on the binary, and other OS-level spawn errors. A command
    that starts and exits non-zero is not an error.
    """


class ConfigError(UnvimError):
    """Raised when a configuration value cannot be interpreted."""
