"""
Error types raised by monke.

Every failure the user can act on derives from MonkeError; the CLI entry
point turns any of them into a diagnostic and a non-zero exit status.
"""


class MonkeError(Exception):
    """Base class for all user-facing errors."""


class ValidationError(MonkeError):
    """Invalid command input (empty title, day outside 1..28)."""


class ConfigError(MonkeError):
    """Invalid configuration value."""


class StorageError(MonkeError):
    """The expense store could not be created, opened, queried or written."""


class SchemaMismatchError(StorageError):
    """The existing store was created with an incompatible table layout."""

    def __init__(self) -> None:
        super().__init__(
            "Database schema mismatch. Clear the database with 'monke clear'."
        )
