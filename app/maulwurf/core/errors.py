"""Error taxonomy for maulwurf operations.

Every failure an operation reports to its caller is a MaulwurfError
subclass. The ``kind`` attribute names the failure class independently
of the Python class name, so a front end can branch on it after the
error has been serialised.
"""


class MaulwurfError(Exception):
    """Base exception for all operation errors."""

    kind = "Error"

    def to_dict(self) -> dict[str, str]:
        """Serialize to dictionary for the dispatch protocol.

        Returns:
            Dictionary with the error kind and its readable message.
        """
        return {"kind": self.kind, "message": str(self)}


class PathNotFoundError(MaulwurfError):
    """Raised when a requested path does not exist."""

    kind = "NotFound"


class NotADirectoryPathError(MaulwurfError):
    """Raised when a path exists but is not a directory."""

    kind = "NotADirectory"


class StorageIOError(MaulwurfError):
    """Raised when the OS refuses an open, read or write."""

    kind = "IoFailure"


class SettingsSerializationError(MaulwurfError):
    """Raised when the settings file cannot be encoded or decoded."""

    kind = "SerializationFailure"


class LockUnavailableError(MaulwurfError):
    """Raised when a state lock cannot be acquired in time."""

    kind = "LockUnavailable"


class UnknownOperationError(MaulwurfError):
    """Raised when dispatch is asked for an operation that doesn't exist."""

    kind = "UnknownOperation"


class InvalidArgumentsError(MaulwurfError):
    """Raised when dispatch arguments don't fit the operation."""

    kind = "InvalidArguments"
