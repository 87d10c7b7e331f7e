class StorageError(RuntimeError):
    """The database rejected a write; the transaction was rolled back."""

class BackupFormatError(ValueError):
    """A backup document does not have the expected shape."""
