"""Exceptions related to storage operations.

This module provides custom exceptions for errors raised by the key-value
store backends and the JSON filesystem helper they sit on.
"""


class StoreError(Exception):
    """Base exception for all storage-related errors."""

    pass


class StoreReadError(StoreError):
    """Exception raised when a value cannot be read from the store."""

    def __init__(self, message: str, key: str | None = None) -> None:
        """Initialize the exception with the key that failed.

        Args:
            message: The error message
            key: Store key whose value could not be read
        """
        self.key = key
        self.message = f"{message}" + (f" Key: {key}" if key else "")
        super().__init__(self.message)


class StoreWriteError(StoreError):
    """Exception raised when a value cannot be written to the store."""

    def __init__(self, message: str, key: str | None = None) -> None:
        """Initialize the exception with the key that failed.

        Args:
            message: The error message
            key: Store key whose value could not be written
        """
        self.key = key
        self.message = f"{message}" + (f" Key: {key}" if key else "")
        super().__init__(self.message)


class FileReadError(StoreError):
    """Exception raised when reading from a file fails."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        *args: object,
        **kwargs: object,
    ) -> None:
        """Initialize the exception with context information.

        Args:
            message: The error message
            file_path: Path to the file that caused the error
            *args: Additional positional arguments passed to parent class
            **kwargs: Additional keyword arguments passed to parent class
        """
        self.file_path = file_path
        self.message = f"{message}" + (f" File: {file_path}" if file_path else "")
        super().__init__(self.message, *args, **kwargs)


class FileWriteError(StoreError):
    """Exception raised when writing to a file fails."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        *args: object,
        **kwargs: object,
    ) -> None:
        """Initialize the exception with context information.

        Args:
            message: The error message
            file_path: Path to the file that caused the error
            *args: Additional positional arguments passed to parent class
            **kwargs: Additional keyword arguments passed to parent class
        """
        self.file_path = file_path
        self.message = f"{message}" + (f" File: {file_path}" if file_path else "")
        super().__init__(self.message, *args, **kwargs)


class DirectoryCreationError(StoreError):
    """Exception raised when creating a directory fails."""

    def __init__(self, message: str, dir_path: str | None = None) -> None:
        """Initialize the exception with context information.

        Args:
            message: The error message
            dir_path: Path to the directory that caused the error
        """
        self.dir_path = dir_path
        self.message = f"{message}" + (f" Directory: {dir_path}" if dir_path else "")
        super().__init__(self.message)
