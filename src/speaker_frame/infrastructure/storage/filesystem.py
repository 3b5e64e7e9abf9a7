"""Filesystem storage helpers for the speaker frame.

This module provides utilities for reading and writing JSON documents,
used by the file-backed key-value store and the configuration loader.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from ..exceptions.storage_exceptions import (
    DirectoryCreationError,
    FileReadError,
    FileWriteError,
)


class FilesystemStorage:
    """Filesystem storage implementation for reading and writing JSON files."""

    @staticmethod
    def read_json(file_path: str | Path) -> Any:
        """Read JSON data from a file.

        Args:
            file_path: Path to the JSON file

        Returns
        -------
            The parsed JSON data

        Raises
        ------
            FileReadError: If the file cannot be read or parsed
        """
        try:
            file_path = Path(file_path)
            with open(file_path, encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise FileReadError(
                f"Failed to parse JSON: {e}", file_path=str(file_path)
            ) from e
        except OSError as e:
            raise FileReadError(
                f"Failed to read file: {e}", file_path=str(file_path)
            ) from e

    @staticmethod
    def write_json(file_path: str | Path, data: Any, indent: int = 2) -> None:
        """Write data as JSON to a file.

        The document is written to a uniquely named temporary file in the
        same directory and then moved into place, so readers never observe a
        half-written file and concurrent writers never share a temporary file.

        Args:
            file_path: Path where the JSON file will be written
            data: The data to serialize to JSON
            indent: Number of spaces for indentation (default: 2)

        Raises
        ------
            FileWriteError: If the file cannot be written
        """
        file_path = Path(file_path)
        tmp_path: str | None = None
        try:
            os.makedirs(file_path.parent, exist_ok=True)

            fd, tmp_path = tempfile.mkstemp(
                dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=indent, ensure_ascii=False)
            os.replace(tmp_path, file_path)
            tmp_path = None
        except (OSError, TypeError, ValueError) as e:
            raise FileWriteError(
                f"Failed to write JSON file: {e}", file_path=str(file_path)
            ) from e
        finally:
            # Only left set when the write did not reach os.replace
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

    @staticmethod
    def ensure_directory(directory_path: str | Path) -> Path:
        """Ensure a directory exists, creating it if necessary.

        Args:
            directory_path: Path to the directory to create

        Returns
        -------
            Path object for the created/existing directory

        Raises
        ------
            DirectoryCreationError: If the directory cannot be created
        """
        try:
            directory_path = Path(directory_path)
            os.makedirs(directory_path, exist_ok=True)
            return directory_path
        except OSError as e:
            raise DirectoryCreationError(
                f"Failed to create directory: {e}", dir_path=str(directory_path)
            ) from e

    @staticmethod
    def file_exists(file_path: str | Path) -> bool:
        """Check if a file exists.

        Args:
            file_path: Path to the file to check

        Returns
        -------
            True if the file exists, False otherwise
        """
        return Path(file_path).is_file()
