"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import os
from pathlib import Path

from rule_doc_generator.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def exists(self, path: str) -> bool:
        """Return True if path exists (file or directory)."""
        return Path(path).exists()

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        Path(path).write_text(content, encoding=encoding)

    def join_path(self, *paths: str) -> str:
        """Join path components into a single path string."""
        return str(Path(*paths))

    def relative_to(self, path: str, root: str) -> str:
        """Return path relative to root for display."""
        return os.path.relpath(path, root)
