"""Topic directory scanning."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from .logging import get_logger, topic_logger
from .models import Document

_LOGGER = get_logger("scanner")


class NavigationError(RuntimeError):
    """Raised when the navigation tree cannot be built."""


class TopicNotFoundError(NavigationError, FileNotFoundError):
    """Raised when a configured topic path has no directory on disk."""


def _read_document(path: Path, log: logging.LoggerAdapter) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Could not read %s, falling back to file name label: %s", path, exc)
        return None


class TopicScanner:
    """Lists a topic directory and snapshots its documents."""

    def __init__(self, extension: str = ".md") -> None:
        self.extension = extension

    def list_names(self, root: Path, topic_path: str) -> List[str]:
        """Return the sorted file names in ``topic_path`` with the recognized extension."""
        directory = root / topic_path
        log = topic_logger(_LOGGER, topic_path)
        if not directory.exists():
            raise TopicNotFoundError(f"Topic directory not found: {directory}")
        if not directory.is_dir():
            raise TopicNotFoundError(f"Topic path is not a directory: {directory}")

        try:
            entries = os.listdir(directory)
        except OSError as exc:
            log.warning("Could not list topic directory %s: %s", directory, exc)
            return []

        names = [
            name
            for name in entries
            if name.endswith(self.extension) and (directory / name).is_file()
        ]
        # Sorting pins "first roadmap document" to the same file on every platform.
        return sorted(names)

    def scan(self, root: Path, topic_path: str) -> List[Document]:
        """Return document snapshots for one topic, in sorted name order."""
        directory = root / topic_path
        log = topic_logger(_LOGGER, topic_path)
        documents = [
            Document(name=name, content=_read_document(directory / name, log))
            for name in self.list_names(root, topic_path)
        ]
        log.debug("Scanned %d document(s) in %s", len(documents), directory)
        return documents


__all__ = ["NavigationError", "TopicNotFoundError", "TopicScanner"]
