"""Per-topic sidebar construction.

Each topic directory is turned into an ordered list of sidebar entries. The
work is split into a classification step that tags every document with a
:class:`~wikinav.models.DocumentRole` and an ordering step that sorts by tag
and then by file name, so both halves can be exercised on their own.

Topic directories (learning roadmaps) order their documents as::

    <...roadmap...>.md, module-*.md (ascending), everything else (ascending)

Collection directories (curated lists) put ``README.md`` first and sort the
rest by name.

When several names contain ``roadmap`` the lowest one in name order is the
primary document; the others are sorted with the remaining documents.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .logging import get_logger, topic_logger
from .models import Document, DocumentRole, NavEntry, NavGroup, TopicConfig, TopicRole
from .scanner import TopicScanner
from .titles import extract_title, fallback_label

_LOGGER = get_logger("sidebar")

PRIMARY_MARKER = "roadmap"
MODULE_PREFIX = "module-"
README_STEM = "README"
ROADMAP_LABEL = "Roadmap"

_ROLE_RANK: Dict[DocumentRole, int] = {
    DocumentRole.PRIMARY: 0,
    DocumentRole.README: 0,
    DocumentRole.MODULE: 1,
    DocumentRole.EXTRA: 2,
    DocumentRole.OTHER: 2,
}


def find_primary(names: Sequence[str]) -> Optional[str]:
    """Return the first name containing ``roadmap``, in the given order."""
    for name in names:
        if PRIMARY_MARKER in name:
            return name
    return None


def classify_topic_document(name: str, primary: Optional[str]) -> DocumentRole:
    """Tag a document in a topic-role directory."""
    if primary is not None and name == primary:
        return DocumentRole.PRIMARY
    if name.startswith(MODULE_PREFIX):
        return DocumentRole.MODULE
    return DocumentRole.EXTRA


def classify_collection_document(name: str, extension: str = ".md") -> DocumentRole:
    """Tag a document in a collection-role directory."""
    if name == f"{README_STEM}{extension}":
        return DocumentRole.README
    return DocumentRole.OTHER


def classify_documents(
    documents: Sequence[Document], role: TopicRole, extension: str = ".md"
) -> List[Tuple[Document, DocumentRole]]:
    """Pair every document with its role tag, preserving input order."""
    if role is TopicRole.COLLECTION:
        return [(doc, classify_collection_document(doc.name, extension)) for doc in documents]
    primary = find_primary(sorted(doc.name for doc in documents))
    return [(doc, classify_topic_document(doc.name, primary)) for doc in documents]


def order_documents(
    tagged: Sequence[Tuple[Document, DocumentRole]],
) -> List[Tuple[Document, DocumentRole]]:
    """Sort tagged documents: leading document, modules, then the rest by name."""
    return sorted(tagged, key=lambda pair: (_ROLE_RANK[pair[1]], pair[0].name))


def build_link(topic_path: str, name: str) -> str:
    return f"/{topic_path}/{name}"


def _label_for(
    document: Document, role: DocumentRole, topic_path: str, extension: str
) -> str:
    title = extract_title(document.content) if document.content is not None else None
    if title:
        return title
    if role is DocumentRole.PRIMARY:
        return ROADMAP_LABEL
    if role is DocumentRole.README:
        return topic_path
    return fallback_label(document.name, extension)


def build_items(
    topic_path: str,
    documents: Sequence[Document],
    role: TopicRole,
    extension: str = ".md",
) -> List[NavEntry]:
    """Return the ordered sidebar entries for one topic's documents."""
    ordered = order_documents(classify_documents(documents, role, extension))
    return [
        NavEntry(
            text=_label_for(document, doc_role, topic_path, extension),
            link=build_link(topic_path, document.name),
        )
        for document, doc_role in ordered
    ]


def build_topic_items(
    topic_path: str, documents: Sequence[Document], extension: str = ".md"
) -> List[NavEntry]:
    return build_items(topic_path, documents, TopicRole.TOPIC, extension)


def build_collection_items(
    topic_path: str, documents: Sequence[Document], extension: str = ".md"
) -> List[NavEntry]:
    return build_items(topic_path, documents, TopicRole.COLLECTION, extension)


class TopicSidebarBuilder:
    """Scans one topic directory and produces its sidebar group."""

    def __init__(self, scanner: TopicScanner | None = None) -> None:
        self.scanner = scanner or TopicScanner()

    @property
    def extension(self) -> str:
        return self.scanner.extension

    def build(self, root: Path, topic: TopicConfig) -> NavGroup:
        """Return the group for ``topic``.

        Raises :class:`~wikinav.scanner.TopicNotFoundError` when the topic
        directory does not exist.
        """
        documents = self.scanner.scan(root, topic.path)
        items = build_items(topic.path, documents, topic.role, self.extension)
        topic_logger(_LOGGER, topic.path).debug(
            "%s role, %d entries", topic.role.value, len(items)
        )
        return NavGroup(text=topic.label, items=items)


__all__ = [
    "TopicSidebarBuilder",
    "build_collection_items",
    "build_items",
    "build_link",
    "build_topic_items",
    "classify_collection_document",
    "classify_documents",
    "classify_topic_document",
    "find_primary",
    "order_documents",
]
