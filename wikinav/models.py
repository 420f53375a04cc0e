"""Core data models shared across wikinav components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TopicRole(str, Enum):
    """How a topic directory orders its documents."""

    TOPIC = "topic"
    COLLECTION = "collection"


class DocumentRole(str, Enum):
    """Classification tag assigned to a document within its topic."""

    PRIMARY = "primary"
    MODULE = "module"
    EXTRA = "extra"
    README = "readme"
    OTHER = "other"


@dataclass(frozen=True)
class TopicConfig:
    """A configured topic: directory path, sidebar label and ordering role."""

    path: str
    label: str
    role: TopicRole = TopicRole.TOPIC


@dataclass(frozen=True)
class Document:
    """Read-only snapshot of a document taken at scan time.

    ``content`` is ``None`` when the file was listed but could not be read.
    """

    name: str
    content: Optional[str] = None


@dataclass(frozen=True)
class NavEntry:
    """One clickable sidebar item."""

    text: str
    link: str

    def to_dict(self) -> Dict[str, str]:
        return {"text": self.text, "link": self.link}


@dataclass
class NavGroup:
    """A collapsible sidebar group holding a topic's entries."""

    text: str
    items: List[NavEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "items": [item.to_dict() for item in self.items]}
