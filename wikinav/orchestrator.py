"""Assembly of per-topic sidebars into the site navigation tree."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .config import WikiNavConfig
from .logging import get_logger, topic_logger
from .models import NavGroup, TopicConfig
from .scanner import NavigationError, TopicScanner
from .sidebar import TopicSidebarBuilder

_LOGGER = get_logger("orchestrator")

OUTPUT_FORMATS = ("json", "yaml")


@dataclass
class NavigationResult:
    """Outcome of a navigation build."""

    groups: Dict[str, NavGroup] = field(default_factory=dict)
    topics: List[TopicConfig] = field(default_factory=list)
    empty_topics: List[str] = field(default_factory=list)

    def sidebar(self) -> Dict[str, List[Dict[str, Any]]]:
        """Return the renderer sidebar mapping ``{"/<topic>/": [group]}``."""
        return {sidebar_key(path): [group.to_dict()] for path, group in self.groups.items()}


def sidebar_key(topic_path: str) -> str:
    return f"/{topic_path}/"


class NavigationBuilder:
    """Builds every configured topic and collects the results."""

    def __init__(self, topic_builder: TopicSidebarBuilder | None = None) -> None:
        self._topic_builder = topic_builder

    def build(
        self,
        config: WikiNavConfig,
        *,
        root: Path | None = None,
        strict: bool | None = None,
    ) -> NavigationResult:
        """Build sidebar groups for all topics in ``config``.

        A missing topic directory aborts the build with
        :class:`~wikinav.scanner.TopicNotFoundError`. Topics that produce no
        entries are reported in ``empty_topics``; in strict mode they raise
        :class:`~wikinav.scanner.NavigationError` instead.
        """
        docs_root = (root or config.root).expanduser().resolve()
        topic_builder = self._topic_builder or TopicSidebarBuilder(
            TopicScanner(extension=config.extension)
        )
        strict_mode = config.strict if strict is None else strict

        if not config.topics:
            _LOGGER.warning("No topics configured; navigation will be empty")

        result = NavigationResult(topics=list(config.topics))
        for topic in config.topics:
            group = topic_builder.build(docs_root, topic)
            result.groups[topic.path] = group
            if not group.items:
                topic_logger(_LOGGER, topic.path).warning("produced no sidebar entries")
                result.empty_topics.append(topic.path)

        if strict_mode and result.empty_topics:
            raise NavigationError(
                "Topics produced no sidebar entries: " + ", ".join(result.empty_topics)
            )

        _LOGGER.info(
            "Built navigation for %d topic(s) under %s", len(result.groups), docs_root
        )
        return result


def build_nav_menu(
    result: NavigationResult,
    sections: Dict[str, str] | None = None,
    *,
    extension: str = ".md",
) -> List[Dict[str, Any]]:
    """Group topics by their top-level directory into a navbar menu.

    Each item links to the first entry of its topic with the extension
    removed. Topics without entries are left out.
    """
    sections = sections or {}
    menu: Dict[str, List[Dict[str, str]]] = {}
    for topic in result.topics:
        group = result.groups.get(topic.path)
        if group is None or not group.items:
            continue
        section = topic.path.split("/", 1)[0]
        link = _strip_extension(group.items[0].link, extension)
        menu.setdefault(section, []).append({"text": topic.label, "link": link})

    return [
        {"text": sections.get(section) or _title_case(section), "items": items}
        for section, items in menu.items()
    ]


def _strip_extension(link: str, extension: str) -> str:
    if extension and link.endswith(extension):
        return link[: -len(extension)]
    return link


def _title_case(segment: str) -> str:
    return " ".join(part.capitalize() for part in segment.replace("_", "-").split("-") if part)


def serialize(payload: Any, output_format: str = "json") -> str:
    """Render ``payload`` deterministically as JSON or YAML."""
    if output_format == "json":
        return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    if output_format == "yaml":
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unsupported output format: {output_format}")


def format_for_path(path: Path, default: str = "json") -> str:
    suffix = path.suffix.lower()
    if suffix in {".yml", ".yaml"}:
        return "yaml"
    if suffix == ".json":
        return "json"
    return default


def write_output(payload: Any, out_path: Path, output_format: Optional[str] = None) -> Path:
    """Write ``payload`` to ``out_path``, creating parent directories."""
    fmt = output_format or format_for_path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(serialize(payload, fmt), encoding="utf-8")
    _LOGGER.info("Wrote navigation to %s", out_path)
    return out_path


__all__ = [
    "NavigationBuilder",
    "NavigationResult",
    "OUTPUT_FORMATS",
    "build_nav_menu",
    "format_for_path",
    "serialize",
    "sidebar_key",
    "write_output",
]
