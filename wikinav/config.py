"""Configuration loading for wikinav (.wikinav.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .models import TopicConfig, TopicRole

CONFIG_FILENAME = ".wikinav.yml"
DEFAULT_EXTENSION = ".md"
COLLECTION_MARKER = "awesome-"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class WikiNavConfig:
    """Represents the settings defined in .wikinav.yml."""

    root: Path
    extension: str = DEFAULT_EXTENSION
    strict: bool = False
    topics: List[TopicConfig] = field(default_factory=list)
    sections: Dict[str, str] = field(default_factory=dict)


def infer_role(topic_path: str) -> TopicRole:
    """Default role for a topic whose configuration does not name one."""
    if COLLECTION_MARKER in topic_path:
        return TopicRole.COLLECTION
    return TopicRole.TOPIC


def load_config(config_path: Path) -> WikiNavConfig:
    """Load configuration from disk.

    ``config_path`` may be the docs root or the config file itself. A missing
    file yields the defaults with no topics configured.
    """
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return WikiNavConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")
    return config_from_mapping(data, root=root)


def config_from_mapping(data: Dict[str, Any], *, root: Path) -> WikiNavConfig:
    """Build a config from already-parsed data."""
    extension = _as_str(data.get("extension")) or DEFAULT_EXTENSION
    if not extension.startswith("."):
        extension = f".{extension}"

    strict = _as_bool(data.get("strict")) or False

    sections = {
        str(key).strip("/"): str(value)
        for key, value in _as_dict(data.get("sections")).items()
        if value is not None
    }

    topics_data = data.get("topics")
    if topics_data is None:
        topics_data = {}
    if not isinstance(topics_data, dict):
        raise ConfigError("'topics' must be a mapping of topic path to label")

    topics: List[TopicConfig] = []
    seen: set[str] = set()
    for key, value in topics_data.items():
        topic = _parse_topic(str(key), value)
        if topic.path in seen:
            raise ConfigError(f"Duplicate topic path '{topic.path}'")
        seen.add(topic.path)
        topics.append(topic)

    return WikiNavConfig(
        root=root,
        extension=extension,
        strict=strict,
        topics=topics,
        sections=sections,
    )


def _parse_topic(raw_path: str, value: Any) -> TopicConfig:
    path = raw_path.strip().strip("/")
    if not path:
        raise ConfigError("Topic paths must be non-empty")

    role_name: Optional[str] = None
    if isinstance(value, dict):
        label = _as_str(value.get("label"))
        role_name = _as_str(value.get("role"))
    else:
        label = _as_str(value)

    if not label or not label.strip():
        raise ConfigError(f"Topic '{path}' needs a non-empty label")

    if role_name is None:
        role = infer_role(path)
    else:
        try:
            role = TopicRole(role_name.strip().lower())
        except ValueError as exc:
            choices = ", ".join(member.value for member in TopicRole)
            raise ConfigError(
                f"Topic '{path}' has unknown role '{role_name}' (expected one of: {choices})"
            ) from exc

    return TopicConfig(path=path, label=label.strip(), role=role)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "WikiNavConfig",
    "config_from_mapping",
    "infer_role",
    "load_config",
]
