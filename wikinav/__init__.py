"""Sidebar navigation generation for documentation wikis."""

from .config import ConfigError, WikiNavConfig, load_config
from .models import Document, DocumentRole, NavEntry, NavGroup, TopicConfig, TopicRole
from .orchestrator import NavigationBuilder, NavigationResult, build_nav_menu
from .scanner import NavigationError, TopicNotFoundError, TopicScanner
from .sidebar import TopicSidebarBuilder
from .titles import extract_title

__all__ = [
    "ConfigError",
    "Document",
    "DocumentRole",
    "NavEntry",
    "NavGroup",
    "NavigationBuilder",
    "NavigationError",
    "NavigationResult",
    "TopicConfig",
    "TopicNotFoundError",
    "TopicRole",
    "TopicScanner",
    "TopicSidebarBuilder",
    "WikiNavConfig",
    "build_nav_menu",
    "extract_title",
    "load_config",
]
