"""Package manager for discovering installed plugins."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Any

from thefuzz import fuzz, process

from presspack.config import Settings, get_settings
from presspack.headers import read_plugin_data
from presspack.slug import sanitize_title_with_dashes

from .plugin import Plugin

logger = logging.getLogger(__name__)


class PackageManager:
    """Discovers plugins under a plugins directory and keeps them by basename."""

    def __init__(
        self,
        plugins_dir: str | Path | None = None,
        settings: Settings | None = None,
        threshold: int = 60,
    ) -> None:
        """Initialize package manager.

        Args:
            plugins_dir: Plugins root; overrides the one in ``settings``
            settings: Configuration; defaults to the process-wide settings
            threshold: Minimum similarity score (0-100) for suggestions
        """
        self.settings = settings or get_settings()
        self.plugins_dir = Path(plugins_dir or self.settings.plugins_dir)
        self.threshold = threshold
        self._reader = partial(read_plugin_data, max_bytes=self.settings.header_bytes)
        self._plugins: dict[str, Plugin] | None = None

    def discover(self) -> list[str]:
        """Find the basenames of installed plugins.

        Looks at PHP files in the plugins root and one directory below it.
        A file is a plugin's main file when its headers carry a plugin name.

        Returns:
            Sorted list of plugin basenames
        """
        if not self.plugins_dir.is_dir():
            logger.warning(f"Plugins directory does not exist: {self.plugins_dir}")
            return []

        candidates: list[Path] = []
        for entry in self.plugins_dir.iterdir():
            if entry.name.startswith("."):
                continue
            if entry.is_dir():
                candidates.extend(
                    f for f in entry.glob("*.php")
                    if f.is_file() and not f.name.startswith(".")
                )
            elif entry.is_file() and entry.suffix == ".php":
                candidates.append(entry)

        discovered = []
        for plugin_file in candidates:
            headers = self._reader(plugin_file)
            if not headers.get("Name"):
                continue
            discovered.append(plugin_file.relative_to(self.plugins_dir).as_posix())

        logger.debug(f"Discovered {len(discovered)} plugins in {self.plugins_dir}")
        return sorted(discovered)

    def load(self) -> dict[str, Plugin]:
        """Build plugin objects for every discovered plugin.

        Returns:
            Plugins keyed by basename, ordered by plugin name
        """
        if self._plugins is not None:
            return self._plugins

        plugins = [
            Plugin(basename, plugins_dir=self.plugins_dir, reader=self._reader)
            for basename in self.discover()
        ]
        plugins.sort(key=lambda p: p.get_name().lower())
        self._plugins = {p.get_basename(): p for p in plugins}
        return self._plugins

    def refresh(self) -> dict[str, Plugin]:
        """Drop cached plugins and rescan the plugins directory."""
        self._plugins = None
        return self.load()

    def all(self) -> list[Plugin]:
        """Get all installed plugins."""
        return list(self.load().values())

    def get(self, basename: str) -> Plugin | None:
        """Get a plugin by basename."""
        return self.load().get(basename)

    def get_by_slug(self, slug: str) -> Plugin | None:
        """Get a plugin by slug.

        Several main files in one directory share its slug; the one with the
        lowest basename is returned.
        """
        matches = [p for p in self.load().values() if p.get_slug() == slug]
        if not matches:
            return None
        return min(matches, key=lambda p: p.get_basename())

    def find(self, name: str) -> Plugin | None:
        """Get a plugin by basename, falling back to its slug."""
        return self.get(name) or self.get_by_slug(name)

    def suggest(self, query: str, limit: int = 3) -> list[tuple[str, int]]:
        """Find plugin slugs similar to a query.

        Args:
            query: Slug or name to match
            limit: Maximum number of results

        Returns:
            List of (slug, score) tuples
        """
        slugs = [p.get_slug() for p in self.load().values()]
        if not slugs:
            return []

        matches = process.extract(
            query.lower(),
            slugs,
            scorer=fuzz.ratio,
            limit=limit,
        )
        return [(match, score) for match, score in matches if score >= self.threshold]

    def to_dict(self) -> dict[str, Any]:
        """Build a Composer-style packages document for all plugins.

        Plugins are taken in basename order. When a package name is already
        taken by a plugin in the same directory, the later one is suffixed
        with its file name, e.g. ``acme/suite-extra``.
        """
        vendor = self.settings.vendor
        packages: dict[str, dict[str, Any]] = {}

        for plugin in sorted(self.load().values(), key=lambda p: p.get_basename()):
            record = plugin.to_dict(vendor)
            name = record["name"]
            if name in packages:
                stem = sanitize_title_with_dashes(Path(plugin.get_basename()).stem)
                name = f"{record['name']}-{stem}"
                suffix = 2
                while name in packages:
                    name = f"{record['name']}-{stem}-{suffix}"
                    suffix += 1
                logger.warning(
                    f"Package name {record['name']} is already used, "
                    f"publishing {plugin.get_basename()} as {name}"
                )
                record["name"] = name
            packages[name] = record

        return {"packages": packages}
