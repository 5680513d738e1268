"""Plugin package."""

from __future__ import annotations

import logging
import posixpath
import threading
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

from presspack.config import get_settings
from presspack.headers import read_plugin_data
from presspack.packages.base import Package
from presspack.slug import sanitize_title_with_dashes

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

PLUGIN_TYPE = "wordpress-plugin"


def _in_root(basename: str) -> bool:
    return posixpath.dirname(basename) in ("", ".")


class Plugin(Package):
    """A plugin installed under the plugins directory.

    Identity (basename, slug, paths) is fixed at construction without
    touching the filesystem. Header metadata is read from the main file the
    first time a field is requested and cached for the life of the object;
    later changes to the file are not picked up.
    """

    def __init__(
        self,
        basename: str,
        plugins_dir: str | Path | None = None,
        reader: Callable[[str], dict[str, str]] | None = None,
    ) -> None:
        """Initialize plugin.

        Args:
            basename: Relative path from the plugins directory to the main
                plugin file, e.g. ``akismet/akismet.php`` or ``hello.php``
            plugins_dir: Plugins root; defaults to the configured one
            reader: Header reader; defaults to :func:`read_plugin_data`
                limited to the configured header size
        """
        if not basename:
            raise ValueError("Plugin basename must not be empty")

        if plugins_dir is None or reader is None:
            settings = get_settings()
            if plugins_dir is None:
                plugins_dir = settings.plugins_dir
            if reader is None:
                reader = partial(read_plugin_data, max_bytes=settings.header_bytes)

        self._basename = basename
        self._plugins_dir = str(plugins_dir)
        self._reader = reader
        self._data: dict[str, str] | None = None
        self._lock = threading.Lock()

        # May not match the slug in the wordpress.org directory
        if _in_root(basename):
            slug = posixpath.basename(basename)
            if slug.endswith(".php"):
                slug = slug[: -len(".php")]
        else:
            slug = posixpath.dirname(basename)
        self._slug = sanitize_title_with_dashes(slug)

    @property
    def plugins_dir(self) -> str:
        """Plugins root this plugin is resolved against."""
        return self._plugins_dir

    def is_installed(self) -> bool:
        """Check whether the main plugin file exists."""
        return Path(self.get_file()).is_file()

    def get_author(self) -> str:
        """Plugin author."""
        return self.get_data("Author")

    def get_author_uri(self) -> str:
        """URL of the plugin author."""
        return self.get_data("AuthorURI")

    def get_description(self) -> str:
        """Plugin description."""
        return self.get_data("Description")

    def get_basename(self) -> str:
        """Relative path from the plugins directory to the main file."""
        return self._basename

    def get_file(self) -> str:
        """Full path to the main plugin file."""
        return self._plugins_dir.rstrip("/") + "/" + self._basename

    def get_homepage(self) -> str:
        """Plugin homepage."""
        return self.get_data("PluginURI")

    def get_name(self) -> str:
        """Plugin name."""
        return self.get_data("Name")

    def get_path(self) -> str:
        """Path to the plugin directory.

        A single-file plugin in the root of the plugins directory has no
        directory of its own, so the full path to the file is returned.
        """
        plugin_file = self.get_file()
        if _in_root(self._basename):
            return plugin_file
        return posixpath.dirname(plugin_file)

    def get_slug(self) -> str:
        """Slug from the plugin directory, or the file name for single-file plugins."""
        return self._slug

    def get_type(self) -> str:
        """Composer package type."""
        return PLUGIN_TYPE

    def get_version(self) -> str:
        """Plugin version."""
        return self.get_data("Version")

    def get_text_domain(self) -> str:
        """Gettext text domain."""
        return self.get_data("TextDomain")

    def get_requires_wp(self) -> str:
        """Minimum WordPress version."""
        return self.get_data("RequiresWP")

    def get_requires_php(self) -> str:
        """Minimum PHP version."""
        return self.get_data("RequiresPHP")

    def is_network_only(self) -> bool:
        """Whether the plugin can only be activated network-wide."""
        return self.get_data("Network").lower() == "true"

    def get_data(self, prop: str) -> str:
        """Look up a header field.

        The headers are read once, on first use. Possible fields include
        Name, PluginURI, Description, Author, AuthorURI and Version.

        Args:
            prop: Header field key

        Returns:
            The field value, or an empty string if the plugin has no such
            header
        """
        if self._data is None:
            with self._lock:
                if self._data is None:
                    logger.debug(f"Loading headers for plugin {self._basename}")
                    self._data = dict(self._reader(self.get_file()) or {})
        return self._data.get(prop, "")
