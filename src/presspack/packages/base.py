"""Base package class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Package(ABC):
    """An installed WordPress asset exposed as a Composer package."""

    @abstractmethod
    def get_basename(self) -> str:
        """Relative path from the asset root to the main file."""
        pass

    @abstractmethod
    def get_slug(self) -> str:
        """Identifier-safe package slug."""
        pass

    @abstractmethod
    def get_type(self) -> str:
        """Composer package type."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_author(self) -> str:
        pass

    @abstractmethod
    def get_author_uri(self) -> str:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_homepage(self) -> str:
        pass

    @abstractmethod
    def get_version(self) -> str:
        pass

    @abstractmethod
    def get_file(self) -> str:
        """Absolute path to the main file."""
        pass

    @abstractmethod
    def get_path(self) -> str:
        """Absolute path to the package on disk."""
        pass

    @abstractmethod
    def is_installed(self) -> bool:
        """Check whether the package exists on disk."""
        pass

    def get_package_name(self, vendor: str) -> str:
        """Composer package name, e.g. ``presspack/akismet``."""
        return f"{vendor}/{self.get_slug()}"

    def to_dict(self, vendor: str) -> dict[str, Any]:
        """Build a Composer-style package record.

        Args:
            vendor: Vendor prefix for the package name

        Returns:
            Package record suitable for a packages.json document
        """
        authors = []
        if self.get_author():
            authors.append({
                "name": self.get_author(),
                "homepage": self.get_author_uri(),
            })

        return {
            "name": self.get_package_name(vendor),
            "type": self.get_type(),
            "version": self.get_version(),
            "description": self.get_description(),
            "homepage": self.get_homepage(),
            "authors": authors,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_basename()!r})"
