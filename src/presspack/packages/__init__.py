"""Package types and discovery."""

from .base import Package
from .manager import PackageManager
from .plugin import Plugin

__all__ = ["Package", "PackageManager", "Plugin"]
